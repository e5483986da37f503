from enum import Enum
from hoodvent import Quantity
from hoodvent.diagnostics import DiagnosticList

Q_ = Quantity


class DuctMaterial(Enum):
    """Duct materials with their absolute wall roughness."""
    GALVANIZED = ('galvanized', 0.15)
    STAINLESS = ('stainless', 0.05)
    PVC = ('pvc', 0.005)
    ALUMINUM = ('aluminum', 0.03)
    BLACK_STEEL = ('black_steel', 0.05)
    FLEX_METAL_UNINSULATED = ('flex_metal_uninsulated', 1.5)  # can vary significantly

    def __init__(self, key: str, roughness: float):
        self.key = key
        self.roughness = Q_(roughness, 'mm')

    @classmethod
    def from_key(cls, key: str) -> 'DuctMaterial | None':
        for material in cls:
            if material.key == key:
                return material
        return None


DEFAULT_MATERIAL = DuctMaterial.GALVANIZED


def get_material(
    key: 'str | DuctMaterial',
    diagnostics: DiagnosticList | None = None,
    source: str = ''
) -> DuctMaterial:
    """Returns the duct material with the given key. An unknown key falls
    back to galvanized steel.
    """
    if isinstance(key, DuctMaterial):
        return key
    material = DuctMaterial.from_key(key)
    if material is None:
        if diagnostics is not None:
            diagnostics.warning(
                'unknown_material',
                f"unknown duct material '{key}', using the roughness of "
                f"{DEFAULT_MATERIAL.key}",
                source
            )
        material = DEFAULT_MATERIAL
    return material
