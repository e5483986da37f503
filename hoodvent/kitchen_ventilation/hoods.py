"""Extraction hood archetypes and the configuration of the hood above the
cooking appliances.
"""
from dataclasses import dataclass
from enum import Enum
from hoodvent import Quantity

Q_ = Quantity


class HoodType(Enum):
    """Hood archetypes with the range of the hood factor, i.e. the extraction
    airflow per kW of sensible heat released by the appliances.

    A wall-mounted canopy has three sides closed by the wall and needs less
    air than an island canopy that is open on all four sides. An eyebrow hood
    is mounted directly on the appliance (e.g. an oven door).
    """
    WALL = ('wall', 150.0, 250.0)
    ISLAND = ('island', 250.0, 350.0)
    EYEBROW = ('eyebrow', 100.0, 200.0)

    def __init__(self, key: str, f_low: float, f_high: float):
        self.key = key
        self.hood_factor_low = Q_(f_low, 'm ** 3 / h / kW')
        self.hood_factor_high = Q_(f_high, 'm ** 3 / h / kW')

    @classmethod
    def from_key(cls, key: str) -> 'HoodType':
        for hood_type in cls:
            if hood_type.key == key:
                return hood_type
        raise ValueError(f"unknown hood type '{key}'")


class DutyLevel(Enum):
    """Cooking duty with the capture velocity required across the open face
    of a canopy hood.
    """
    LIGHT = Q_(0.30, 'm / s')
    MEDIUM = Q_(0.45, 'm / s')
    HEAVY = Q_(0.65, 'm / s')

    @property
    def face_velocity(self) -> Quantity:
        return self.value

    @classmethod
    def from_key(cls, key: str) -> 'DutyLevel':
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"unknown duty level '{key}'") from None


# Typical extraction airflow per meter of eyebrow hood. Offered to the user as
# a suggestion; it is not filled in automatically.
DEFAULT_EYEBROW_AIRFLOW_PER_METER = Q_(500.0, 'm ** 3 / h / m')


@dataclass
class HoodConfiguration:
    """Geometry and duty of the extraction hood.

    Attributes
    ----------
    hood_type:
        Archetype of the hood.
    length:
        Length of the hood along the cooking line.
    depth:
        Depth of the hood (wall and island hoods only).
    duty_level:
        Cooking duty under the hood (wall and island hoods only).
    airflow_per_meter:
        Extraction airflow per meter hood length (eyebrow hoods only).
    """
    hood_type: HoodType = HoodType.WALL
    length: Quantity | None = None
    depth: Quantity | None = None
    duty_level: DutyLevel = DutyLevel.MEDIUM
    airflow_per_meter: Quantity | None = None
