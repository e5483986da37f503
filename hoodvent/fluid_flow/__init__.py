from .cross_section import CrossSection, Circular, Rectangular
from .materials import DuctMaterial, get_material
from .fittings import (
    FixedLoss,
    TransitionLoss,
    FittingKind,
    FITTINGS,
    HOOD_ENTRY_ZETA,
    Outlet,
    get_zeta
)
from .layout import Shape, DuctSegment, DuctFitting, DuctLayout
from .pressure_drop import (
    ElementLoss,
    PressureDropResult,
    calculate_pressure_drop,
    element_step
)
from .schedule import DuctSchedule, DuctScheduleFactory, kitchen_duct_schedule
from .sizing import (
    TARGET_VELOCITY,
    recommend_duct_diameter,
    recommend_rectangular_width
)
