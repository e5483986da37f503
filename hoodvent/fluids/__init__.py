from .constants import (
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
    R_AIR
)

from .air import Air, AirState, STANDARD_AIR
