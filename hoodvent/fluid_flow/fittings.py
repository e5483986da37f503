"""Resistance coefficients of duct fittings, exhaust outlets and the hood
entry.

The resistance coefficient (zeta or K) of a fitting refers to the velocity
pressure upstream of the fitting: dp = zeta * rho * V_up ** 2 / 2.

A fitting kind is either a `FixedLoss`, which has a constant resistance
coefficient (elbows, dampers), or a `TransitionLoss`, which changes the
cross-section of the duct and whose resistance coefficient depends on the
upstream and downstream cross-sectional areas.
"""
from typing import Callable
from dataclasses import dataclass
from enum import Enum
import math
from hoodvent.diagnostics import DiagnosticList


def _invalid(A_up: float, A_down: float) -> bool:
    # NaN fails both comparisons
    return not (A_up > 0.0 and A_down > 0.0) or math.isinf(A_up) or math.isinf(A_down)


def sudden_contraction(A_up: float, A_down: float) -> float:
    """Resistance coefficient of a sudden contraction. Zero if the transition
    does not contract or if an area is invalid.
    """
    if _invalid(A_up, A_down) or A_down >= A_up:
        return 0.0
    sigma = A_down / A_up
    if sigma < 0.2:
        return 0.4 * (1.0 - sigma)
    if sigma < 0.5:
        return 0.3 * (1.0 - sigma)
    return 0.2 * (1.0 - sigma)


def sudden_expansion(A_up: float, A_down: float) -> float:
    """Resistance coefficient of a sudden expansion (Borda-Carnot). Zero if
    the transition does not expand or if an area is invalid.
    """
    if _invalid(A_up, A_down) or A_up >= A_down:
        return 0.0
    return (1.0 - A_up / A_down) ** 2


def gradual_expansion_15deg(A_up: float, A_down: float) -> float:
    """Resistance coefficient of a diffuser with an angle of about 15°."""
    if _invalid(A_up, A_down) or A_up >= A_down:
        return 0.0
    return 0.25 * (1.0 - A_up / A_down) ** 2 + 0.02


def gradual_contraction_30deg(A_up: float, A_down: float) -> float:
    """Resistance coefficient of a reducer with an angle of about 30°."""
    if _invalid(A_up, A_down) or A_down >= A_up:
        return 0.0
    return 0.05


@dataclass(frozen=True)
class FixedLoss:
    zeta: float


@dataclass(frozen=True)
class TransitionLoss:
    """Fitting that changes the cross-section of the duct. `func` takes the
    upstream and downstream areas (same unit) and returns the resistance
    coefficient.
    """
    func: Callable[[float, float], float]


FittingKind = FixedLoss | TransitionLoss


FITTINGS: dict[str, FittingKind] = {
    # elbows (R/D = centerline radius / diameter)
    'elbow90_r_d_1_5': FixedLoss(0.25),
    'elbow90_r_d_1_0': FixedLoss(0.40),
    'elbow90_r_d_2_0': FixedLoss(0.20),
    'elbow90_mitred_novanes': FixedLoss(1.2),
    'elbow45_r_d_1_5': FixedLoss(0.15),
    # transitions
    'transition_sudden_contraction': TransitionLoss(sudden_contraction),
    'transition_sudden_expansion': TransitionLoss(sudden_expansion),
    'transition_gradual_expansion_15deg': TransitionLoss(gradual_expansion_15deg),
    'transition_gradual_contraction_30deg': TransitionLoss(gradual_contraction_30deg),
    # dampers
    'damper_butterfly_fully_open': FixedLoss(0.35),
    'damper_butterfly_45deg': FixedLoss(1.7),
    'damper_gate_fully_open': FixedLoss(0.15),
}

# resistance coefficient of the air entering the first duct from the hood
# plenum
HOOD_ENTRY_ZETA = 0.5


def get_fitting_kind(
    key: str,
    diagnostics: DiagnosticList | None = None,
    source: str = ''
) -> FittingKind | None:
    """Returns the fitting kind with the given key, or None if the key is
    unknown.
    """
    kind = FITTINGS.get(key)
    if kind is None and diagnostics is not None:
        diagnostics.warning(
            'unknown_fitting',
            f"unknown fitting kind '{key}', its loss is ignored",
            source
        )
    return kind


def is_transition(key: str) -> bool:
    return isinstance(FITTINGS.get(key), TransitionLoss)


def get_zeta(kind: FittingKind, A_up: float = 0.0, A_down: float = 0.0) -> float:
    """Returns the resistance coefficient of a fitting kind. The areas are
    only used by transitions.
    """
    match kind:
        case FixedLoss(zeta=zeta):
            return zeta
        case TransitionLoss(func=func):
            return func(A_up, A_down)
    raise TypeError(f"unsupported fitting kind {kind!r}")


class Outlet(Enum):
    """Exhaust outlets at the end of the duct system, with their resistance
    coefficient referred to the velocity pressure in the last duct.
    """
    WEATHER_CAP = ('weather_cap', 1.0)
    LOW_LOSS_LOUVER = ('low_loss_louver', 0.5)
    BIRD_SCREEN = ('bird_screen', 0.7)
    OPEN = ('open', 0.0)
    VERTICAL_STACK = ('vertical_stack', 0.05)
    GOOSENECK = ('gooseneck', 2.0)

    def __init__(self, key: str, zeta: float):
        self.key = key
        self.zeta = zeta

    @classmethod
    def from_key(cls, key: str) -> 'Outlet | None':
        for outlet in cls:
            if outlet.key == key:
                return outlet
        return None


def get_outlet_zeta(
    outlet: 'Outlet | str',
    diagnostics: DiagnosticList | None = None
) -> float:
    """Returns the resistance coefficient of an outlet. An unknown outlet has
    zero resistance.
    """
    if isinstance(outlet, Outlet):
        return outlet.zeta
    found = Outlet.from_key(outlet)
    if found is None:
        if diagnostics is not None:
            diagnostics.warning(
                'unknown_outlet',
                f"unknown outlet '{outlet}', its loss is ignored",
                'outlet'
            )
        return 0.0
    return found.zeta
