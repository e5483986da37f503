"""Recommendation of the duct size for a given exhaust airflow."""
import math
from hoodvent import Quantity
from hoodvent.logging import ModuleLogger
from hoodvent.diagnostics import DiagnosticList
from .schedule import DuctSchedule, kitchen_duct_schedule
from .cross_section import Rectangular

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)

TARGET_VELOCITY = Q_(10.0, 'm / s')


def recommend_duct_diameter(
    V_dot: Quantity | None,
    v_target: Quantity = TARGET_VELOCITY,
    schedule: DuctSchedule = kitchen_duct_schedule,
    diagnostics: DiagnosticList | None = None
) -> Quantity | None:
    """Returns the smallest standard diameter of a round duct in which the
    mean velocity does not exceed `v_target`.

    Parameters
    ----------
    V_dot:
        Exhaust airflow.
    v_target:
        Target duct velocity.
    schedule:
        Schedule with the available duct diameters.
    diagnostics:
        Optional list to which diagnostics are added.

    Returns
    -------
    The recommended diameter, or None if the airflow is zero or missing. If
    the required diameter exceeds the largest size of the schedule, the
    largest size is returned and a warning is added to `diagnostics`.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticList(logger)
    V = V_dot.to('m ** 3 / s').magnitude if V_dot is not None else float('nan')
    v = v_target.to('m / s').magnitude
    if not V > 0.0 or not v > 0.0:
        return None
    A_min = V / v
    d_min = Q_(math.sqrt(4.0 * A_min / math.pi), 'm')
    d = schedule.get_next_larger_size(d_min)
    if d is None:
        d = schedule.largest_size
        diagnostics.warning(
            'duct_size_exceeded',
            f"the required diameter {d_min.to(schedule.unit):.0f~P} exceeds "
            f"the largest standard size {d:~P}",
            'sizing'
        )
    return d


def recommend_rectangular_width(
    V_dot: Quantity | None,
    height: Quantity,
    v_target: Quantity = TARGET_VELOCITY,
    schedule: DuctSchedule | None = None,
    diagnostics: DiagnosticList | None = None
) -> Quantity | None:
    """Returns the width of a rectangular duct with the given height that is
    equivalent (Huebscher) to the recommended round duct.

    If `schedule` is not None, the closest width of this schedule is
    returned.
    """
    d = recommend_duct_diameter(V_dot, v_target, diagnostics=diagnostics)
    if d is None:
        return None
    rect = Rectangular.create(height=height, equivalent_diameter=d, schedule=schedule)
    return rect.width
