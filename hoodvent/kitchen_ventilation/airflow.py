"""Estimation of the extraction airflow of a kitchen hood.

Two independent methods are available:

- Heat-load method: the design sensible heat load of the appliances under
  the hood is multiplied with the hood factor of the hood archetype. As the
  hood factor is given as a range, the result is a range too.
- Hood-dimension method: the airflow is derived from the geometry of the
  hood. For wall and island canopies the airflow follows from the open face
  area of the hood and the capture velocity required for the cooking duty.
  For eyebrow hoods the airflow is proportional to the hood length.

The `high` value of the estimate of the selected method is used as the
design airflow of the exhaust duct system.
"""
from dataclasses import dataclass
from enum import Enum
from hoodvent import Quantity
from .hoods import HoodType, HoodConfiguration

Q_ = Quantity


class CalculationMethod(Enum):
    HEAT_LOAD = 'heat_load'
    HOOD_DIMENSION = 'hood_dimension'


@dataclass(frozen=True)
class AirflowEstimate:
    """Estimated extraction airflow range. For the hood-dimension method
    `low` and `high` are equal.
    """
    method: CalculationMethod
    low: Quantity
    high: Quantity

    @property
    def is_range(self) -> bool:
        return self.low != self.high


def _is_positive(q: Quantity | None) -> bool:
    # NaN compares False
    return q is not None and q.m > 0.0


def heat_load_method(Q_dot_sen: Quantity, hood_type: HoodType) -> AirflowEstimate:
    """Returns the extraction airflow range for the design sensible heat load
    `Q_dot_sen` of the appliances under a hood of type `hood_type`.
    """
    if not _is_positive(Q_dot_sen):
        zero = Q_(0.0, 'm ** 3 / h')
        return AirflowEstimate(CalculationMethod.HEAT_LOAD, zero, zero)
    low = (Q_dot_sen * hood_type.hood_factor_low).to('m ** 3 / h')
    high = (Q_dot_sen * hood_type.hood_factor_high).to('m ** 3 / h')
    return AirflowEstimate(CalculationMethod.HEAT_LOAD, low, high)


def hood_dimension_method(hood: HoodConfiguration) -> AirflowEstimate:
    """Returns the extraction airflow derived from the geometry of the hood.

    Notes
    -----
    Eyebrow hood: airflow = length * airflow per meter. The depth and duty
    level of the hood are ignored.

    Wall or island canopy: airflow = length * depth * face velocity. The
    airflow per meter is ignored.

    A missing or non-positive input results in zero airflow.
    """
    V_dot = Q_(0.0, 'm ** 3 / h')
    if hood.hood_type is HoodType.EYEBROW:
        if _is_positive(hood.length) and _is_positive(hood.airflow_per_meter):
            V_dot = (hood.length * hood.airflow_per_meter).to('m ** 3 / h')
    elif _is_positive(hood.length) and _is_positive(hood.depth):
        A_face = hood.length * hood.depth
        V_dot = (A_face * hood.duty_level.face_velocity).to('m ** 3 / h')
    return AirflowEstimate(CalculationMethod.HOOD_DIMENSION, V_dot, V_dot)


def estimate_airflow(
    method: CalculationMethod,
    hood: HoodConfiguration,
    Q_dot_sen: Quantity | None = None
) -> AirflowEstimate:
    """Returns the airflow estimate of the selected calculation method."""
    match method:
        case CalculationMethod.HEAT_LOAD:
            return heat_load_method(
                Q_dot_sen if Q_dot_sen is not None else Q_(0.0, 'kW'),
                hood.hood_type
            )
        case CalculationMethod.HOOD_DIMENSION:
            return hood_dimension_method(hood)
    raise ValueError(f"unknown calculation method {method}")


@dataclass(frozen=True)
class AirflowComparison:
    """Difference between the high value of the heat-load estimate and the
    hood-dimension estimate.

    Attributes
    ----------
    heat_load:
        High value of the heat-load method.
    hood_dimension:
        Value of the hood-dimension method.
    difference:
        `heat_load - hood_dimension`.
    ratio:
        `heat_load / hood_dimension`; None if the hood-dimension estimate is
        zero.
    """
    heat_load: Quantity
    hood_dimension: Quantity
    difference: Quantity
    ratio: float | None

    def __str__(self) -> str:
        if self.ratio is None:
            return (
                f"heat-load method: {self.heat_load.to('m ** 3 / h').m:.0f} m³/h; "
                f"hood-dimension method gives no airflow"
            )
        return (
            f"heat-load method: {self.heat_load.to('m ** 3 / h').m:.0f} m³/h, "
            f"hood-dimension method: {self.hood_dimension.to('m ** 3 / h').m:.0f} m³/h "
            f"(difference {self.difference.to('m ** 3 / h').m:+.0f} m³/h, "
            f"ratio {self.ratio:.2f})"
        )


def compare_estimates(
    heat_load: AirflowEstimate,
    hood_dimension: AirflowEstimate
) -> AirflowComparison:
    """Compares the high value of the heat-load estimate with the
    hood-dimension estimate.
    """
    V_hl = heat_load.high.to('m ** 3 / h')
    V_hd = hood_dimension.high.to('m ** 3 / h')
    ratio = V_hl.m / V_hd.m if V_hd.m > 0.0 else None
    return AirflowComparison(V_hl, V_hd, V_hl - V_hd, ratio)
