from .appliances import (
    EnergySource,
    GasType,
    ConsumptionUnit,
    ApplianceStatus,
    SENSIBLE_FACTORS,
    KitchenAppliance,
    ApplianceList,
    ApplianceLoad,
    HeatLoadResult,
    calc_appliance_power,
    calc_heat_load
)
from .hoods import (
    HoodType,
    DutyLevel,
    HoodConfiguration,
    DEFAULT_EYEBROW_AIRFLOW_PER_METER
)
from .airflow import (
    CalculationMethod,
    AirflowEstimate,
    AirflowComparison,
    estimate_airflow,
    heat_load_method,
    hood_dimension_method,
    compare_estimates
)
