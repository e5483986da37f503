"""Application state of a kitchen exhaust design and its evaluation.

A host (a form, a notebook, a script) owns an `AppState` object, modifies
it and calls `evaluate(state)` after each modification to get a fresh
`Results` object. `evaluate` does not keep any state between calls.

Example
-------
    state = AppState(method=CalculationMethod.HEAT_LOAD)
    state.appliances.add(
        name='fryer',
        appliance_type='fryer_open_pot',
        electric_power=Q_(10, 'kW'),
        sensible_factor=0.5
    )
    state.layout.add_segment(diameter=Q_(300, 'mm'), length=Q_(5, 'm'))
    results = evaluate(state)
    print(results.pressure_drop.total)
"""
from dataclasses import dataclass, field
from hoodvent import Quantity
from hoodvent.logging import ModuleLogger
from hoodvent.diagnostics import DiagnosticList
from hoodvent.kitchen_ventilation import (
    ApplianceList,
    HeatLoadResult,
    HoodConfiguration,
    CalculationMethod,
    AirflowEstimate,
    AirflowComparison,
    calc_heat_load,
    estimate_airflow,
    compare_estimates
)
from hoodvent.fluid_flow import (
    DuctLayout,
    Outlet,
    PressureDropResult,
    calculate_pressure_drop,
    recommend_duct_diameter
)

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


@dataclass
class AppState:
    """All inputs of a kitchen exhaust design.

    Attributes
    ----------
    method:
        Calculation method that determines the design airflow.
    f_simul:
        Diversity factor of the appliances (heat-load method).
    hood:
        Configuration of the extraction hood.
    appliances:
        Appliances under the hood (heat-load method).
    layout:
        Layout of the exhaust duct system.
    T_exhaust:
        Temperature of the exhaust air.
    filter_pressure_drop:
        Pressure drop across the grease filters.
    outlet:
        Exhaust outlet at the end of the duct system.
    manual_airflow:
        If True, `V_dot_manual` is used as the design airflow of the duct
        system instead of the estimated airflow.
    V_dot_manual:
        Airflow entered by the user.
    language:
        Language of exported documents ('en' or 'pt').
    """
    method: CalculationMethod = CalculationMethod.HEAT_LOAD
    f_simul: float = 1.0
    hood: HoodConfiguration = field(default_factory=HoodConfiguration)
    appliances: ApplianceList = field(default_factory=ApplianceList)
    layout: DuctLayout = field(default_factory=DuctLayout)
    T_exhaust: Quantity = field(default_factory=lambda: Q_(20.0, 'degC'))
    filter_pressure_drop: Quantity = field(default_factory=lambda: Q_(0.0, 'Pa'))
    outlet: Outlet = Outlet.WEATHER_CAP
    manual_airflow: bool = False
    V_dot_manual: Quantity | None = None
    language: str = 'en'


@dataclass
class Results:
    """Results of the evaluation of an `AppState`.

    A section that could not be calculated is None and has an entry in
    `errors` with the same name.
    """
    heat_load: HeatLoadResult | None = None
    heat_load_estimate: AirflowEstimate | None = None
    hood_dimension_estimate: AirflowEstimate | None = None
    airflow: AirflowEstimate | None = None
    comparison: AirflowComparison | None = None
    design_airflow: Quantity = field(default_factory=lambda: Q_(0.0, 'm ** 3 / h'))
    recommended_diameter: Quantity | None = None
    pressure_drop: PressureDropResult | None = None
    errors: dict[str, str] = field(default_factory=dict)
    diagnostics: DiagnosticList = field(default_factory=DiagnosticList)


def _capture(results: Results, section: str, func, *args, **kwargs):
    try:
        return func(*args, **kwargs)
    except Exception as err:
        logger.exception(f"calculation of '{section}' failed")
        results.errors[section] = str(err) or type(err).__name__
        return None


def _design_airflow(state: AppState, airflow: AirflowEstimate | None) -> Quantity:
    if state.manual_airflow:
        V = state.V_dot_manual
        if V is not None and V.m > 0.0:
            return V.to('m ** 3 / h')
        return Q_(0.0, 'm ** 3 / h')
    if airflow is None:
        return Q_(0.0, 'm ** 3 / h')
    return airflow.high


def evaluate(state: AppState) -> Results:
    """Calculates the heat load, the airflow estimates, the recommended duct
    size and the pressure drop of the exhaust system described by `state`.

    Errors raised while calculating a section are caught: the section is
    left None and the error message is stored in `Results.errors`. Sections
    that don't depend on the failed section are still calculated.
    """
    diagnostics = DiagnosticList(logger)
    results = Results(diagnostics=diagnostics)

    results.heat_load = _capture(
        results, 'heat_load',
        calc_heat_load, state.appliances, state.f_simul, diagnostics
    )
    if results.heat_load is not None:
        results.heat_load_estimate = _capture(
            results, 'heat_load_estimate',
            estimate_airflow, CalculationMethod.HEAT_LOAD, state.hood,
            results.heat_load.Q_dot_sen
        )
    results.hood_dimension_estimate = _capture(
        results, 'hood_dimension_estimate',
        estimate_airflow, CalculationMethod.HOOD_DIMENSION, state.hood
    )
    estimates = {
        CalculationMethod.HEAT_LOAD: results.heat_load_estimate,
        CalculationMethod.HOOD_DIMENSION: results.hood_dimension_estimate
    }
    results.airflow = estimates.get(state.method)
    if results.heat_load_estimate is not None and results.hood_dimension_estimate is not None:
        results.comparison = _capture(
            results, 'comparison',
            compare_estimates,
            results.heat_load_estimate,
            results.hood_dimension_estimate
        )

    design_airflow = _capture(
        results, 'design_airflow',
        _design_airflow, state, results.airflow
    )
    if design_airflow is not None:
        results.design_airflow = design_airflow
    results.recommended_diameter = _capture(
        results, 'recommended_diameter',
        recommend_duct_diameter, results.design_airflow, diagnostics=diagnostics
    )
    results.pressure_drop = _capture(
        results, 'pressure_drop',
        calculate_pressure_drop,
        state.layout,
        results.design_airflow,
        T=state.T_exhaust,
        filter_pressure_drop=state.filter_pressure_drop,
        outlet=state.outlet,
        diagnostics=diagnostics
    )
    return results
