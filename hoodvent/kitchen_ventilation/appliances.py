"""Kitchen appliances and the calculation of the sensible heat load released
under an extraction hood.

The power of each appliance is either its electric power consumption or the
power that corresponds with its gas consumption. Only the sensible part of
this power, i.e. the heat that drives the thermal plume above the appliance,
is taken into account to determine the required extraction airflow.
"""
from typing import List, Iterable
from dataclasses import dataclass, field
import math
from enum import Enum
import pandas as pd
import pint
from hoodvent import Quantity, UNITS
from hoodvent.logging import ModuleLogger
from hoodvent.diagnostics import DiagnosticList, Severity

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


class EnergySource(Enum):
    ELECTRIC = 'electric'
    GAS = 'gas'


class CalorificBasis(Enum):
    """Quantity of fuel to which a calorific value is referred."""
    PER_VOLUME = 'kWh / m ** 3'
    PER_MASS = 'kWh / kg'


class GasType(Enum):
    """Fuels with their net calorific value (lower heating value).

    The first element of each member is the key used in tables and
    CSV-files, the second its English display name.
    """
    NATURAL_GAS = ('natural_gas', 'Natural Gas', 10.0, CalorificBasis.PER_VOLUME)
    NATURAL_GAS_G25 = ('natural_gas_g25', 'Natural Gas G25', 8.6, CalorificBasis.PER_VOLUME)
    PROPANE_VOLUME = ('propane_m3', 'Propane (by volume)', 25.5, CalorificBasis.PER_VOLUME)
    BUTANE_VOLUME = ('butane_m3', 'Butane (by volume)', 32.0, CalorificBasis.PER_VOLUME)
    PROPANE = ('propane', 'Propane', 12.8, CalorificBasis.PER_MASS)
    BUTANE = ('butane', 'Butane', 12.6, CalorificBasis.PER_MASS)

    def __init__(self, key: str, display_name: str, hv: float, basis: CalorificBasis):
        self.key = key
        self.display_name = display_name
        self.basis = basis
        self.calorific_value = Q_(hv, basis.value)

    @classmethod
    def from_key(cls, key: str) -> 'GasType | None':
        for gas_type in cls:
            if gas_type.key == key:
                return gas_type
        return None


class ConsumptionUnit(Enum):
    """Units in which the gas consumption of an appliance can be entered."""
    M3_PER_HOUR = ('m3h', 'm³/h', 'm ** 3 / h')
    KG_PER_HOUR = ('kgh', 'kg/h', 'kg / h')
    KW = ('kw', 'kW', 'kW')
    BTU_PER_HOUR = ('btuh', 'BTU/h', 'Btu / h')

    def __init__(self, key: str, display_name: str, pint_unit: str):
        self.key = key
        self.display_name = display_name
        self.pint_unit = pint_unit

    def __call__(self, value: float) -> Quantity:
        """Returns `value` as a quantity expressed in this unit."""
        return Q_(value, self.pint_unit)

    @classmethod
    def from_key(cls, key: str) -> 'ConsumptionUnit | None':
        for unit in cls:
            if unit.key == key:
                return unit
        return None

    @classmethod
    def of(cls, quantity: Quantity) -> 'ConsumptionUnit | None':
        """Returns the member whose unit is the unit of `quantity`."""
        for unit in cls:
            if quantity.units == UNITS.Unit(unit.pint_unit):
                return unit
        return None

    @staticmethod
    def default_for(gas_type: GasType) -> 'ConsumptionUnit':
        """Consumption unit that matches the calorific basis of a fuel."""
        if gas_type.basis is CalorificBasis.PER_MASS:
            return ConsumptionUnit.KG_PER_HOUR
        return ConsumptionUnit.M3_PER_HOUR


# Approximate fraction of the total power of an appliance that is released as
# sensible heat.
SENSIBLE_FACTORS: dict[str, float] = {
    # fryers
    'fryer_open_pot': 0.55,
    'fryer_tube': 0.60,
    'fryer_pressure': 0.40,
    # grills & griddles
    'grill_charbroiler_radiant': 0.70,
    'grill_charbroiler_lava': 0.75,
    'griddle_plate': 0.60,
    'grill_clam_shell': 0.50,
    # ranges & hobs
    'range_open_burner_gas': 0.50,
    'range_hot_top_electric': 0.55,
    'range_induction': 0.45,
    'wok_range_gas': 0.65,
    # ovens
    'oven_convection': 0.40,
    'oven_deck': 0.35,
    'oven_combi': 0.50,
    'oven_pizza_conveyor': 0.40,
    'oven_rotisserie': 0.55,
    # steamers & boilers
    'steamer_pressureless': 0.30,
    'steamer_pressure': 0.25,
    'pasta_cooker': 0.40,
    'kettle_steam_jacketed': 0.30,
    # holding & warming
    'bain_marie': 0.40,
    'holding_cabinet_heated': 0.30,
    # other
    'dishwasher_conveyor_hooded': 0.20,  # mainly latent heat
    'other': 0.50,
    # general categories
    'fryer': 0.60,
    'grill': 0.70,
    'range_top': 0.50,
    'oven': 0.40,
    'steamer': 0.30,
}
DEFAULT_APPLIANCE_TYPE = 'other'


def get_default_sensible_factor(
    appliance_type: str,
    diagnostics: DiagnosticList | None = None,
    source: str = ''
) -> float:
    """Returns the default sensible heat factor of an appliance type. An
    unknown appliance type falls back to the factor of 'other'.
    """
    try:
        return SENSIBLE_FACTORS[appliance_type]
    except KeyError:
        if diagnostics is not None:
            diagnostics.warning(
                'unknown_appliance_type',
                f"unknown appliance type '{appliance_type}', "
                f"using the sensible factor of '{DEFAULT_APPLIANCE_TYPE}'",
                source
            )
        return SENSIBLE_FACTORS[DEFAULT_APPLIANCE_TYPE]


class ApplianceStatus(Enum):
    """Outcome of the power calculation of a single appliance."""
    OK = 'ok'
    NO_CONSUMPTION = 'no consumption'
    UNIT_MISMATCH = 'unit mismatch'


@dataclass
class KitchenAppliance:
    """Kitchen appliance under the extraction hood.

    Attributes
    ----------
    name:
        For identifying the appliance.
    appliance_type:
        Key in `SENSIBLE_FACTORS`.
    energy_source:
        Electric or gas. Depending on the energy source either the gas fields
        or the electric power field are used; the other fields are ignored.
    gas_type:
        The fuel of a gas appliance (a `GasType` member or its key).
    gas_consumption:
        Gas consumption of the appliance, expressed in one of the units of
        `ConsumptionUnit`: a volume flow rate (m³/h) for fuels with a
        calorific value per unit volume, a mass flow rate (kg/h) for fuels
        with a calorific value per unit mass, or directly a power (kW or
        BTU/h).
    electric_power:
        Rated electric power consumption of an electric appliance.
    sensible_factor:
        Fraction of the power released as sensible heat (0..1). If None, the
        default factor of `appliance_type` is used.
    ID:
        Identifier assigned by the `ApplianceList` the appliance belongs to.
    """
    name: str = ''
    appliance_type: str = DEFAULT_APPLIANCE_TYPE
    energy_source: EnergySource = EnergySource.ELECTRIC
    gas_type: GasType | str | None = None
    gas_consumption: Quantity | None = None
    electric_power: Quantity | None = None
    sensible_factor: float | None = None
    ID: str = ''

    @property
    def gas_unit(self) -> ConsumptionUnit | None:
        if self.gas_consumption is None:
            return None
        return ConsumptionUnit.of(self.gas_consumption)


@dataclass
class ApplianceLoad:
    """Calculated power and sensible heat of one appliance."""
    appliance: KitchenAppliance
    P: Quantity
    sensible_factor: float
    Q_dot_sen: Quantity
    status: ApplianceStatus


def _resolve_gas_type(
    appliance: KitchenAppliance,
    diagnostics: DiagnosticList
) -> GasType:
    gas_type = appliance.gas_type
    if isinstance(gas_type, GasType):
        return gas_type
    resolved = GasType.from_key(gas_type) if gas_type else None
    if resolved is None:
        diagnostics.warning(
            'unknown_gas_type',
            f"unknown gas type '{gas_type}', assuming "
            f"{GasType.NATURAL_GAS.display_name.lower()}",
            appliance.ID
        )
        resolved = GasType.NATURAL_GAS
    return resolved


def calc_appliance_power(
    appliance: KitchenAppliance,
    diagnostics: DiagnosticList | None = None
) -> tuple[Quantity, ApplianceStatus]:
    """Returns the power of an appliance in kW and the status of the
    calculation.

    A gas consumption given as a volume flow rate requires a fuel with a
    calorific value per unit volume, a mass flow rate requires a fuel with a
    calorific value per unit mass. If both don't match, the power of the
    appliance is set to zero and the status is `UNIT_MISMATCH`.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticList(logger)
    zero = Q_(0.0, 'kW')
    no_consumption = (
        f"no consumption entered for '{appliance.name or appliance.ID}'"
    )
    if appliance.energy_source is EnergySource.ELECTRIC:
        P = appliance.electric_power
        if P is None or not P.m > 0.0:
            diagnostics.info('no_consumption', no_consumption, appliance.ID)
            return zero, ApplianceStatus.NO_CONSUMPTION
        return P.to('kW'), ApplianceStatus.OK

    consumption = appliance.gas_consumption
    if consumption is None or not consumption.m > 0.0:
        diagnostics.info('no_consumption', no_consumption, appliance.ID)
        return zero, ApplianceStatus.NO_CONSUMPTION
    if consumption.check('[power]'):
        # consumption is already expressed as a power (kW, BTU/h)
        return consumption.to('kW'), ApplianceStatus.OK
    gas_type = _resolve_gas_type(appliance, diagnostics)
    try:
        P = (consumption * gas_type.calorific_value).to('kW')
    except pint.DimensionalityError:
        diagnostics.report(
            Severity.WARNING,
            'unit_mismatch',
            f"gas consumption in {consumption.units:~P} is incompatible "
            f"with the calorific value of {gas_type.display_name.lower()} "
            f"in {gas_type.calorific_value.units:~P}",
            appliance.ID
        )
        return zero, ApplianceStatus.UNIT_MISMATCH
    return P, ApplianceStatus.OK


def _resolve_sensible_factor(
    appliance: KitchenAppliance,
    diagnostics: DiagnosticList
) -> float:
    f_sen = appliance.sensible_factor
    if f_sen is None or math.isnan(f_sen):
        return get_default_sensible_factor(
            appliance.appliance_type,
            diagnostics,
            appliance.ID
        )
    if not 0.0 <= f_sen <= 1.0:
        clamped = min(max(f_sen, 0.0), 1.0)
        diagnostics.warning(
            'sensible_factor_out_of_range',
            f"sensible factor {f_sen} is outside [0, 1], "
            f"using {clamped}",
            appliance.ID
        )
        return clamped
    return f_sen


def calc_appliance_load(
    appliance: KitchenAppliance,
    diagnostics: DiagnosticList | None = None
) -> ApplianceLoad:
    """Returns the power and the sensible heat of a single appliance."""
    diagnostics = diagnostics if diagnostics is not None else DiagnosticList(logger)
    P, status = calc_appliance_power(appliance, diagnostics)
    f_sen = _resolve_sensible_factor(appliance, diagnostics)
    return ApplianceLoad(
        appliance=appliance,
        P=P,
        sensible_factor=f_sen,
        Q_dot_sen=f_sen * P,
        status=status
    )


@dataclass
class HeatLoadResult:
    """Sensible heat load of all appliances under the hood.

    Attributes
    ----------
    loads:
        Power and sensible heat of each appliance, in the order of the
        appliance list.
    Q_dot_sen_sum:
        Sum of the sensible heat of all appliances.
    f_simul:
        Diversity factor, i.e. the fraction of the installed appliances that
        is assumed to be in operation simultaneously.
    Q_dot_sen:
        Design sensible heat load: `f_simul * Q_dot_sen_sum`.
    diagnostics:
        Non-fatal messages produced during the calculation.
    """
    loads: list[ApplianceLoad]
    Q_dot_sen_sum: Quantity
    f_simul: float
    Q_dot_sen: Quantity
    diagnostics: DiagnosticList = field(default_factory=DiagnosticList)


def calc_heat_load(
    appliances: Iterable[KitchenAppliance],
    f_simul: float = 1.0,
    diagnostics: DiagnosticList | None = None
) -> HeatLoadResult:
    """Calculates the design sensible heat load of the appliances under an
    extraction hood.

    Parameters
    ----------
    appliances:
        The appliances under the hood.
    f_simul:
        Diversity factor, must lie in the interval (0, 1].
    diagnostics:
        Optional list to which diagnostics are added. If None, a new list is
        created.

    Raises
    ------
    ValueError
        If the diversity factor is not in the interval (0, 1].
    """
    if not 0.0 < f_simul <= 1.0:
        raise ValueError(
            f"diversity factor must lie in (0, 1], got {f_simul}"
        )
    diagnostics = diagnostics if diagnostics is not None else DiagnosticList(logger)
    loads = [calc_appliance_load(a, diagnostics) for a in appliances]
    Q_dot_sen_sum = sum((load.Q_dot_sen for load in loads), Q_(0.0, 'kW'))
    return HeatLoadResult(
        loads=loads,
        Q_dot_sen_sum=Q_dot_sen_sum,
        f_simul=f_simul,
        Q_dot_sen=f_simul * Q_dot_sen_sum,
        diagnostics=diagnostics
    )


class ApplianceList(List[KitchenAppliance]):
    """Ordered collection of the appliances under an extraction hood. Each
    appliance added to the list gets a unique ID ('app-0', 'app-1', ...).
    IDs are never reused after an appliance is removed.
    """

    def __init__(self, appliances: Iterable[KitchenAppliance] | None = None):
        super().__init__()
        self._counter = 0
        for appliance in appliances or ():
            self.add(appliance)

    def add(self, appliance: KitchenAppliance | None = None, **kwargs) -> KitchenAppliance:
        """Appends an appliance to the list and returns it. If `appliance`
        is None, a new `KitchenAppliance` is created from the keyword
        arguments.
        """
        if appliance is None:
            appliance = KitchenAppliance(**kwargs)
        appliance.ID = f"app-{self._counter}"
        self._counter += 1
        self.append(appliance)
        return appliance

    def remove_by_id(self, ID: str) -> None:
        """Removes the appliance with the given ID. Raises `KeyError` if no
        appliance has this ID.
        """
        for i, appliance in enumerate(self):
            if appliance.ID == ID:
                del self[i]
                return
        raise KeyError(f"no appliance with ID '{ID}'")

    def get(self, ID: str) -> KitchenAppliance:
        for appliance in self:
            if appliance.ID == ID:
                return appliance
        raise KeyError(f"no appliance with ID '{ID}'")

    def replace_all(self, appliances: Iterable[KitchenAppliance]) -> None:
        """Replaces the contents of the list in one step, e.g. with the
        appliances read from a CSV-file.
        """
        new_appliances = list(appliances)
        self.clear()
        for appliance in new_appliances:
            self.add(appliance)

    def get_table(self, f_simul: float = 1.0) -> pd.DataFrame:
        """Returns a Pandas DataFrame with the power and sensible heat of
        each appliance in the list.
        """
        result = calc_heat_load(self, f_simul)
        rows = []
        for load in result.loads:
            a = load.appliance
            is_gas = a.energy_source is EnergySource.GAS
            gas_type = a.gas_type if isinstance(a.gas_type, GasType) else GasType.from_key(a.gas_type or '')
            unit = a.gas_unit
            rows.append({
                'ID': a.ID,
                'name': a.name,
                'type': a.appliance_type,
                'source': a.energy_source.value,
                'gas type': gas_type.display_name if (is_gas and gas_type) else '',
                'gas consumption': a.gas_consumption.m if (is_gas and a.gas_consumption is not None) else float('nan'),
                'unit': unit.display_name if (is_gas and unit) else '',
                'electric [kW]': a.electric_power.to('kW').m if (not is_gas and a.electric_power is not None) else float('nan'),
                'power [kW]': load.P.to('kW').m,
                'sensible factor': load.sensible_factor,
                'sensible heat [kW]': load.Q_dot_sen.to('kW').m,
                'status': load.status.value
            })
        return pd.DataFrame(rows)
