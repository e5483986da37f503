"""Tests for hoodvent.kitchen_ventilation.appliances: power and sensible heat."""

import pytest

from hoodvent import Quantity
from hoodvent.diagnostics import DiagnosticList, Severity
from hoodvent.kitchen_ventilation.appliances import (
    ApplianceList,
    ApplianceStatus,
    ConsumptionUnit,
    EnergySource,
    GasType,
    KitchenAppliance,
    SENSIBLE_FACTORS,
    calc_appliance_load,
    calc_appliance_power,
    calc_heat_load,
)

Q_ = Quantity


def _gas(consumption: Quantity, gas_type=GasType.NATURAL_GAS, **kwargs) -> KitchenAppliance:
    return KitchenAppliance(
        name='gas appliance',
        energy_source=EnergySource.GAS,
        gas_type=gas_type,
        gas_consumption=consumption,
        **kwargs,
    )


def _electric(P_kW: float, f_sen: float | None = 0.5, **kwargs) -> KitchenAppliance:
    return KitchenAppliance(
        name='electric appliance',
        energy_source=EnergySource.ELECTRIC,
        electric_power=Q_(P_kW, 'kW'),
        sensible_factor=f_sen,
        **kwargs,
    )


class TestAppliancePower:
    def test_electric_power_passes_through(self):
        P, status = calc_appliance_power(_electric(10.0))
        assert P.to('kW').m == pytest.approx(10.0)
        assert status is ApplianceStatus.OK

    def test_natural_gas_per_volume(self):
        P, status = calc_appliance_power(_gas(ConsumptionUnit.M3_PER_HOUR(2.0)))
        assert P.to('kW').m == pytest.approx(20.0)
        assert status is ApplianceStatus.OK

    def test_propane_per_mass(self):
        P, _ = calc_appliance_power(_gas(ConsumptionUnit.KG_PER_HOUR(1.0), GasType.PROPANE))
        assert P.to('kW').m == pytest.approx(12.8)

    def test_gas_type_given_by_key(self):
        P, _ = calc_appliance_power(_gas(ConsumptionUnit.KG_PER_HOUR(2.0), 'butane'))
        assert P.to('kW').m == pytest.approx(25.2)

    def test_power_in_kw_passes_through(self):
        P, _ = calc_appliance_power(_gas(ConsumptionUnit.KW(15.0), GasType.PROPANE))
        assert P.to('kW').m == pytest.approx(15.0)

    def test_btu_per_hour_conversion(self):
        P, _ = calc_appliance_power(_gas(ConsumptionUnit.BTU_PER_HOUR(10000.0)))
        assert P.to('kW').m == pytest.approx(10000.0 * 0.000293071, rel=1e-5)

    def test_unit_mismatch_gives_zero_and_warning(self):
        diagnostics = DiagnosticList()
        P, status = calc_appliance_power(
            _gas(ConsumptionUnit.M3_PER_HOUR(1.0), GasType.PROPANE),
            diagnostics,
        )
        assert P.to('kW').m == 0.0
        assert status is ApplianceStatus.UNIT_MISMATCH
        [d] = diagnostics.with_code('unit_mismatch')
        assert d.severity is Severity.WARNING

    def test_no_consumption_is_distinguished_from_mismatch(self):
        diagnostics = DiagnosticList()
        P, status = calc_appliance_power(_gas(None), diagnostics)
        assert P.to('kW').m == 0.0
        assert status is ApplianceStatus.NO_CONSUMPTION
        [d] = diagnostics.with_code('no_consumption')
        assert d.severity is Severity.INFO

    def test_missing_electric_power(self):
        appliance = KitchenAppliance(energy_source=EnergySource.ELECTRIC)
        _, status = calc_appliance_power(appliance, DiagnosticList())
        assert status is ApplianceStatus.NO_CONSUMPTION

    def test_unknown_gas_type_falls_back_to_natural_gas(self):
        diagnostics = DiagnosticList()
        P, status = calc_appliance_power(
            _gas(ConsumptionUnit.M3_PER_HOUR(1.0), 'hydrogen'),
            diagnostics,
        )
        assert P.to('kW').m == pytest.approx(10.0)
        assert status is ApplianceStatus.OK
        assert diagnostics.with_code('unknown_gas_type')

    def test_gas_fields_ignored_for_electric_appliance(self):
        appliance = _electric(3.0, gas_consumption=ConsumptionUnit.M3_PER_HOUR(5.0))
        P, _ = calc_appliance_power(appliance)
        assert P.to('kW').m == pytest.approx(3.0)


class TestSensibleHeat:
    def test_sensible_heat_is_power_times_factor(self):
        load = calc_appliance_load(_electric(10.0, 0.5))
        assert load.Q_dot_sen.to('kW').m == pytest.approx(5.0)

    def test_default_factor_of_appliance_type(self):
        load = calc_appliance_load(_electric(10.0, None, appliance_type='fryer_open_pot'))
        assert load.sensible_factor == pytest.approx(0.55)

    def test_unknown_appliance_type_uses_other(self):
        diagnostics = DiagnosticList()
        load = calc_appliance_load(_electric(10.0, None, appliance_type='toaster'), diagnostics)
        assert load.sensible_factor == SENSIBLE_FACTORS['other']
        assert diagnostics.with_code('unknown_appliance_type')

    def test_factor_out_of_range_is_clamped(self):
        diagnostics = DiagnosticList()
        load = calc_appliance_load(_electric(10.0, 1.5), diagnostics)
        assert load.sensible_factor == 1.0
        assert load.Q_dot_sen.to('kW').m == pytest.approx(10.0)
        assert diagnostics.with_code('sensible_factor_out_of_range')

    def test_default_factors_within_bounds(self):
        assert all(0.20 <= f <= 0.75 for f in SENSIBLE_FACTORS.values())
        assert SENSIBLE_FACTORS['other'] == 0.50


class TestHeatLoad:
    def test_single_appliance(self):
        result = calc_heat_load([_electric(10.0, 0.5)], f_simul=1.0)
        assert result.Q_dot_sen.to('kW').m == pytest.approx(5.0)

    def test_diversity_factor_applied_to_sum(self):
        result = calc_heat_load([_electric(10.0, 0.5), _electric(6.0, 0.5)], f_simul=0.8)
        assert result.Q_dot_sen_sum.to('kW').m == pytest.approx(8.0)
        assert result.Q_dot_sen.to('kW').m == pytest.approx(6.4)

    def test_empty_list_gives_zero(self):
        result = calc_heat_load([], f_simul=1.0)
        assert result.Q_dot_sen.to('kW').m == 0.0

    @pytest.mark.parametrize("f_simul", [0.0, -0.5, 1.01])
    def test_invalid_diversity_factor_raises(self, f_simul):
        with pytest.raises(ValueError):
            calc_heat_load([_electric(10.0)], f_simul=f_simul)


class TestApplianceList:
    def test_ids_are_assigned_in_order(self):
        appliances = ApplianceList()
        a = appliances.add(name='a')
        b = appliances.add(name='b')
        assert (a.ID, b.ID) == ('app-0', 'app-1')

    def test_ids_are_not_reused(self):
        appliances = ApplianceList()
        appliances.add(name='a')
        appliances.add(name='b')
        appliances.remove_by_id('app-0')
        c = appliances.add(name='c')
        assert c.ID == 'app-2'
        assert [a.name for a in appliances] == ['b', 'c']

    def test_remove_unknown_id_raises(self):
        with pytest.raises(KeyError):
            ApplianceList().remove_by_id('app-9')

    def test_replace_all(self):
        appliances = ApplianceList()
        appliances.add(name='old')
        appliances.replace_all([KitchenAppliance(name='x'), KitchenAppliance(name='y')])
        assert [a.name for a in appliances] == ['x', 'y']

    def test_get_table(self):
        appliances = ApplianceList()
        appliances.add(_electric(10.0, 0.5))
        appliances.add(_gas(ConsumptionUnit.M3_PER_HOUR(2.0), sensible_factor=0.6))
        df = appliances.get_table()
        assert len(df) == 2
        assert df['power [kW]'].tolist() == pytest.approx([10.0, 20.0])
        assert df['sensible heat [kW]'].tolist() == pytest.approx([5.0, 12.0])
        assert df['unit'].tolist() == ['', 'm³/h']
