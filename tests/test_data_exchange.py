"""Tests for hoodvent.data_exchange: CSV import and export of a design."""

import pytest

from hoodvent import Quantity
from hoodvent.application import AppState
from hoodvent.diagnostics import CSVImportError, DiagnosticList
from hoodvent.data_exchange import export_csv, import_appliances, read_appliances, write_csv
from hoodvent.fluid_flow import Circular, Shape
from hoodvent.kitchen_ventilation import (
    ApplianceList,
    CalculationMethod,
    ConsumptionUnit,
    EnergySource,
    GasType,
    HoodConfiguration,
    HoodType,
)

Q_ = Quantity


def _state(language: str = 'en') -> AppState:
    state = AppState(language=language)
    state.appliances.add(
        name='Fryer, "big"',
        appliance_type='fryer_open_pot',
        energy_source=EnergySource.ELECTRIC,
        electric_power=Q_(12.5, 'kW'),
    )
    state.appliances.add(
        name='Wok',
        appliance_type='wok_range_gas',
        energy_source=EnergySource.GAS,
        gas_type=GasType.PROPANE,
        gas_consumption=ConsumptionUnit.KG_PER_HOUR(1.5),
    )
    state.appliances.add(
        name='Range',
        appliance_type='range_open_burner_gas',
        energy_source=EnergySource.GAS,
        gas_type=GasType.NATURAL_GAS,
        gas_consumption=ConsumptionUnit.M3_PER_HOUR(2.2),
    )
    state.layout.add_segment(diameter=Q_(300.0, 'mm'), length=Q_(3.0, 'm'))
    state.layout.add_fitting('elbow90_r_d_1_5', quantity=2)
    state.layout.add_fitting('transition_sudden_expansion', downstream=Circular.create(Q_(355.0, 'mm')))
    state.layout.add_segment(shape=Shape.RECTANGULAR, width=Q_(400.0, 'mm'), height=Q_(300.0, 'mm'))
    return state


def _summary(appliance):
    q = appliance.gas_consumption if appliance.energy_source is EnergySource.GAS else appliance.electric_power
    return appliance.name, appliance.appliance_type, appliance.energy_source, q.units, q.magnitude


class TestRoundTrip:
    @pytest.mark.parametrize("language", ['en', 'pt'])
    def test_export_then_import_reproduces_appliances(self, language):
        state = _state(language)
        imported = read_appliances(export_csv(state))
        assert len(imported) == 3
        for original, copy in zip(state.appliances, imported):
            name, type_key, source, unit, value = _summary(copy)
            o_name, o_type_key, o_source, o_unit, o_value = _summary(original)
            assert (name, type_key, source, unit) == (o_name, o_type_key, o_source, o_unit)
            assert value == pytest.approx(o_value)

    def test_gas_type_survives_round_trip(self):
        imported = read_appliances(export_csv(_state()))
        assert imported[1].gas_type is GasType.PROPANE
        assert imported[2].gas_type is GasType.NATURAL_GAS

    def test_file_round_trip(self, tmp_path):
        path = write_csv(_state(), tmp_path / 'design.csv')
        appliances = ApplianceList()
        import_appliances(path, appliances)
        assert [a.ID for a in appliances] == ['app-0', 'app-1', 'app-2']


class TestExport:
    def test_crlf_line_endings_and_quoted_fields(self):
        text = export_csv(_state())
        assert text.endswith('\r\n')
        lines = text.split('\r\n')
        assert all(line.startswith('"') for line in lines if line)

    def test_blocks_present(self):
        text = export_csv(_state())
        assert 'Kitchen Hood Airflow Estimator' in text
        assert '"Appliance Name","Equipment Type"' in text
        assert 'Duct System & Pressure Drop' in text
        assert '"Shape/Fitting","Dim1(mm)/Up D(mm)"' in text
        assert '"Manual Airflow (m³/h):"' not in text

    def test_transition_sizes_in_layout_table(self):
        text = export_csv(_state())
        assert '"Sudden Expansion","300","355","1",""' in text

    def test_portuguese_labels(self):
        text = export_csv(_state('pt'))
        assert '"Nome Equipamento"' in text
        assert 'Fritadeira de Cuba Aberta' in text

    def test_hood_dimension_summary(self):
        state = AppState(
            method=CalculationMethod.HOOD_DIMENSION,
            hood=HoodConfiguration(HoodType.EYEBROW, Q_(2.0, 'm'), airflow_per_meter=Q_(500.0, 'm ** 3 / h / m')),
        )
        text = export_csv(state)
        assert '"Hood Dimensions Method"' in text
        assert '"1000 m³/h"' in text
        assert 'Appliance Name' not in text

    def test_manual_airflow_row(self):
        state = _state()
        state.manual_airflow = True
        state.V_dot_manual = Q_(1800.0, 'm ** 3 / h')
        assert '"Use Manual Airflow:","ON"' in export_csv(state)


class TestImport:
    def test_plain_portuguese_table(self):
        text = (
            'Nome Equipamento,Tipo Equipamento,Tipo Gás,Consumo Gás,Unid.,Consumo Elétrico (kW)\n'
            'Fogão,Placa / Fogão (Geral),Gás Natural,1.5,,\n'
            'Forno,Forno (Geral),,,,8\n'
        )
        stove, oven = read_appliances(text)
        assert stove.appliance_type == 'range_top'
        assert stove.gas_type is GasType.NATURAL_GAS
        assert stove.gas_consumption.to('m ** 3 / h').m == pytest.approx(1.5)
        assert oven.energy_source is EnergySource.ELECTRIC
        assert oven.electric_power.to('kW').m == pytest.approx(8.0)

    def test_gas_unit_defaults_from_gas_type(self):
        text = 'Appliance Name,Gas Type,Gas Usage\nWok,Propane,2\n'
        [wok] = read_appliances(text)
        assert wok.gas_unit is ConsumptionUnit.KG_PER_HOUR

    def test_btu_unit(self):
        text = 'Appliance Name,Gas Type,Gas Usage,Gas Unit\nGrill,Natural Gas,30000,BTU/h\n'
        [grill] = read_appliances(text)
        assert grill.gas_unit is ConsumptionUnit.BTU_PER_HOUR

    def test_quoted_fields(self):
        text = 'Appliance Name,Electric Usage (kW)\n"Fryer, ""big""",10\n'
        [fryer] = read_appliances(text)
        assert fryer.name == 'Fryer, "big"'

    def test_unknown_types_fall_back(self):
        diagnostics = DiagnosticList()
        text = 'Appliance Name,Equipment Type,Gas Type,Gas Usage\nX,Toaster,Hydrogen,1\n'
        [x] = read_appliances(text, diagnostics)
        assert x.appliance_type == 'other'
        assert x.gas_type is GasType.NATURAL_GAS
        assert diagnostics.with_code('unknown_appliance_type')
        assert diagnostics.with_code('unknown_gas_type')

    def test_header_searched_below_other_lines(self):
        text = '"Some title"\n"Method","x"\n\n"Appliance Name","Electric Usage (kW)"\n"A","1"\n'
        [a] = read_appliances(text)
        assert a.name == 'A'

    @pytest.mark.parametrize("text", [
        '',
        'foo,bar\n1,2\n',
        'Appliance Name,Gas Usage\n',
        'Appliance Name,Gas Usage\n\n\n',
    ])
    def test_malformed_file_raises(self, text):
        with pytest.raises(CSVImportError):
            read_appliances(text)

    def test_failed_import_leaves_list_untouched(self, tmp_path):
        path = tmp_path / 'bad.csv'
        path.write_text('foo,bar\n1,2\n', encoding='utf-8')
        appliances = ApplianceList()
        appliances.add(name='keep')
        with pytest.raises(CSVImportError):
            import_appliances(path, appliances)
        assert [a.name for a in appliances] == ['keep']
