"""Export of a kitchen exhaust design to a single CSV-document.

The document consists of four blocks separated by an empty line:
1. a summary of the airflow calculation,
2. the appliance table (if there are appliances),
3. a summary of the pressure drop calculation,
4. the duct layout table (if the layout isn't empty).

Every field is enclosed in double quotes and lines end with CRLF.
"""
from typing import List
import csv
import io
import math
from datetime import date
from pathlib import Path
from hoodvent import Quantity
from hoodvent.diagnostics import DiagnosticList
from hoodvent.application import AppState, Results, evaluate
from hoodvent.kitchen_ventilation import CalculationMethod, HoodType, EnergySource, GasType
from hoodvent.kitchen_ventilation.appliances import KitchenAppliance, calc_appliance_load
from hoodvent.fluid_flow import DuctSegment, Shape, Circular, Rectangular, CrossSection
from .display_names import (
    APPLIANCE_TYPES,
    GAS_TYPES,
    HOOD_TYPES,
    DUTY_LEVELS,
    OUTLETS,
    MATERIALS,
    FITTINGS,
    LAYOUT_HEADERS,
    get_label,
    get_name
)

NOT_AVAILABLE = 'N/A'


def _fmt(q: Quantity | None, unit: str, fmt: str = 'g') -> str:
    if q is None or math.isnan(q.magnitude):
        return NOT_AVAILABLE
    return format(q.to(unit).magnitude, fmt)


def _summary_rows(state: AppState, results: Results, lang: str) -> List[List[str]]:
    def label(key: str) -> str:
        return get_label(key, lang)

    hood = state.hood
    if state.method is CalculationMethod.HEAT_LOAD:
        method_name = label('method_heat_load')
    else:
        method_name = label('method_hood_dimension')
    rows = [
        [label('title')],
        [label('method'), method_name],
        [label('hood_type'), get_name(HOOD_TYPES, hood.hood_type.key, lang)],
    ]
    if state.method is CalculationMethod.HEAT_LOAD:
        rows.append([label('diversity_factor'), f"{state.f_simul:g}"])
        if results.heat_load is not None:
            rows.append([label('total_sensible'), f"{_fmt(results.heat_load.Q_dot_sen, 'kW', '.2f')} kW"])
        else:
            rows.append([label('total_sensible'), NOT_AVAILABLE])
        rows.append([
            label('hood_factor'),
            f"{_fmt(hood.hood_type.hood_factor_low, 'm ** 3 / h / kW', '.0f')} - "
            f"{_fmt(hood.hood_type.hood_factor_high, 'm ** 3 / h / kW', '.0f')} m³/h/kW"
        ])
    else:
        rows.append([label('hood_length'), f"{_fmt(hood.length, 'm')} m"])
        if hood.hood_type is HoodType.EYEBROW:
            rows.append([label('airflow_per_meter'), f"{_fmt(hood.airflow_per_meter, 'm ** 3 / h / m')} m³/h/m"])
        else:
            rows.append([label('hood_depth'), f"{_fmt(hood.depth, 'm')} m"])
            rows.append([label('duty_level'), get_name(DUTY_LEVELS, hood.duty_level.name.lower(), lang)])
    airflow = results.airflow
    if airflow is None:
        rows.append([label('airflow'), NOT_AVAILABLE])
    elif airflow.is_range:
        rows.append([
            label('airflow'),
            f"{_fmt(airflow.low, 'm ** 3 / h', '.0f')} - {_fmt(airflow.high, 'm ** 3 / h', '.0f')} m³/h"
        ])
    else:
        rows.append([label('airflow'), f"{_fmt(airflow.high, 'm ** 3 / h', '.0f')} m³/h"])
    return rows


def _appliance_row(appliance: KitchenAppliance, lang: str) -> List[str]:
    load = calc_appliance_load(appliance, DiagnosticList())
    if appliance.energy_source is EnergySource.GAS:
        gas_type = appliance.gas_type
        gas_key = gas_type.key if isinstance(gas_type, GasType) else (gas_type or '')
        q = appliance.gas_consumption
        unit = appliance.gas_unit
        if q is None:
            unit_text = NOT_AVAILABLE
        elif unit is not None:
            unit_text = unit.display_name
        else:
            unit_text = f"{q.units:~P}"
        gas_name = get_name(GAS_TYPES, gas_key, lang)
        gas_usage = f"{q.magnitude:g}" if q is not None else ''
        electric = ''
    else:
        gas_name, gas_usage, unit_text = '', '', NOT_AVAILABLE
        electric = _fmt(appliance.electric_power, 'kW')
        if electric == NOT_AVAILABLE:
            electric = ''
    return [
        appliance.name,
        get_name(APPLIANCE_TYPES, appliance.appliance_type, lang),
        gas_name,
        gas_usage,
        unit_text,
        electric,
        _fmt(load.P, 'kW', '.2f'),
        f"{load.sensible_factor:.2f}",
        _fmt(load.Q_dot_sen, 'kW', '.2f'),
    ]


def _appliance_rows(state: AppState, lang: str) -> List[List[str]]:
    if not len(state.appliances):
        return []
    header = [
        get_label(key, lang) for key in (
            'th_name', 'th_type', 'th_gas_type', 'th_gas_usage', 'th_gas_unit',
            'th_electric', 'th_total_power', 'th_sensible_factor', 'th_sensible_heat'
        )
    ]
    return [header] + [_appliance_row(a, lang) for a in state.appliances]


def _pressure_rows(state: AppState, results: Results, lang: str) -> List[List[str]]:
    def label(key: str) -> str:
        return get_label(key, lang)

    rows = [
        [label('pressure_title')],
        [label('exhaust_temperature'), f"{_fmt(state.T_exhaust, 'degC')} °C"],
        [label('manual_airflow_toggle'), 'ON' if state.manual_airflow else 'OFF'],
    ]
    if state.manual_airflow:
        rows.append([label('manual_airflow'), f"{_fmt(state.V_dot_manual, 'm ** 3 / h')} m³/h"])
    d = results.recommended_diameter
    rows.append([label('recommended_duct'), f"Ø {_fmt(d, 'mm', '.0f')} mm" if d is not None else NOT_AVAILABLE])
    rows.append([label('filter'), f"{_fmt(state.filter_pressure_drop, 'Pa')} Pa"])
    rows.append([label('outlet'), get_name(OUTLETS, state.outlet.key, lang)])
    dp = results.pressure_drop
    if dp is None:
        error = results.errors.get('pressure_drop', '')
        rows.append([label('velocity'), NOT_AVAILABLE])
        rows.append([label('total_pressure'), f"{label('error')} {error}".strip()])
    else:
        rows.append([label('velocity'), f"{_fmt(dp.velocity, 'm / s', '.2f')} m/s"])
        rows.append([label('total_pressure'), f"{_fmt(dp.total, 'Pa', '.1f')} Pa"])
    return rows


def _size_text(cs: CrossSection | None) -> str:
    if isinstance(cs, Circular):
        return _fmt(cs.diameter, 'mm')
    if isinstance(cs, Rectangular):
        return f"{_fmt(cs.width, 'mm')}x{_fmt(cs.height, 'mm')}"
    return ''


def _layout_rows(state: AppState, lang: str) -> List[List[str]]:
    if not len(state.layout):
        return []
    rows = [
        [get_label('layout_title', lang)],
        [get_label('ds_order', lang), get_label('ds_type', lang), *LAYOUT_HEADERS],
    ]
    for i, element in enumerate(state.layout, start=1):
        if isinstance(element, DuctSegment):
            if element.shape is Shape.ROUND:
                dim1, dim2 = _fmt(element.diameter, 'mm'), ''
            else:
                dim1, dim2 = _fmt(element.width, 'mm'), _fmt(element.height, 'mm')
            rows.append([
                str(i),
                get_label('segment', lang),
                get_label(element.shape.value, lang),
                dim1,
                dim2,
                _fmt(element.length, 'm'),
                get_name(MATERIALS, element.material, lang),
            ])
        else:
            if element.is_transition:
                up, down = _size_text(element.upstream), _size_text(element.downstream)
            else:
                up, down = '', ''
            rows.append([
                str(i),
                get_label('fitting', lang),
                get_name(FITTINGS, element.kind, lang),
                up,
                down,
                str(element.count),
                '',
            ])
    return rows


def export_csv(state: AppState, results: Results | None = None) -> str:
    """Returns the CSV-document of the design described by `state`. If
    `results` is None, the state is evaluated first.
    """
    results = results if results is not None else evaluate(state)
    lang = state.language if state.language in ('en', 'pt') else 'en'
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator='\r\n')
    writer.writerows(_summary_rows(state, results, lang))
    writer.writerow([])
    appliance_rows = _appliance_rows(state, lang)
    if appliance_rows:
        writer.writerows(appliance_rows)
        writer.writerow([])
    writer.writerows(_pressure_rows(state, results, lang))
    writer.writerow([])
    writer.writerows(_layout_rows(state, lang))
    return output.getvalue()


def default_file_name() -> str:
    return f"kitchen_airflow_estimate_{date.today().isoformat()}.csv"


def write_csv(
    state: AppState,
    file_path: Path | str | None = None,
    results: Results | None = None
) -> Path:
    """Writes the CSV-document of the design to a file and returns its path.
    If `file_path` is None, the file is written to the current working
    directory with a dated default name.
    """
    file_path = Path(file_path) if file_path is not None else Path(default_file_name())
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(export_csv(state, results))
    return file_path
