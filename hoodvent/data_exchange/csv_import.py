"""Import of appliance data from CSV-files.

The appliance table may be preceded by other lines (e.g. the summary block of
a CSV-file exported by this package): the header row is searched for by its
appliance-name column. If no such row exists, the first line is taken as the
header row. The table ends at the first empty row.
"""
from typing import List
import csv
from pathlib import Path
from hoodvent import Quantity
from hoodvent.logging import ModuleLogger
from hoodvent.diagnostics import DiagnosticList, CSVImportError
from hoodvent.kitchen_ventilation.appliances import (
    KitchenAppliance,
    ApplianceList,
    EnergySource,
    GasType,
    ConsumptionUnit,
    SENSIBLE_FACTORS,
    DEFAULT_APPLIANCE_TYPE
)
from .display_names import (
    APPLIANCE_TYPES,
    GAS_TYPES,
    HEADER_SYNONYMS,
    GAS_UNIT_SYNONYMS,
    NAME_HEADER_MARKERS,
    normalize_header,
    find_key
)

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


def _find_header_index(lines: List[str]) -> int:
    for i, line in enumerate(lines):
        if any(marker in line.lower() for marker in NAME_HEADER_MARKERS):
            return i
    return 0


def _parse_float(text: str | None) -> float | None:
    if text is None:
        return None
    text = text.strip().replace(',', '.')
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _match_appliance_type(text: str, diagnostics: DiagnosticList, source: str) -> str:
    key = find_key(APPLIANCE_TYPES, text)
    if key is None and text.strip().lower() in SENSIBLE_FACTORS:
        key = text.strip().lower()
    if key is None:
        if text.strip():
            diagnostics.warning(
                'unknown_appliance_type',
                f"equipment type '{text}' not recognized, using "
                f"'{DEFAULT_APPLIANCE_TYPE}'",
                source
            )
        key = DEFAULT_APPLIANCE_TYPE
    return key


def _match_gas_type(text: str, diagnostics: DiagnosticList, source: str) -> GasType:
    key = find_key(GAS_TYPES, text)
    if key is not None:
        return GasType.from_key(key)
    t = text.strip().lower()
    if 'propan' in t:
        return GasType.PROPANE
    if 'butan' in t:
        return GasType.BUTANE
    if t and 'natural' not in t:
        diagnostics.warning(
            'unknown_gas_type',
            f"gas type '{text}' not recognized, assuming natural gas",
            source
        )
    return GasType.NATURAL_GAS


def _match_gas_unit(text: str, gas_type: GasType) -> ConsumptionUnit:
    key = GAS_UNIT_SYNONYMS.get(text.strip().lower())
    unit = ConsumptionUnit.from_key(key) if key else None
    return unit or ConsumptionUnit.default_for(gas_type)


def _create_appliance(
    fields: dict[str, str],
    diagnostics: DiagnosticList,
    row_number: int
) -> KitchenAppliance:
    source = f"row {row_number}"
    name = fields.get('name', '').strip()
    appliance_type = _match_appliance_type(fields.get('appliance_type', ''), diagnostics, source)
    gas_usage = _parse_float(fields.get('gas_usage'))
    electric_usage = _parse_float(fields.get('electric_usage'))
    f_sen = _parse_float(fields.get('sensible_factor'))
    appliance = KitchenAppliance(
        name=name,
        appliance_type=appliance_type,
        sensible_factor=f_sen
    )
    if gas_usage is not None and gas_usage > 0.0:
        gas_type = _match_gas_type(fields.get('gas_type', ''), diagnostics, source)
        unit = _match_gas_unit(fields.get('gas_unit', ''), gas_type)
        appliance.energy_source = EnergySource.GAS
        appliance.gas_type = gas_type
        appliance.gas_consumption = unit(gas_usage)
        if electric_usage is not None and electric_usage > 0.0:
            diagnostics.info(
                'electric_usage_ignored',
                f"'{name}' has a gas usage; its electric usage is ignored",
                source
            )
    else:
        appliance.energy_source = EnergySource.ELECTRIC
        appliance.electric_power = Q_(electric_usage or 0.0, 'kW')
    return appliance


def read_appliances(
    text: str,
    diagnostics: DiagnosticList | None = None
) -> List[KitchenAppliance]:
    """Parses the appliance table in `text` and returns the appliances.

    Parameters
    ----------
    text:
        Contents of a CSV-file.
    diagnostics:
        Optional list to which diagnostics are added (unrecognized equipment
        types and gas types).

    Raises
    ------
    CSVImportError
        If no header row is recognized or if the table has no data rows.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticList(logger)
    lines = text.splitlines()
    start = _find_header_index(lines)
    rows = [row for row in csv.reader(lines[start:])]
    while rows and not any(cell.strip() for cell in rows[0]):
        rows.pop(0)
    if not rows:
        raise CSVImportError("the file contains no data")
    header = [HEADER_SYNONYMS.get(normalize_header(cell)) for cell in rows[0]]
    if not any(header):
        raise CSVImportError("no appliance table header recognized")

    appliances = []
    for i, row in enumerate(rows[1:], start=start + 2):
        if not any(cell.strip() for cell in row):
            break
        fields = {
            field: value
            for field, value in zip(header, row)
            if field is not None
        }
        if not any(v.strip() for v in fields.values()):
            continue
        appliances.append(_create_appliance(fields, diagnostics, i))
    if not appliances:
        raise CSVImportError("no appliance rows found")
    logger.info(f"{len(appliances)} appliance(s) read")
    return appliances


def import_appliances(
    file_path: Path | str,
    appliances: ApplianceList,
    diagnostics: DiagnosticList | None = None
) -> ApplianceList:
    """Reads the appliances from a CSV-file and replaces the contents of
    `appliances` with them. If the file cannot be parsed, `CSVImportError` is
    raised and `appliances` is left untouched.
    """
    with open(file_path, encoding='utf-8-sig', newline='') as f:
        text = f.read()
    new_appliances = read_appliances(text, diagnostics)
    appliances.replace_all(new_appliances)
    return appliances
