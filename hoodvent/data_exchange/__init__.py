from .csv_import import read_appliances, import_appliances
from .csv_export import export_csv, write_csv
