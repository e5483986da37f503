from typing import List, Dict, Optional
import math
import pandas as pd
from hoodvent import Quantity


class DuctSchedule:
    """Schedule of commercially available duct sizes."""

    def __init__(self, unit: str = 'mm', lookup_list: Optional[List[float]] = None):
        """Creates a `DuctSchedule` instance.

        Parameters
        ----------
        unit:
            The length unit in which the sizes of the schedule are expressed.
        lookup_list:
            The available sizes in ascending order.
        """
        self.lookup_list: List[float] = sorted(lookup_list or [])
        self.unit = unit

    @property
    def largest_size(self) -> Quantity:
        return Quantity(self.lookup_list[-1], self.unit)

    def get_closest_internal_size(self, calculated_size: Quantity) -> Quantity:
        """Get the internal size that is closest to the calculated size."""
        calculated_size = calculated_size.to(self.unit).magnitude
        delta = [
            abs(calculated_size - lookup_size)
            for lookup_size in self.lookup_list
        ]
        index = delta.index(min(delta))
        available_size = self.lookup_list[index]
        return Quantity(available_size, self.unit)

    def get_next_larger_size(self, calculated_size: Quantity) -> Quantity | None:
        """Get the smallest available size that is not smaller than the
        calculated size. Returns None if the calculated size exceeds the
        largest size of the schedule.
        """
        calculated_size = calculated_size.to(self.unit).magnitude
        for lookup_size in self.lookup_list:
            # tolerance for sizes that come back from a unit conversion
            if lookup_size >= calculated_size - 1e-9:
                return Quantity(lookup_size, self.unit)
        return None


# standard sizes of round kitchen exhaust ducts
kitchen_duct_schedule = DuctSchedule(lookup_list=[
    80.0, 100.0, 125.0, 150.0, 160.0, 180.0, 200.0, 224.0, 250.0,
    280.0, 300.0, 315.0, 355.0, 400.0, 450.0, 500.0, 560.0, 630.0,
    710.0, 800.0, 900.0, 1000.0
])  # mm

# sizes of rectangular ducts (one side)
rectangular_duct_schedule = DuctSchedule(lookup_list=(
    [i for i in range(100, 300, 25)]
    + [i for i in range(300, 800, 50)]
    + [i for i in range(800, 3000, 100)]
))  # mm


class DuctScheduleFactory:
    """Class for storing duct schedules at run-time and read user defined duct
    schedules from file.
    """
    schedules: Dict[str, DuctSchedule] = {
        'kitchen_circular': kitchen_duct_schedule,
        'default_rectangular': rectangular_duct_schedule
    }

    @classmethod
    def get(
        cls,
        name: str,
        file_path: Optional[str] = None,
        unit: str = 'mm'
    ) -> Optional[DuctSchedule]:
        """Get a schedule from a file or one of the default schedules.

        Parameters
        ----------
        name:
            Identifier of the schedule. The names of the default schedules
            already present are:
            - 'kitchen_circular' for round kitchen exhaust ducts
            - 'default_rectangular' for rectangular ducts
        file_path: optional, default None
            Path to a CSV-file with the commercially available sizes of a
            duct schedule.
        unit:
            The measuring unit in which the values in the file are expressed.

        Returns
        -------
        DuctSchedule, or None if `name` is unknown and no file is given.

        Notes
        -----
        The CSV-file must only contain a single list of values in the first
        column, starting at the first row (so don't use a header). Empty
        cells are ignored.
        """
        if name not in cls.schedules and file_path is not None:
            df = pd.read_csv(file_path, header=None)
            sizes = [
                float(v) for v in df.iloc[:, 0].tolist()
                if not math.isnan(float(v))
            ]
            cls.schedules[name] = DuctSchedule(unit, sizes)
        return cls.schedules.get(name)
