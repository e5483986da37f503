from typing import Optional
import math
from abc import ABC, abstractmethod
import numpy as np
from scipy.optimize import fsolve
from hoodvent import Quantity, UNITS
from .schedule import DuctSchedule

u = UNITS


class CrossSection(ABC):

    def __init__(self):
        self.schedule: Optional[DuctSchedule] = None

    @classmethod
    @abstractmethod
    def create(cls, *args, **kwargs):
        """Create `CrossSection` instance."""
        ...

    @property
    @abstractmethod
    def area(self) -> Quantity:
        """Get cross-sectional area."""
        ...

    @property
    @abstractmethod
    def equivalent_diameter(self) -> Quantity:
        """Get equivalent diameter of cross-section."""
        ...

    @property
    @abstractmethod
    def hydraulic_diameter(self) -> Quantity:
        """Get hydraulic diameter of cross-section."""
        ...

    @property
    def is_valid(self) -> bool:
        """True if the cross-section has a positive area. A cross-section
        with a missing (NaN) or non-positive dimension is not valid.
        """
        A = self.area.to('m ** 2').magnitude
        return not math.isnan(A) and A > 0.0


def _is_positive(q: Quantity | None) -> bool:
    return q is not None and not math.isnan(q.magnitude) and q.magnitude > 0.0


class Circular(CrossSection):

    def __init__(self):
        super().__init__()
        self.diameter: Quantity = float('nan') * u.mm

    @classmethod
    def create(
        cls,
        diameter: Quantity | None = None,
        schedule: Optional[DuctSchedule] = None
    ) -> 'Circular':
        """
        Create a round cross-section.

        If `schedule` is specified, the closest commercially available
        diameter is looked up in the duct schedule.
        """
        obj = cls()
        obj.schedule = schedule
        if diameter is not None:
            if isinstance(obj.schedule, DuctSchedule) and _is_positive(diameter):
                obj.diameter = obj.schedule.get_closest_internal_size(diameter)
            else:
                obj.diameter = diameter
        return obj

    @property
    def area(self) -> Quantity:
        if not _is_positive(self.diameter):
            return 0.0 * u.m ** 2
        return math.pi * self.diameter ** 2 / 4.0

    @property
    def equivalent_diameter(self) -> Quantity:
        return self.diameter

    @property
    def hydraulic_diameter(self) -> Quantity:
        return self.diameter

    def __repr__(self) -> str:
        return f"Circular(D={self.diameter.to('mm').magnitude:g} mm)"


class Rectangular(CrossSection):

    def __init__(self):
        super().__init__()
        self.height: Quantity = float('nan') * u.mm
        self.width: Quantity = float('nan') * u.mm

    @classmethod
    def create(
        cls,
        height: Quantity,
        width: Quantity | None = None,
        equivalent_diameter: Quantity | None = None,
        schedule: Optional[DuctSchedule] = None
    ) -> 'Rectangular':
        """Creates a rectangular cross-section.

        To create a rectangular cross-section there are two options:
        1. Just specify height and width of the cross-section and leave
        `equivalent_diameter` and `schedule` to be None.
        2. Specify height and equivalent diameter of the cross-section.
        The width will be calculated from these specifications. If `schedule` is
        not None, the commercially available width closest to the calculated
        width will be used.
        """
        obj = cls()
        obj.schedule = schedule
        obj.height = height
        if equivalent_diameter is not None and _is_positive(equivalent_diameter):
            obj.width = obj._calculate_width(height, equivalent_diameter)
        elif width is not None:
            obj.width = width
        return obj

    def _calculate_width(
        self,
        height: Quantity,
        equivalent_diameter: Quantity
    ) -> Quantity:
        h = height.to('m').magnitude
        d_eq = equivalent_diameter.to('m').magnitude

        def eq(unknowns: np.ndarray) -> np.ndarray:
            w = abs(unknowns[0])
            out = 1.3 * (w * h) ** 0.625 / (w + h) ** 0.25 - d_eq
            return np.array([out])

        roots = fsolve(eq, np.array([d_eq]))
        width = abs(float(roots[0]))
        width = width * u.m
        if isinstance(self.schedule, DuctSchedule):
            width = self.schedule.get_closest_internal_size(width)
        return width.to('mm')

    @property
    def area(self) -> Quantity:
        if not (_is_positive(self.width) and _is_positive(self.height)):
            return 0.0 * u.m ** 2
        return self.height * self.width

    @property
    def equivalent_diameter(self) -> Quantity:
        """Equivalent diameter of Huebscher: the diameter of a round duct
        with the same friction loss at the same airflow.
        """
        return (
            1.3 * (self.width * self.height) ** 0.625
            / (self.width + self.height) ** 0.25
        )

    @property
    def hydraulic_diameter(self) -> Quantity:
        return 2 * self.width * self.height / (self.width + self.height)

    def __repr__(self) -> str:
        return (
            f"Rectangular(W={self.width.to('mm').magnitude:g} mm, "
            f"H={self.height.to('mm').magnitude:g} mm)"
        )
