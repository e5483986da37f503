"""Linear layout of the exhaust duct system between the hood and the outlet.

The layout is an ordered sequence of straight duct segments and fittings.
Air leaves element *i* through the same cross-section through which it
enters element *i + 1*, except after a transition, which defines its own
downstream cross-section.
"""
from typing import List, Union
from dataclasses import dataclass
from enum import Enum
import pandas as pd
from hoodvent import Quantity, UNITS
from .cross_section import CrossSection, Circular, Rectangular
from .fittings import is_transition
from .materials import DEFAULT_MATERIAL

u = UNITS
Q_ = Quantity

DEFAULT_DIAMETER = Q_(200.0, 'mm')
DEFAULT_LENGTH = Q_(1.0, 'm')


class Shape(Enum):
    ROUND = 'round'
    RECTANGULAR = 'rectangular'


def default_rectangular_size(diameter: Quantity) -> tuple[Quantity, Quantity]:
    """Returns the default width and height of a rectangular duct that
    replaces a round duct with the given diameter.
    """
    d = diameter.to('mm').magnitude
    if d > 200.0:
        return Q_(d, 'mm'), Q_(0.75 * d, 'mm')
    return Q_(300.0, 'mm'), Q_(200.0, 'mm')


@dataclass
class DuctSegment:
    """Straight duct segment.

    Attributes
    ----------
    shape:
        Round or rectangular.
    diameter:
        Internal diameter of a round segment.
    width, height:
        Internal dimensions of a rectangular segment.
    length:
        Length of the segment.
    material:
        Key of the duct material, see `DuctMaterial`.
    ID:
        Identifier assigned by the layout.
    """
    shape: Shape = Shape.ROUND
    diameter: Quantity | None = None
    width: Quantity | None = None
    height: Quantity | None = None
    length: Quantity = DEFAULT_LENGTH
    material: str = DEFAULT_MATERIAL.key
    ID: str = ''

    @property
    def cross_section(self) -> CrossSection:
        if self.shape is Shape.RECTANGULAR:
            return Rectangular.create(
                height=self.height if self.height is not None else float('nan') * u.mm,
                width=self.width
            )
        return Circular.create(diameter=self.diameter)


@dataclass
class DuctFitting:
    """Fitting in the duct system.

    Attributes
    ----------
    kind:
        Key of the fitting kind, see `FITTINGS`.
    quantity:
        Number of identical fittings at this place. Always 1 for a
        transition.
    upstream, downstream:
        Cross-sections at both ends of a transition. Not used by the other
        fitting kinds.
    ID:
        Identifier assigned by the layout.
    """
    kind: str
    quantity: int = 1
    upstream: CrossSection | None = None
    downstream: CrossSection | None = None
    ID: str = ''

    @property
    def is_transition(self) -> bool:
        return is_transition(self.kind)

    @property
    def count(self) -> int:
        """Effective number of fittings: a missing or non-positive quantity
        counts as one fitting.
        """
        if self.is_transition:
            return 1
        try:
            n = int(self.quantity)
        except (TypeError, ValueError):
            return 1
        return n if n >= 1 else 1


DuctElement = Union[DuctSegment, DuctFitting]


def exit_cross_section(element: DuctElement, entry: CrossSection | None) -> CrossSection | None:
    """Returns the cross-section through which air leaves `element`, when it
    enters through `entry`.
    """
    if isinstance(element, DuctSegment):
        return element.cross_section
    if element.is_transition and element.downstream is not None:
        return element.downstream
    return entry


class DuctLayout(List[DuctElement]):
    """Ordered sequence of duct segments and fittings from the hood to the
    outlet. Each element added gets a unique ID ('el-0', 'el-1', ...). IDs are
    never renumbered.
    """

    def __init__(self):
        super().__init__()
        self._counter = 0

    def _next_id(self) -> str:
        ID = f"el-{self._counter}"
        self._counter += 1
        return ID

    def exit_cross_section(self) -> CrossSection | None:
        """Returns the cross-section at the end of the layout."""
        cs = None
        for element in self:
            cs = exit_cross_section(element, cs)
        return cs

    def add_segment(
        self,
        shape: Shape | None = None,
        diameter: Quantity | None = None,
        width: Quantity | None = None,
        height: Quantity | None = None,
        length: Quantity | None = None,
        material: str | None = None,
        recommended_diameter: Quantity | None = None
    ) -> DuctSegment:
        """Appends a straight duct segment to the layout.

        Dimensions that are not given are copied from the exit cross-section
        of the previous element. If the layout is still empty, the
        `recommended_diameter` is used (or 200 mm if None). For rectangular
        segments, width and height then default to d and 0.75 * d if d is
        larger than 200 mm, else to 300 mm and 200 mm.
        """
        prev = self.exit_cross_section()
        d0 = recommended_diameter if recommended_diameter is not None else DEFAULT_DIAMETER
        if isinstance(prev, Circular):
            d0 = prev.diameter
            w0, h0 = default_rectangular_size(d0)
            prev_shape = Shape.ROUND
        elif isinstance(prev, Rectangular):
            w0, h0 = prev.width, prev.height
            prev_shape = Shape.RECTANGULAR
        else:
            w0, h0 = default_rectangular_size(d0)
            prev_shape = Shape.ROUND
        segment = DuctSegment(
            shape=shape or prev_shape,
            diameter=diameter if diameter is not None else d0,
            width=width if width is not None else w0,
            height=height if height is not None else h0,
            length=length if length is not None else DEFAULT_LENGTH,
            material=material or DEFAULT_MATERIAL.key,
            ID=self._next_id()
        )
        self.append(segment)
        return segment

    def add_fitting(
        self,
        kind: str,
        quantity: int = 1,
        upstream: CrossSection | None = None,
        downstream: CrossSection | None = None
    ) -> DuctFitting:
        """Appends a fitting to the layout.

        For a transition, the upstream and downstream cross-sections default
        to the exit cross-section of the previous element.
        """
        fitting = DuctFitting(kind=kind, quantity=quantity, ID=self._next_id())
        if fitting.is_transition:
            prev = self.exit_cross_section()
            fitting.quantity = 1
            fitting.upstream = upstream if upstream is not None else prev
            fitting.downstream = downstream if downstream is not None else prev
        self.append(fitting)
        return fitting

    def get(self, ID: str) -> DuctElement:
        for element in self:
            if element.ID == ID:
                return element
        raise KeyError(f"no duct element with ID '{ID}'")

    def remove_by_id(self, ID: str) -> None:
        """Removes the element with the given ID from the layout."""
        self.remove(self.get(ID))

    def get_table(self) -> pd.DataFrame:
        """Returns a Pandas DataFrame with an overview of the elements in
        the layout.
        """
        rows = []
        for i, element in enumerate(self, start=1):
            if isinstance(element, DuctSegment):
                if element.shape is Shape.RECTANGULAR:
                    dim1, dim2 = _mm(element.width), _mm(element.height)
                else:
                    dim1, dim2 = _mm(element.diameter), float('nan')
                rows.append({
                    'order': i,
                    'ID': element.ID,
                    'type': 'segment',
                    'shape/kind': element.shape.value,
                    'dim1 [mm]': dim1,
                    'dim2 [mm]': dim2,
                    'length [m] / qty': _to(element.length, 'm'),
                    'material': element.material
                })
            else:
                up = element.upstream if element.is_transition else None
                down = element.downstream if element.is_transition else None
                rows.append({
                    'order': i,
                    'ID': element.ID,
                    'type': 'fitting',
                    'shape/kind': element.kind,
                    'dim1 [mm]': _mm(up.equivalent_diameter) if up is not None else float('nan'),
                    'dim2 [mm]': _mm(down.equivalent_diameter) if down is not None else float('nan'),
                    'length [m] / qty': element.count,
                    'material': ''
                })
        return pd.DataFrame(rows)


def _to(q: Quantity | None, unit: str) -> float:
    if q is None:
        return float('nan')
    return q.to(unit).magnitude


def _mm(q: Quantity | None) -> float:
    return _to(q, 'mm')
