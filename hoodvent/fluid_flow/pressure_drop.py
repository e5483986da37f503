"""Pressure drop of the kitchen exhaust system, from the hood entry up to and
including the outlet.

The layout is traversed from the hood to the outlet as a fold: each step
takes the cross-sectional area through which the air enters the element
(the running area) and returns the area through which it leaves, together
with the pressure drop across the element.

The total pressure drop is the sum of:
- the entry loss of the air entering the first duct from the hood plenum,
- the pressure drop across the grease filters (a flat value),
- the friction loss of the straight duct segments,
- the local losses of the fittings,
- the outlet loss, referred to the velocity pressure in the last duct.
"""
from dataclasses import dataclass, field
import math
import pandas as pd
from hoodvent import Quantity
from hoodvent.logging import ModuleLogger
from hoodvent.diagnostics import DiagnosticList
from hoodvent.fluids import Air, AirState, STANDARD_TEMPERATURE
from .fittings import (
    TransitionLoss,
    HOOD_ENTRY_ZETA,
    Outlet,
    get_fitting_kind,
    get_zeta,
    get_outlet_zeta
)
from .friction import darcy_friction_factor
from .layout import DuctLayout, DuctSegment, DuctFitting, DuctElement
from .materials import get_material

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


@dataclass
class ElementLoss:
    """Pressure drop across a single element of the layout.

    Attributes
    ----------
    ID:
        ID of the duct element.
    description:
        Shape of a segment or kind of a fitting.
    A:
        Cross-sectional area on which the velocity pressure is based (the
        upstream area of a fitting) [m²]. NaN if the element was skipped.
    velocity:
        Mean velocity in that area [m/s].
    velocity_pressure:
        Velocity pressure in that area [Pa].
    zeta:
        Resistance coefficient of a fitting, or the friction term f * L / D_h
        of a segment.
    Re:
        Reynolds number (segments only).
    friction_factor:
        Darcy friction factor (segments only).
    pressure_drop:
        Pressure drop across the element [Pa].
    skipped:
        True if the element did not contribute because of invalid input.
    """
    ID: str
    description: str
    A: float = float('nan')
    velocity: float = 0.0
    velocity_pressure: float = 0.0
    zeta: float = 0.0
    Re: float = float('nan')
    friction_factor: float = float('nan')
    pressure_drop: float = 0.0
    skipped: bool = False


def _velocity_pressure(V_dot: float, A: float, rho: float) -> tuple[float, float]:
    v = V_dot / A
    return v, rho * v ** 2 / 2.0


def segment_step(
    A_run: float | None,
    segment: DuctSegment,
    V_dot: float,
    air: AirState,
    diagnostics: DiagnosticList
) -> tuple[float | None, ElementLoss]:
    """Friction loss of a straight duct segment.

    Parameters
    ----------
    A_run:
        Area through which air enters the segment [m²], or None if unknown.
        Not used: the area of a segment is set by its own cross-section.
    segment:
        The duct segment.
    V_dot:
        Volume flow rate [m³/s].
    air:
        State of the exhaust air.
    diagnostics:
        List to which diagnostics are added.

    Returns
    -------
    The area through which air leaves the segment and the loss of the
    segment. A segment without a valid cross-section is skipped and the
    running area is passed on unchanged.
    """
    loss = ElementLoss(segment.ID, segment.shape.value)
    cs = segment.cross_section
    if not cs.is_valid:
        diagnostics.warning(
            'invalid_area',
            f"duct segment {segment.ID} has no valid cross-section and is skipped",
            segment.ID
        )
        loss.skipped = True
        return A_run, loss
    A = cs.area.to('m ** 2').magnitude
    D_h = cs.hydraulic_diameter.to('m').magnitude
    L = segment.length.to('m').magnitude if segment.length is not None else float('nan')
    if math.isnan(L) or L < 0.0:
        diagnostics.warning(
            'invalid_length',
            f"duct segment {segment.ID} has no valid length, friction loss is ignored",
            segment.ID
        )
        L = 0.0
    material = get_material(segment.material, diagnostics, segment.ID)
    rho = air.rho.to('kg / m ** 3').magnitude
    mu = air.mu.to('Pa * s').magnitude
    e = material.roughness.to('m').magnitude
    v, p_v = _velocity_pressure(V_dot, A, rho)
    Re = rho * v * D_h / mu
    f = darcy_friction_factor(Re, e / D_h)
    zeta = f * L / D_h
    loss.A = A
    loss.velocity = v
    loss.velocity_pressure = p_v
    loss.Re = Re
    loss.friction_factor = f
    loss.zeta = zeta
    loss.pressure_drop = zeta * p_v
    return A, loss


def fitting_step(
    A_run: float | None,
    fitting: DuctFitting,
    V_dot: float,
    air: AirState,
    diagnostics: DiagnosticList
) -> tuple[float | None, ElementLoss]:
    """Local loss of a fitting.

    The loss of a fitting is referred to the velocity pressure upstream. A
    transition uses its own upstream cross-section if it has a valid one,
    otherwise the running area. After a transition the running area becomes
    its downstream area; the other fittings leave it unchanged.
    """
    loss = ElementLoss(fitting.ID, fitting.kind)
    kind = get_fitting_kind(fitting.kind, diagnostics, fitting.ID)
    if kind is None:
        loss.skipped = True
        return A_run, loss
    A_up = A_run
    A_next = A_run
    if isinstance(kind, TransitionLoss):
        if fitting.upstream is not None and fitting.upstream.is_valid:
            A_up = fitting.upstream.area.to('m ** 2').magnitude
        if fitting.downstream is not None and fitting.downstream.is_valid:
            A_down = fitting.downstream.area.to('m ** 2').magnitude
            A_next = A_down
        else:
            A_down = float('nan')
            diagnostics.warning(
                'invalid_area',
                f"transition {fitting.ID} has no valid downstream cross-section",
                fitting.ID
            )
        zeta = get_zeta(kind, A_up if A_up is not None else float('nan'), A_down)
    else:
        zeta = get_zeta(kind)
    if A_up is None:
        diagnostics.warning(
            'invalid_area',
            f"fitting {fitting.ID} has no upstream cross-section and is skipped",
            fitting.ID
        )
        loss.skipped = True
        return A_next, loss
    rho = air.rho.to('kg / m ** 3').magnitude
    v, p_v = _velocity_pressure(V_dot, A_up, rho)
    loss.A = A_up
    loss.velocity = v
    loss.velocity_pressure = p_v
    loss.zeta = fitting.count * zeta
    loss.pressure_drop = fitting.count * zeta * p_v
    return A_next, loss


def element_step(
    A_run: float | None,
    element: DuctElement,
    V_dot: float,
    air: AirState,
    diagnostics: DiagnosticList
) -> tuple[float | None, ElementLoss]:
    """Single step of the fold over the layout."""
    if isinstance(element, DuctSegment):
        return segment_step(A_run, element, V_dot, air, diagnostics)
    return fitting_step(A_run, element, V_dot, air, diagnostics)


@dataclass
class PressureDropResult:
    """Pressure drop of the exhaust system.

    Attributes
    ----------
    total:
        Total pressure drop.
    velocity:
        Mean velocity in the first valid duct segment.
    elements:
        Loss of each element of the layout, in layout order.
    entry:
        Entry loss at the hood.
    filter:
        Pressure drop across the grease filters.
    outlet:
        Outlet loss.
    air:
        State of the exhaust air used in the calculation.
    diagnostics:
        Non-fatal messages produced during the calculation.
    """
    total: Quantity
    velocity: Quantity
    elements: list[ElementLoss] = field(default_factory=list)
    entry: Quantity = Q_(0.0, 'Pa')
    filter: Quantity = Q_(0.0, 'Pa')
    outlet: Quantity = Q_(0.0, 'Pa')
    air: AirState | None = None
    diagnostics: DiagnosticList = field(default_factory=DiagnosticList)

    @property
    def ducts(self) -> Quantity:
        """Sum of the losses of the duct segments and fittings."""
        return Q_(sum(e.pressure_drop for e in self.elements), 'Pa')

    def get_table(self, pressure_unit: str = 'Pa') -> pd.DataFrame:
        """Returns a Pandas DataFrame with the pressure drop of each element
        expressed in the given pressure unit.
        """
        header = [
            'ID',
            'description',
            'velocity [m/s]',
            'zeta',
            f'pressure drop [{pressure_unit}]'
        ]
        table = {h: [] for h in header}
        for e in self.elements:
            table[header[0]].append(e.ID)
            table[header[1]].append(e.description)
            table[header[2]].append(e.velocity)
            table[header[3]].append(e.zeta)
            table[header[4]].append(Q_(e.pressure_drop, 'Pa').to(pressure_unit).magnitude)
        return pd.DataFrame(table)


def calculate_pressure_drop(
    layout: DuctLayout,
    V_dot: Quantity | None,
    T: Quantity | None = None,
    filter_pressure_drop: Quantity | None = None,
    outlet: 'Outlet | str' = Outlet.OPEN,
    entry_zeta: float = HOOD_ENTRY_ZETA,
    diagnostics: DiagnosticList | None = None
) -> PressureDropResult:
    """Calculates the pressure drop of the exhaust duct system.

    Parameters
    ----------
    layout:
        Layout of the duct system.
    V_dot:
        Exhaust airflow.
    T:
        Temperature of the exhaust air. Defaults to 20 °C if None.
    filter_pressure_drop:
        Pressure drop across the grease filters.
    outlet:
        Exhaust outlet (`Outlet` member or its key).
    entry_zeta:
        Resistance coefficient of the hood entry.
    diagnostics:
        Optional list to which diagnostics are added.

    Returns
    -------
    PressureDropResult

    Notes
    -----
    If the airflow is zero or missing, or if the layout is empty, the total
    pressure drop and the velocity are both zero.

    The hood entry loss is only added when the layout starts with a valid
    duct segment; a layout that starts with a fitting has no entry loss. The
    reported duct velocity is that of the first valid segment, wherever it
    is in the layout.

    Raises
    ------
    ValueError
        If the exhaust temperature is at or below absolute zero.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticList(logger)
    zero_p = Q_(0.0, 'Pa')
    zero_v = Q_(0.0, 'm / s')
    V = V_dot.to('m ** 3 / s').magnitude if V_dot is not None else float('nan')
    if not V > 0.0 or not len(layout):
        return PressureDropResult(zero_p, zero_v, diagnostics=diagnostics)

    air = Air(T=T if T is not None else STANDARD_TEMPERATURE)
    rho = air.rho.to('kg / m ** 3').magnitude

    A_run: float | None = None
    losses: list[ElementLoss] = []
    for element in layout:
        A_run, loss = element_step(A_run, element, V, air, diagnostics)
        losses.append(loss)

    first = next(
        (
            loss for element, loss in zip(layout, losses)
            if isinstance(element, DuctSegment) and not loss.skipped
        ),
        None
    )
    velocity = Q_(first.velocity, 'm / s') if first is not None else zero_v
    dp_entry = 0.0
    if isinstance(layout[0], DuctSegment) and not losses[0].skipped:
        dp_entry = entry_zeta * losses[0].velocity_pressure

    dp_filter = 0.0
    if filter_pressure_drop is not None:
        dp_filter = filter_pressure_drop.to('Pa').magnitude
        if math.isnan(dp_filter) or dp_filter < 0.0:
            diagnostics.warning(
                'invalid_filter_loss',
                f"filter pressure drop {filter_pressure_drop:~P} is not valid and is ignored",
                'filter'
            )
            dp_filter = 0.0

    dp_outlet = 0.0
    zeta_outlet = get_outlet_zeta(outlet, diagnostics)
    if A_run is not None:
        _, p_v_out = _velocity_pressure(V, A_run, rho)
        dp_outlet = zeta_outlet * p_v_out

    dp_total = dp_entry + dp_filter + sum(loss.pressure_drop for loss in losses) + dp_outlet
    return PressureDropResult(
        total=Q_(dp_total, 'Pa'),
        velocity=velocity,
        elements=losses,
        entry=Q_(dp_entry, 'Pa'),
        filter=Q_(dp_filter, 'Pa'),
        outlet=Q_(dp_outlet, 'Pa'),
        air=air,
        diagnostics=diagnostics
    )
