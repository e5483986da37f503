"""Darcy friction factor of fully developed flow in a duct."""
import math

RE_LAMINAR = 2300.0


def laminar(Re: float) -> float:
    """Friction factor of laminar flow (Hagen-Poiseuille)."""
    return 64.0 / Re


def haaland(Re: float, e: float) -> float:
    """Friction factor acc. to the explicit correlation of Haaland.

    Parameters
    ----------
    Re:
        Reynolds number.
    e:
        Relative roughness, i.e. the absolute roughness divided by the
        hydraulic diameter.
    """
    return (-1.8 * math.log10((e / 3.7) ** 1.11 + 6.9 / Re)) ** -2.0


def darcy_friction_factor(Re: float, e: float) -> float:
    """Returns the Darcy friction factor that corresponds with the given
    Reynolds number `Re` and relative wall roughness `e`.
    """
    if not Re > 0.0:
        # no flow means no friction
        return 0.0
    if Re <= RE_LAMINAR:
        return laminar(Re)
    return haaland(Re, e)
