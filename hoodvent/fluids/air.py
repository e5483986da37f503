"""Thermophysical properties of (dry) exhaust air.

Kitchen exhaust air is treated as an ideal gas at atmospheric pressure. Mass
density follows from the ideal gas law, dynamic viscosity from Sutherland's
law. Both only depend on temperature (and pressure for density), so the
state is recalculated whenever the exhaust temperature changes.
"""
from dataclasses import dataclass
from .. import Quantity
from .constants import (
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
    R_AIR,
    MU_REF_SUTHERLAND,
    T_REF_SUTHERLAND,
    C_SUTHERLAND
)

Q_ = Quantity


@dataclass(frozen=True)
class AirState:
    """State of air at a given temperature and pressure.

    Attributes
    ----------
    T:
        Absolute temperature.
    P:
        Absolute pressure.
    rho:
        Mass density.
    mu:
        Dynamic (absolute) viscosity.
    """
    T: Quantity
    P: Quantity
    rho: Quantity
    mu: Quantity

    @property
    def nu(self) -> Quantity:
        """Kinematic viscosity."""
        return (self.mu / self.rho).to('m ** 2 / s')


def density(T: float, P: float = STANDARD_PRESSURE.to('Pa').m) -> float:
    """Mass density of air in kg/m³ with `T` in K and `P` in Pa."""
    return P / (R_AIR.to('J / (kg * K)').m * T)


def dynamic_viscosity(T: float) -> float:
    """Dynamic viscosity of air in Pa.s with `T` in K (Sutherland's law)."""
    mu_ref = MU_REF_SUTHERLAND.to('Pa * s').m
    T_ref = T_REF_SUTHERLAND.to('K').m
    C = C_SUTHERLAND.to('K').m
    return mu_ref * (T_ref + C) / (T + C) * (T / T_ref) ** 1.5


class _IdealGasAir:
    """Callable that returns the `AirState` of air at a given temperature and
    pressure, e.g. `Air(T=Q_(20, 'degC'))`.
    """
    name = 'Air'

    def __call__(
        self,
        T: Quantity = STANDARD_TEMPERATURE,
        P: Quantity = STANDARD_PRESSURE
    ) -> AirState:
        """Returns the state of air.

        Parameters
        ----------
        T:
            Temperature of the air. Any temperature unit is accepted; a
            temperature in degC is converted to kelvin as T + 273.15.
        P:
            Absolute pressure of the air.

        Raises
        ------
        ValueError
            If the temperature is at or below absolute zero.
        """
        T_abs = T.to('K').m
        if not T_abs > 0.0:
            raise ValueError(
                f"air temperature {T:~P} is at or below absolute zero"
            )
        P_abs = P.to('Pa').m
        return AirState(
            T=Q_(T_abs, 'K'),
            P=Q_(P_abs, 'Pa'),
            rho=Q_(density(T_abs, P_abs), 'kg / m ** 3'),
            mu=Q_(dynamic_viscosity(T_abs), 'Pa * s')
        )


Air = _IdealGasAir()
STANDARD_AIR = Air(T=STANDARD_TEMPERATURE, P=STANDARD_PRESSURE)
