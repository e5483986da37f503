"""Tests for hoodvent.fluids: density and viscosity of exhaust air."""

import pytest

from hoodvent import Quantity
from hoodvent.fluids import Air, STANDARD_AIR
from hoodvent.fluids.air import density, dynamic_viscosity

Q_ = Quantity


class TestStandardAir:
    def test_density_at_20_degC(self):
        air = Air(T=Q_(20.0, 'degC'))
        assert air.rho.to('kg / m ** 3').m == pytest.approx(1.204, rel=0.01)

    def test_viscosity_at_20_degC(self):
        air = Air(T=Q_(20.0, 'degC'))
        assert air.mu.to('Pa * s').m == pytest.approx(1.82e-5, rel=0.01)

    def test_standard_air_is_20_degC(self):
        assert STANDARD_AIR.T.to('K').m == pytest.approx(293.15)
        assert STANDARD_AIR.P.to('Pa').m == pytest.approx(101325.0)

    def test_kinematic_viscosity(self):
        air = Air(T=Q_(20.0, 'degC'))
        nu = air.mu.to('Pa * s').m / air.rho.to('kg / m ** 3').m
        assert air.nu.to('m ** 2 / s').m == pytest.approx(nu)

    def test_temperature_in_kelvin_gives_same_state(self):
        a = Air(T=Q_(20.0, 'degC'))
        b = Air(T=Q_(293.15, 'K'))
        assert a.rho.m == pytest.approx(b.rho.m)
        assert a.mu.m == pytest.approx(b.mu.m)


class TestTemperatureDependence:
    temperatures = list(range(-20, 501, 10))

    def test_density_decreases_with_temperature(self):
        rho = [density(T + 273.15) for T in self.temperatures]
        assert all(r1 > r2 for r1, r2 in zip(rho, rho[1:]))

    def test_viscosity_increases_with_temperature(self):
        mu = [dynamic_viscosity(T + 273.15) for T in self.temperatures]
        assert all(m1 < m2 for m1, m2 in zip(mu, mu[1:]))

    def test_density_proportional_to_pressure(self):
        a = Air(T=Q_(20.0, 'degC'), P=Q_(101325.0, 'Pa'))
        b = Air(T=Q_(20.0, 'degC'), P=Q_(2 * 101325.0, 'Pa'))
        assert b.rho.m == pytest.approx(2 * a.rho.m)


class TestInvalidTemperature:
    @pytest.mark.parametrize("T", [Q_(-273.15, 'degC'), Q_(-300.0, 'degC'), Q_(0.0, 'K')])
    def test_at_or_below_absolute_zero_raises(self, T):
        with pytest.raises(ValueError):
            Air(T=T)
