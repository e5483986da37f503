"""Tests for hoodvent.fluid_flow.fittings and friction: loss coefficients."""

import math

import pytest

from hoodvent.diagnostics import DiagnosticList
from hoodvent.fluid_flow.fittings import (
    FITTINGS,
    FixedLoss,
    Outlet,
    TransitionLoss,
    get_fitting_kind,
    get_outlet_zeta,
    get_zeta,
    gradual_contraction_30deg,
    gradual_expansion_15deg,
    sudden_contraction,
    sudden_expansion,
)
from hoodvent.fluid_flow.friction import darcy_friction_factor, haaland


class TestTransitions:
    def test_sudden_expansion_half_area(self):
        assert sudden_expansion(0.05, 0.10) == pytest.approx(0.25, abs=1e-12)

    def test_sudden_expansion_independent_of_scale(self):
        assert sudden_expansion(0.5, 1.0) == pytest.approx(sudden_expansion(0.05, 0.10))

    @pytest.mark.parametrize("A_down, zeta", [
        (0.1, 0.4 * 0.9),
        (0.3, 0.3 * 0.7),
        (0.75, 0.2 * 0.25),
    ])
    def test_sudden_contraction_branches(self, A_down, zeta):
        assert sudden_contraction(1.0, A_down) == pytest.approx(zeta)

    def test_gradual_expansion(self):
        assert gradual_expansion_15deg(0.05, 0.10) == pytest.approx(0.25 * 0.25 + 0.02)

    def test_gradual_contraction(self):
        assert gradual_contraction_30deg(0.10, 0.05) == 0.05

    @pytest.mark.parametrize("func, A_up, A_down", [
        (sudden_expansion, 0.10, 0.05),
        (sudden_contraction, 0.05, 0.10),
        (gradual_expansion_15deg, 0.10, 0.10),
        (gradual_contraction_30deg, 0.05, 0.10),
        (sudden_expansion, 0.0, 0.10),
        (sudden_contraction, 0.10, -1.0),
        (sudden_expansion, float('nan'), 0.10),
    ])
    def test_reversed_or_invalid_areas_give_zero(self, func, A_up, A_down):
        assert func(A_up, A_down) == 0.0


class TestFittingKinds:
    def test_fixed_loss(self):
        assert get_zeta(FITTINGS['elbow90_r_d_1_5']) == 0.25
        assert get_zeta(FixedLoss(1.2), 1.0, 2.0) == 1.2

    def test_transition_loss_uses_areas(self):
        kind = FITTINGS['transition_sudden_expansion']
        assert isinstance(kind, TransitionLoss)
        assert get_zeta(kind, 0.05, 0.10) == pytest.approx(0.25)

    def test_fixed_coefficients_within_table_range(self):
        zetas = [k.zeta for k in FITTINGS.values() if isinstance(k, FixedLoss)]
        assert min(zetas) == 0.15
        assert max(zetas) == 1.7

    def test_unknown_fitting(self):
        diagnostics = DiagnosticList()
        assert get_fitting_kind('elbow_unknown', diagnostics) is None
        assert diagnostics.with_code('unknown_fitting')


class TestOutlets:
    def test_outlet_by_member_and_key(self):
        assert get_outlet_zeta(Outlet.GOOSENECK) == 2.0
        assert get_outlet_zeta('weather_cap') == 1.0

    def test_unknown_outlet_has_no_loss(self):
        diagnostics = DiagnosticList()
        assert get_outlet_zeta('chimney_pot', diagnostics) == 0.0
        assert diagnostics.with_code('unknown_outlet')


class TestFrictionFactor:
    def test_laminar(self):
        assert darcy_friction_factor(1000.0, 0.001) == pytest.approx(0.064)

    def test_turbulent_uses_haaland(self):
        Re, e = 1.0e5, 0.0005
        expected = (-1.8 * math.log10((e / 3.7) ** 1.11 + 6.9 / Re)) ** -2
        assert darcy_friction_factor(Re, e) == pytest.approx(expected)
        assert haaland(Re, e) == pytest.approx(expected)

    def test_no_flow_no_friction(self):
        assert darcy_friction_factor(0.0, 0.001) == 0.0
