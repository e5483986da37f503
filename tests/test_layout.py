"""Tests for hoodvent.fluid_flow.layout: building the duct layout."""

import pytest

from hoodvent import Quantity
from hoodvent.fluid_flow import Circular, DuctFitting, DuctLayout, DuctSegment, Shape

Q_ = Quantity


def _mm(q: Quantity) -> float:
    return q.to('mm').m


class TestAddSegment:
    def test_defaults_on_empty_layout(self):
        segment = DuctLayout().add_segment()
        assert segment.ID == 'el-0'
        assert segment.shape is Shape.ROUND
        assert _mm(segment.diameter) == 200.0
        assert segment.length.to('m').m == 1.0
        assert segment.material == 'galvanized'

    def test_recommended_diameter_used_on_empty_layout(self):
        segment = DuctLayout().add_segment(recommended_diameter=Q_(315.0, 'mm'))
        assert _mm(segment.diameter) == 315.0

    @pytest.mark.parametrize("d, width, height", [
        (400.0, 400.0, 300.0),
        (200.0, 300.0, 200.0),
    ])
    def test_rectangular_defaults(self, d, width, height):
        segment = DuctLayout().add_segment(shape=Shape.RECTANGULAR, recommended_diameter=Q_(d, 'mm'))
        assert _mm(segment.width) == pytest.approx(width)
        assert _mm(segment.height) == pytest.approx(height)

    def test_copies_previous_exit_geometry(self):
        layout = DuctLayout()
        layout.add_segment(diameter=Q_(355.0, 'mm'))
        layout.add_fitting('elbow90_r_d_1_5')
        segment = layout.add_segment()
        assert _mm(segment.diameter) == 355.0

    def test_copies_previous_rectangular_geometry(self):
        layout = DuctLayout()
        layout.add_segment(shape=Shape.RECTANGULAR, width=Q_(500, 'mm'), height=Q_(250, 'mm'))
        segment = layout.add_segment()
        assert segment.shape is Shape.RECTANGULAR
        assert (_mm(segment.width), _mm(segment.height)) == (500.0, 250.0)

    def test_geometry_after_transition(self):
        layout = DuctLayout()
        layout.add_segment(diameter=Q_(200.0, 'mm'))
        layout.add_fitting('transition_sudden_expansion', downstream=Circular.create(Q_(300.0, 'mm')))
        segment = layout.add_segment()
        assert _mm(segment.diameter) == 300.0


class TestAddFitting:
    def test_transition_quantity_forced_to_one(self):
        layout = DuctLayout()
        layout.add_segment()
        fitting = layout.add_fitting('transition_sudden_contraction', quantity=3)
        assert fitting.quantity == 1
        assert fitting.count == 1

    def test_transition_defaults_to_previous_exit(self):
        layout = DuctLayout()
        layout.add_segment(diameter=Q_(250.0, 'mm'))
        fitting = layout.add_fitting('transition_gradual_expansion_15deg')
        assert _mm(fitting.upstream.diameter) == 250.0
        assert _mm(fitting.downstream.diameter) == 250.0

    @pytest.mark.parametrize("quantity, count", [(2, 2), (0, 1), (-1, 1), (None, 1)])
    def test_effective_count(self, quantity, count):
        assert DuctFitting('elbow90_r_d_1_5', quantity=quantity).count == count


class TestEditing:
    def test_ids_not_renumbered_after_removal(self):
        layout = DuctLayout()
        for _ in range(3):
            layout.add_segment()
        layout.remove_by_id('el-1')
        segment = layout.add_segment()
        assert [e.ID for e in layout] == ['el-0', 'el-2', 'el-3']
        assert segment.ID == 'el-3'

    def test_remove_unknown_id_raises(self):
        with pytest.raises(KeyError):
            DuctLayout().remove_by_id('el-0')

    def test_segment_edit_changes_cross_section(self):
        layout = DuctLayout()
        segment = layout.add_segment()
        segment.diameter = Q_(400.0, 'mm')
        assert isinstance(layout.get('el-0'), DuctSegment)
        assert layout.get('el-0').cross_section.area.to('m ** 2').m == pytest.approx(0.12566, rel=1e-4)

    def test_get_table(self):
        layout = DuctLayout()
        layout.add_segment(diameter=Q_(300.0, 'mm'), length=Q_(4.0, 'm'))
        layout.add_fitting('elbow90_r_d_1_5', quantity=2)
        df = layout.get_table()
        assert df['type'].tolist() == ['segment', 'fitting']
        assert df['length [m] / qty'].tolist() == [4.0, 2]
