import pytest
from shapely.geometry import Polygon

from orthorect import RingEditor, UnsupportedShapeError, remove_collinear_vertices
from orthorect.geometry import ShapeGenerator


def test_identity_without_collinear_vertices():
    ring = list(ShapeGenerator.create_l_shape().exterior.coords)
    cleaned, removed = remove_collinear_vertices(ring)
    assert removed == 0
    assert cleaned == ring


def test_single_midpoint_removed():
    ring = [(0, 0), (2, 0), (4, 0), (4, 3), (0, 3), (0, 0)]
    cleaned, removed = remove_collinear_vertices(ring)
    assert removed == 1
    assert cleaned == [(0, 0), (4, 0), (4, 3), (0, 3), (0, 0)]


def test_collinear_first_vertex_recloses_ring():
    ring = [(2, 0), (4, 0), (4, 3), (0, 3), (0, 0), (2, 0)]
    cleaned, removed = remove_collinear_vertices(ring)
    assert removed == 1
    assert cleaned == [(4, 0), (4, 3), (0, 3), (0, 0), (4, 0)]


def test_run_of_collinear_vertices_removed_in_one_pass():
    ring = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (4, 3), (0, 3), (0, 0)]
    cleaned, removed = remove_collinear_vertices(ring)
    assert removed == 3
    assert cleaned == [(0, 0), (4, 0), (4, 3), (0, 3), (0, 0)]
    # a second pass finds nothing left to remove
    assert remove_collinear_vertices(cleaned) == (cleaned, 0)


def test_collinear_runs_on_several_edges():
    ring = [(0, 0), (2, 0), (4, 0), (4, 1), (4, 2), (2, 2), (2, 3), (2, 4),
            (1, 4), (0, 4), (0, 2), (0, 0)]
    cleaned, removed = remove_collinear_vertices(ring)
    assert removed == 5
    assert cleaned == [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4), (0, 0)]


def test_accepts_linear_ring():
    ring = Polygon([(0, 0), (2, 0), (4, 0), (4, 3), (0, 3)]).exterior
    cleaned, removed = remove_collinear_vertices(ring)
    assert removed == 1
    assert len(cleaned) == 5


def test_editor_removes_in_place_and_returns_count():
    poly = Polygon([(0, 0), (2, 0), (4, 0), (4, 3), (0, 3)])
    editor = RingEditor(poly)
    assert len(editor) == 5
    assert editor.remove_collinear_vertices() == 1
    assert editor.vertices == [(0, 0), (4, 0), (4, 3), (0, 3)]
    assert editor.coordinates[0] == editor.coordinates[-1]
    assert editor.remove_collinear_vertices() == 0


def test_editor_does_not_touch_input():
    poly = Polygon([(0, 0), (2, 0), (4, 0), (4, 3), (0, 3)])
    before = list(poly.exterior.coords)
    editor = RingEditor(poly)
    editor.remove_collinear_vertices()
    assert list(poly.exterior.coords) == before
    assert editor.to_polygon().equals(poly)


def test_editor_normalizes_clockwise_ring():
    cw = Polygon([(0, 0), (0, 4), (2, 4), (2, 2), (4, 2), (4, 0)])
    editor = RingEditor(cw)
    assert editor.vertices == [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]
    assert editor.to_polygon().exterior.is_ccw


def test_editor_keeps_winding_when_asked():
    cw = Polygon([(0, 0), (0, 4), (2, 4), (2, 2), (4, 2), (4, 0)])
    editor = RingEditor(cw, normalize_winding=False)
    assert not editor.to_polygon().exterior.is_ccw


def test_editor_rejects_holes():
    with pytest.raises(UnsupportedShapeError):
        RingEditor(ShapeGenerator.create_frame())
