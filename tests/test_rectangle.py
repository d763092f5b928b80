import pytest

from orthorect import Orientation, PrimitiveInvariantError, RectangleBuilder, RectangleExtractor

C, X, L = Orientation.CONVEX, Orientation.CONCAVE, Orientation.COLLINEAR

L_SHAPE = [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]
L_LABELS = [C, C, C, X, C, C]


def coords(rect):
    return list(rect.exterior.coords)


def test_make_rectangle_canonical_order():
    rect = RectangleBuilder.make_rectangle((4, 2), (0, 0))
    assert coords(rect) == [(0, 0), (0, 2), (4, 2), (4, 0), (0, 0)]
    assert rect.area == 8


def test_make_rectangle_from_anti_diagonal():
    rect = RectangleBuilder.make_rectangle((0, 3), (4, 0))
    assert coords(rect) == [(0, 0), (0, 3), (4, 3), (4, 0), (0, 0)]


@pytest.mark.parametrize("c0, c1", [((0, 0), (0, 5)), ((1, 2), (6, 2)), ((3, 3), (3, 3))])
def test_make_rectangle_rejects_degenerate_corners(c0, c1):
    with pytest.raises(PrimitiveInvariantError):
        RectangleBuilder.make_rectangle(c0, c1)


def test_search3_on_l_shape():
    rect = RectangleExtractor.search3(L_SHAPE, L_LABELS)
    assert coords(rect) == [(0, 0), (0, 2), (4, 2), (4, 0), (0, 0)]


def test_search3_needs_three_convex_vertices():
    vertices = [(4, 0), (4, 2), (2, 2), (2, 4), (0, 4), (0, 0)]
    labels = [C, C, X, C, C, C]
    assert RectangleExtractor.search3(vertices, labels) is None


def test_search2_uses_concave_vertex_as_corner():
    vertices = [(4, 0), (4, 2), (2, 2), (2, 4), (0, 4), (0, 0)]
    labels = [C, C, X, C, C, C]
    rect = RectangleExtractor.search2(vertices, labels)
    assert coords(rect) == [(2, 0), (2, 2), (4, 2), (4, 0), (2, 0)]


def test_find_falls_back_to_search2():
    vertices = [(4, 0), (4, 2), (2, 2), (2, 4), (0, 4), (0, 0)]
    labels = [C, C, X, C, C, C]
    assert coords(RectangleExtractor.find(vertices, labels)) == [(2, 0), (2, 2), (4, 2), (4, 0), (2, 0)]


def test_first_match_wins():
    vertices = [(0, 0), (6, 0), (6, 4), (4, 4), (4, 2), (2, 2), (2, 4), (0, 4)]
    labels = [C, C, C, C, X, X, C, C]
    rect = RectangleExtractor.search3(vertices, labels)
    assert rect.bounds == (4.0, 0.0, 6.0, 4.0)


def test_collinear_label_does_not_break_run():
    vertices = [(0, 0), (2, 0), (4, 0), (4, 2), (2, 2)]
    labels = [C, L, C, C, X]
    rect = RectangleExtractor.search3(vertices, labels)
    assert rect.bounds == (0.0, 0.0, 4.0, 2.0)


def test_find_raises_when_nothing_matches():
    vertices = [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (0, 2)]
    labels = [X, C, X, C, X, C]
    with pytest.raises(PrimitiveInvariantError):
        RectangleExtractor.find(vertices, labels)


def test_find_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        RectangleExtractor.find(L_SHAPE, L_LABELS[:-1])


def test_align_scan_start_rotates_after_concave():
    vertices, labels = RectangleExtractor.align_scan_start(L_SHAPE, L_LABELS)
    assert vertices == [(2, 4), (0, 4), (0, 0), (4, 0), (4, 2), (2, 2)]
    assert labels == [C, C, C, C, C, X]


def test_align_scan_start_keeps_aligned_sequence():
    vertices = [(2, 4), (0, 4), (0, 0), (4, 0), (4, 2), (2, 2)]
    labels = [C, C, C, C, C, X]
    assert RectangleExtractor.align_scan_start(vertices, labels) == (vertices, labels)


def test_align_scan_start_without_concave_vertex():
    vertices = [(0, 0), (1, 0), (1, 1), (0, 1)]
    labels = [C, C, C, C]
    assert RectangleExtractor.align_scan_start(vertices, labels) == (vertices, labels)


def test_aligned_scan_finds_ear_missed_by_linear_scan():
    # concave vertex first: the only convex run wraps around the list end
    vertices = [(2, 2), (2, 4), (0, 4), (0, 0), (4, 0), (4, 2)]
    labels = [X, C, C, C, C, C]
    with pytest.raises(PrimitiveInvariantError):
        RectangleExtractor.find(vertices, labels)

    vertices, labels = RectangleExtractor.align_scan_start(vertices, labels)
    assert RectangleExtractor.find(vertices, labels).bounds == (0.0, 0.0, 4.0, 2.0)
