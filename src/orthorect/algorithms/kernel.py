"""
Thin layer over Shapely providing the geometry services the decomposer
consumes: cloning, ring access and construction, planar difference and the
three point turn test. Nothing else in the package talks to Shapely's
constructive operations directly.
"""
from typing import List, Sequence

from shapely.geometry import LinearRing, Polygon
from shapely.geometry.polygon import orient

from ..config import DEFAULT_TOLERANCE
from ..types import Orientation, Point


def clone(polygon: Polygon) -> Polygon:
    """Value copy of a polygon (exterior and holes), 2D only."""
    return Polygon(exterior_coords(polygon),
                   [[(c[0], c[1]) for c in ring.coords] for ring in polygon.interiors])


def exterior_coords(polygon: Polygon) -> List[Point]:
    """Closed coordinate list of the exterior ring, Z dropped."""
    return [(float(c[0]), float(c[1])) for c in polygon.exterior.coords]


def make_ring(points: Sequence[Point]) -> LinearRing:
    return LinearRing(points)


def make_polygon(ring: LinearRing) -> Polygon:
    return Polygon(ring)


def difference(polygon_a: Polygon, polygon_b: Polygon):
    """Planar set difference A - B. The result type is whatever GEOS produces."""
    return polygon_a.difference(polygon_b)


def is_simple_polygon(geometry) -> bool:
    """True for a single, non-empty Polygon without interior rings."""
    return (
        geometry is not None
        and geometry.geom_type == "Polygon"
        and not geometry.is_empty
        and len(geometry.interiors) == 0
    )


def normalize_winding(polygon: Polygon) -> Polygon:
    """Returns the polygon with a counter-clockwise exterior ring."""
    return orient(polygon, sign=1.0)


def cross(a: Point, b: Point, c: Point) -> float:
    # (b - a) x (c - b)
    return (b[0] - a[0]) * (c[1] - b[1]) - (b[1] - a[1]) * (c[0] - b[0])


def orientation(a: Point, b: Point, c: Point, tolerance: float = DEFAULT_TOLERANCE) -> Orientation:
    """
    Classifies the turn a -> b -> c on a counter-clockwise ring.

    A left turn (positive cross product) is CONVEX, a right turn CONCAVE,
    and a cross product within `tolerance` of zero COLLINEAR.
    """
    value = cross(a, b, c)
    if abs(value) <= tolerance:
        return Orientation.COLLINEAR
    return Orientation.CONVEX if value > 0 else Orientation.CONCAVE
