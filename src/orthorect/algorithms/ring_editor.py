"""
Collinear vertex removal for polygon exteriors.

`remove_collinear_vertices` is the pure transform. `RingEditor` wraps one
polygon's exterior in a mutable coordinate buffer and hands out immutable
Shapely polygons on demand, so the decomposer never has to edit a geometry.
"""
from typing import List, Tuple

from shapely.geometry import Polygon

from . import kernel
from .orientation import VertexClassifier
from ..config import DEFAULT_TOLERANCE
from ..errors import UnsupportedShapeError
from ..types import Orientation, Point


def _as_coords(ring) -> List[Point]:
    coords = ring.coords if hasattr(ring, "coords") else ring
    return [(float(c[0]), float(c[1])) for c in coords]


def remove_collinear_vertices(ring, tolerance: float = DEFAULT_TOLERANCE) -> Tuple[List[Point], int]:
    """
    Drops every vertex lying on the line through its two neighbours.

    All decisions are taken against the original neighbours in a single pass;
    a vertex is never re-checked after one of its neighbours was removed.
    For an orthogonal ring a single pass is enough, because removing a
    straight-angle vertex leaves the adjacent edges on the same lines.

    :param ring: closed ring (LinearRing or sequence of (x, y), last == first).
    :param tolerance: collinearity tolerance on the cross product.
    :return: (cleaned closed ring, number of removed vertices).
    """
    src = _as_coords(ring)
    n = len(src) - 1
    if n < 1:
        return src, 0

    labels = VertexClassifier.classify(src[:n], tolerance)
    to_remove = {i for i, label in enumerate(labels) if label == Orientation.COLLINEAR}

    if not to_remove:
        return list(src), 0

    dst = [src[i] for i in range(n) if i not in to_remove]
    if dst:
        dst.append(dst[0])
    return dst, len(to_remove)


class RingEditor:
    """
    Editable view of a polygon exterior.

    The constructor clones the polygon, so edits never reach the caller's
    geometry. Holes are rejected.
    """

    def __init__(self, polygon: Polygon, tolerance: float = DEFAULT_TOLERANCE,
                 normalize_winding: bool = True):
        if len(polygon.interiors) > 0:
            raise UnsupportedShapeError(
                f"Polygon has {len(polygon.interiors)} interior ring(s); holes are not supported.",
                geometry=polygon,
            )
        working = kernel.clone(polygon)
        if normalize_winding:
            working = kernel.normalize_winding(working)

        self.tolerance = tolerance
        self._coords = kernel.exterior_coords(working)

    def remove_collinear_vertices(self) -> int:
        """Replaces the buffer with its collinear-free version. Returns the count removed."""
        cleaned, removed = remove_collinear_vertices(self._coords, self.tolerance)
        if removed:
            self._coords = cleaned
        return removed

    @property
    def coordinates(self) -> List[Point]:
        """Closed ring, copy of the buffer."""
        return list(self._coords)

    @property
    def vertices(self) -> List[Point]:
        """Distinct vertices (closing duplicate dropped)."""
        return list(self._coords[:-1])

    def to_polygon(self) -> Polygon:
        return kernel.make_polygon(kernel.make_ring(self._coords))

    def __len__(self):
        return max(len(self._coords) - 1, 0)
