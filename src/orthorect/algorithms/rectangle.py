from typing import List, Optional, Sequence

from shapely.geometry import Polygon

from . import kernel
from ..errors import PrimitiveInvariantError
from ..types import Orientation, Point


class RectangleBuilder:
    """Axis-aligned rectangles from a pair of diagonal corners."""

    @staticmethod
    def make_rectangle(c0: Point, c1: Point) -> Polygon:
        """
        Builds the rectangle with diagonal c0-c1, corners in the order
        (minx,miny) (minx,maxy) (maxx,maxy) (maxx,miny) (minx,miny).

        :raises PrimitiveInvariantError: if c0 and c1 share an x or y value.
        """
        if c0[0] == c1[0] or c0[1] == c1[1]:
            raise PrimitiveInvariantError(
                f"Corners {tuple(c0)} and {tuple(c1)} are not a diagonal of a rectangle."
            )

        min_x = min(c0[0], c1[0])
        min_y = min(c0[1], c1[1])
        max_x = max(c0[0], c1[0])
        max_y = max(c0[1], c1[1])

        coords = [
            (min_x, min_y),
            (min_x, max_y),
            (max_x, max_y),
            (max_x, min_y),
            (min_x, min_y),
        ]
        return kernel.make_polygon(kernel.make_ring(coords))


class RectangleExtractor:
    """
    Finds one rectangle that can be cut off a polygon.

    Both searches walk the vertices once, keeping the indices of the current
    run of consecutive convex vertices on a stack. A concave vertex either
    closes an ear (a run long enough to carve from) or resets the run.
    """

    @staticmethod
    def search3(vertices: Sequence[Point], orientation: Sequence[Orientation]) -> Optional[Polygon]:
        """
        Looks for a concave vertex preceded by at least 3 convex vertices.
        The rectangle's diagonal joins the 1st and 3rd of the last three.
        """
        convex: List[int] = []

        for i in range(len(vertices)):
            label = orientation[i]
            if label == Orientation.CONVEX:
                convex.append(i)
            elif label == Orientation.CONCAVE:
                if len(convex) >= 3:
                    h = convex.pop()
                    convex.pop()
                    f = convex.pop()
                    return RectangleBuilder.make_rectangle(vertices[f], vertices[h])
                convex.clear()

        return None

    @staticmethod
    def search2(vertices: Sequence[Point], orientation: Sequence[Orientation]) -> Optional[Polygon]:
        """
        Looks for a concave vertex preceded by at least 2 convex vertices.
        The rectangle's diagonal joins the concave vertex and the convex
        vertex two positions before it.
        """
        convex: List[int] = []

        for i in range(len(vertices)):
            label = orientation[i]
            if label == Orientation.CONVEX:
                convex.append(i)
            elif label == Orientation.CONCAVE:
                if len(convex) >= 2:
                    convex.pop()
                    g = convex.pop()
                    return RectangleBuilder.make_rectangle(vertices[g], vertices[i])
                convex.clear()

        return None

    @staticmethod
    def find(vertices: Sequence[Point], orientation: Sequence[Orientation]) -> Polygon:
        """
        search3 first, search2 as fallback.

        :raises PrimitiveInvariantError: if neither search finds a rectangle.
        """
        if len(vertices) != len(orientation):
            raise ValueError(
                f"Got {len(vertices)} vertices but {len(orientation)} orientation labels."
            )

        rect = RectangleExtractor.search3(vertices, orientation)
        if rect is None:
            rect = RectangleExtractor.search2(vertices, orientation)
        if rect is None:
            raise PrimitiveInvariantError(
                f"No rectangle found among {len(vertices)} vertices; "
                "the polygon is probably not orthogonal."
            )
        return rect

    @staticmethod
    def align_scan_start(vertices: Sequence[Point], orientation: Sequence[Orientation]):
        """
        Rotates the cyclic vertex sequence so that it starts right after a
        concave vertex.

        The searches scan linearly, so a convex run that wraps from the end of
        the list to its start is never followed by its concave vertex. With
        the last vertex concave no run wraps, and since an orthogonal polygon
        has four more convex than concave vertices some run of length >= 2
        ends in a concave vertex, which search2 always finds.

        :return: (vertices, orientation) as new lists; unchanged order if no
                 vertex is concave or the last one already is.
        """
        n = len(vertices)
        vertices = list(vertices)
        orientation = list(orientation)
        if n == 0 or orientation[-1] == Orientation.CONCAVE:
            return vertices, orientation

        for i in range(1, n):
            if orientation[i - 1] == Orientation.CONCAVE:
                return vertices[i:] + vertices[:i], orientation[i:] + orientation[:i]

        return vertices, orientation
