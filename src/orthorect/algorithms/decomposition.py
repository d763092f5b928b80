import logging
from typing import List, Optional

from shapely.geometry import Polygon

from . import kernel
from .orientation import VertexClassifier
from .rectangle import RectangleBuilder, RectangleExtractor
from .ring_editor import RingEditor
from ..config import DecomposerConfig
from ..errors import (
    DecompositionError,
    OrthoRectError,
    PrimitiveInvariantError,
    UnsupportedShapeError,
)
from ..types import DecompositionResult

logger = logging.getLogger(__name__)


def subtract_rectangle(working: Polygon, rectangle: Polygon) -> Polygon:
    """
    Removes `rectangle` from `working` and checks that what is left is still
    one simple polygon.

    :raises DecompositionError: if the difference is empty, multi-part, has
                                holes or is not a polygon at all.
    """
    remainder = kernel.difference(working, rectangle)
    if not kernel.is_simple_polygon(remainder):
        if remainder.is_empty:
            detail = "empty"
        elif remainder.geom_type == "Polygon":
            detail = f"a polygon with {len(remainder.interiors)} hole(s)"
        else:
            detail = f"a {remainder.geom_type}"
        raise DecompositionError(
            f"Expected a single polygon after removing {rectangle.wkt}, got {detail}.",
            geometry=remainder,
        )
    return remainder


class OrthoDecomposer:
    """
    Decomposes an orthogonal (rectilinear) polygon into non-overlapping
    rectangles by repeatedly cutting one rectangle off the remaining shape.

    The instance only holds its immutable config; every call works on its
    own copy of the input, so one decomposer can serve several threads.
    """

    def __init__(self, config: Optional[DecomposerConfig] = None):
        self.config = config or DecomposerConfig()

    def decompose(self, polygon: Polygon) -> List[Polygon]:
        """
        Decompose an orthogonal polygon into a list of rectangles.

        Args:
            polygon (Polygon): hole-free polygon, ASSUMED to be orthogonal.
                Any winding is accepted when `normalize_winding` is on;
                otherwise the exterior must be counter-clockwise.

        Returns:
            list[Polygon]: rectangles in extraction order, each with corners
            (minx,miny) (minx,maxy) (maxx,maxy) (maxx,miny).

        Raises:
            UnsupportedShapeError: input is not a single, non-empty polygon
                without holes.
            PrimitiveInvariantError: no rectangle could be extracted, a
                rectangle overhangs the remaining polygon, or the loop ran
                longer than the input has vertices.
            DecompositionError: a subtraction split the remainder.
        """
        rectangles, _ = self._run(polygon)
        return rectangles

    def try_decompose(self, polygon: Polygon) -> DecompositionResult:
        """Like decompose, but reports failures in the returned result."""
        try:
            rectangles, iterations = self._run(polygon)
        except OrthoRectError as e:
            logger.debug("Decomposition failed: %s", e)
            return DecompositionResult(rectangles=[], error=e)
        return DecompositionResult(rectangles=rectangles, iterations=iterations)

    def _run(self, polygon: Polygon):
        self._check_input(polygon)

        cfg = self.config
        rectangles = []
        editor = RingEditor(polygon, cfg.tolerance, cfg.normalize_winding)
        iterations = 0
        max_iterations = None

        while True:
            iterations += 1
            removed = editor.remove_collinear_vertices()
            vertices = editor.vertices
            logger.debug("Iteration %d: %d vertices (%d collinear removed)",
                         iterations, len(vertices), removed)

            # every valid cut removes at least one vertex
            if max_iterations is None:
                max_iterations = len(vertices)
            elif iterations > max_iterations:
                raise PrimitiveInvariantError(
                    f"No result after {max_iterations} iterations; the polygon is not orthogonal.",
                    geometry=polygon,
                )

            if len(vertices) < 4:
                raise PrimitiveInvariantError(
                    f"Only {len(vertices)} vertices left; the polygon is not orthogonal.",
                    geometry=polygon,
                )
            if len(vertices) == 4:
                rectangles.append(RectangleBuilder.make_rectangle(vertices[0], vertices[2]))
                break

            orientation = VertexClassifier.classify(vertices, cfg.tolerance)
            try:
                rect = RectangleExtractor.find(vertices, orientation)
            except PrimitiveInvariantError:
                # the only usable convex run wraps past the end of the list
                vertices, orientation = RectangleExtractor.align_scan_start(vertices, orientation)
                rect = RectangleExtractor.find(vertices, orientation)
            rectangles.append(rect)
            logger.debug("Extracted rectangle %s", rect.bounds)

            working = editor.to_polygon()
            remainder = subtract_rectangle(working, rect)
            carved = working.area - remainder.area
            if abs(carved - rect.area) > cfg.area_tolerance:
                raise PrimitiveInvariantError(
                    f"Rectangle {rect.bounds} is not inside the remaining polygon "
                    f"(area {rect.area}, removed {carved}).",
                    geometry=working,
                )

            # GEOS does not promise a winding for difference results
            editor = RingEditor(remainder, cfg.tolerance, normalize_winding=True)

        logger.debug("Decomposed into %d rectangles", len(rectangles))
        return rectangles, iterations

    @staticmethod
    def _check_input(polygon):
        geom_type = getattr(polygon, "geom_type", None)
        if geom_type != "Polygon":
            raise UnsupportedShapeError(
                f"Expected a Polygon, got {geom_type or type(polygon).__name__}.",
                geometry=polygon,
            )
        if polygon.is_empty:
            raise UnsupportedShapeError("Polygon is empty.", geometry=polygon)
        if len(polygon.interiors) > 0:
            raise UnsupportedShapeError(
                f"Polygon has {len(polygon.interiors)} interior ring(s); holes are not supported.",
                geometry=polygon,
            )


def decompose(polygon: Polygon, tolerance: float = 0.0) -> List[Polygon]:
    """Shortcut for OrthoDecomposer(DecomposerConfig(tolerance=...)).decompose(polygon)."""
    return OrthoDecomposer(DecomposerConfig(tolerance=tolerance)).decompose(polygon)


def try_decompose(polygon: Polygon, tolerance: float = 0.0) -> DecompositionResult:
    """Shortcut for OrthoDecomposer(DecomposerConfig(tolerance=...)).try_decompose(polygon)."""
    return OrthoDecomposer(DecomposerConfig(tolerance=tolerance)).try_decompose(polygon)
