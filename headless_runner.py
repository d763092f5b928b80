import argparse
import logging
import sys

from orthorect import DecompositionAnalyzer, OrthoDecomposer, DecomposerConfig
from orthorect.data import PolygonIO
from orthorect.utils import RectangleExporter

logger = logging.getLogger("orthorect.runner")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Decompose an orthogonal polygon into rectangles.")
    parser.add_argument("polygon", help="polygon JSON file ({'type': 'Polygon', 'coordinates': [...]})")
    parser.add_argument("-o", "--output", help="write the rectangles as GeoJSON to this file")
    parser.add_argument("--tolerance", type=float, default=0.0, help="collinearity tolerance")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    poly = PolygonIO.load_polygon(args.polygon)
    print(f"Polygon Area: {poly.area}")
    print(f"Vertices: {len(poly.exterior.coords) - 1}")

    decomposer = OrthoDecomposer(DecomposerConfig(tolerance=args.tolerance))
    result = decomposer.try_decompose(poly)
    if not result.ok:
        logger.error("%s: %s", type(result.error).__name__, result.error)
        return 1

    metrics = DecompositionAnalyzer.evaluate(poly, result.rectangles)
    print(f"Rectangles: {metrics['rectangle_count']} ({result.iterations} iterations)")
    for i, rect in enumerate(result.rectangles):
        min_x, min_y, max_x, max_y = rect.bounds
        print(f"  {i + 1}: ({min_x}, {min_y}) - ({max_x}, {max_y})  area={rect.area}")
    print(f"Area error: {metrics['area_error']:.3g}  Overlap: {metrics['overlap_area']:.3g}")

    if args.output:
        RectangleExporter.save_geojson(args.output, result.rectangles)

    return 0 if metrics["is_valid"] else 2


if __name__ == "__main__":
    sys.exit(main())
