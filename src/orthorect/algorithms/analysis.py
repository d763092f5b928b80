from itertools import combinations
from typing import List

from shapely.geometry import Polygon
from shapely.ops import unary_union


class DecompositionAnalyzer:
    """
    Checks a decomposition against its input polygon.
    """

    @staticmethod
    def overlap_area(rectangles: List[Polygon]) -> float:
        """Sum of pairwise intersection areas. Zero for a proper partition."""
        total = 0.0
        for a, b in combinations(rectangles, 2):
            if a.intersects(b):
                total += a.intersection(b).area
        return total

    @staticmethod
    def evaluate(polygon: Polygon, rectangles: List[Polygon], tolerance: float = 1e-9) -> dict:
        """
        Calculates metrics for a decomposition:
        - area conservation (sum of rectangle areas vs input area)
        - disjointness (pairwise overlap area)
        - coverage (area of the symmetric difference between union and input)

        :return: dict with rectangle_count, input_area, covered_area,
                 area_error, overlap_area, uncovered_area, is_valid
        """
        input_area = polygon.area
        covered_area = sum(r.area for r in rectangles)
        overlap = DecompositionAnalyzer.overlap_area(rectangles)

        if rectangles:
            mismatch = unary_union(rectangles).symmetric_difference(polygon).area
        else:
            mismatch = input_area

        area_error = abs(covered_area - input_area)

        return {
            "rectangle_count": len(rectangles),
            "input_area": input_area,
            "covered_area": covered_area,
            "area_error": area_error,
            "overlap_area": overlap,
            "uncovered_area": mismatch,
            "is_valid": area_error <= tolerance and overlap <= tolerance and mismatch <= tolerance,
        }
