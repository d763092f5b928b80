import numpy as np
from typing import List, Sequence

from ..config import DEFAULT_TOLERANCE
from ..types import Orientation, Point


class VertexClassifier:
    """
    Labels every vertex of a ring as CONVEX, CONCAVE or COLLINEAR.

    Assumes counter-clockwise winding, the same convention as
    kernel.orientation: a left turn is a convex (90 degree) corner and a
    right turn a reflex (270 degree) corner.
    """

    @staticmethod
    def cross_products(vertices: Sequence[Point]) -> np.ndarray:
        """
        Cross product of (v[i] - v[i-1]) and (v[i+1] - v[i]) for every i, cyclic.

        :param vertices: distinct ring vertices, closing duplicate removed.
        """
        pts = np.asarray(vertices, dtype=float).reshape(-1, 2)
        prev_p = np.roll(pts, 1, axis=0)
        next_p = np.roll(pts, -1, axis=0)

        vec_in = pts - prev_p
        vec_out = next_p - pts
        return vec_in[:, 0] * vec_out[:, 1] - vec_in[:, 1] * vec_out[:, 0]

    @staticmethod
    def classify(vertices: Sequence[Point], tolerance: float = DEFAULT_TOLERANCE) -> List[Orientation]:
        """
        :param vertices: distinct ring vertices, closing duplicate removed.
        :param tolerance: cross products with |value| <= tolerance are COLLINEAR.
        :return: one Orientation per vertex, same order.
        """
        if len(vertices) == 0:
            return []

        labels = []
        for value in VertexClassifier.cross_products(vertices):
            if abs(value) <= tolerance:
                labels.append(Orientation.COLLINEAR)
            elif value > 0:
                labels.append(Orientation.CONVEX)
            else:
                labels.append(Orientation.CONCAVE)
        return labels
