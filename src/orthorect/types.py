from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from shapely.geometry import Polygon

from .errors import OrthoRectError

Point = Tuple[float, float]


class Orientation(Enum):
    """Turn at a vertex relative to its cyclic predecessor and successor."""
    CONVEX = "convex"
    CONCAVE = "concave"
    COLLINEAR = "collinear"


@dataclass
class DecompositionResult:
    """Outcome of try_decompose. `rectangles` is empty whenever `error` is set."""
    rectangles: List[Polygon] = field(default_factory=list)
    error: Optional[OrthoRectError] = None
    iterations: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None
