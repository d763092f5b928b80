from dataclasses import dataclass

# Cross products with an absolute value at or below this count as collinear.
DEFAULT_TOLERANCE = 0.0

# Allowed difference between a rectangle's area and the area it removes.
AREA_TOLERANCE = 1e-9


@dataclass(frozen=True)
class DecomposerConfig:
    """Settings for OrthoDecomposer. Immutable so one instance can be shared."""
    tolerance: float = DEFAULT_TOLERANCE
    area_tolerance: float = AREA_TOLERANCE
    normalize_winding: bool = True

    def __post_init__(self):
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")
        if self.area_tolerance < 0:
            raise ValueError(f"area_tolerance must be >= 0, got {self.area_tolerance}")
