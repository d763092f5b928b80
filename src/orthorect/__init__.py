"""Decomposition of orthogonal (rectilinear) polygons into rectangles.

Main API: decompose / try_decompose and the OrthoDecomposer class.
"""
from .algorithms import (
    DecompositionAnalyzer,
    OrthoDecomposer,
    RectangleBuilder,
    RectangleExtractor,
    RingEditor,
    VertexClassifier,
    decompose,
    remove_collinear_vertices,
    try_decompose,
)
from .config import DecomposerConfig
from .errors import (
    DecompositionError,
    OrthoRectError,
    PrimitiveInvariantError,
    UnsupportedShapeError,
)
from .types import DecompositionResult, Orientation

__version__ = "0.1.0"

__all__ = [
    "decompose",
    "try_decompose",
    "OrthoDecomposer",
    "DecomposerConfig",
    "DecompositionResult",
    "DecompositionAnalyzer",
    "Orientation",
    "VertexClassifier",
    "RingEditor",
    "remove_collinear_vertices",
    "RectangleBuilder",
    "RectangleExtractor",
    "OrthoRectError",
    "UnsupportedShapeError",
    "PrimitiveInvariantError",
    "DecompositionError",
]
