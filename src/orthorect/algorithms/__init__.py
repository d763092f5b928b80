from .orientation import VertexClassifier
from .ring_editor import RingEditor, remove_collinear_vertices
from .rectangle import RectangleBuilder, RectangleExtractor
from .decomposition import OrthoDecomposer, decompose, try_decompose, subtract_rectangle
from .analysis import DecompositionAnalyzer
