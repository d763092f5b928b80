class OrthoRectError(ValueError):
    """
    Base class for every failure of a decomposition call.
    When one is raised no rectangles are returned for that call.
    """

    def __init__(self, message, geometry=None):
        super().__init__(message)
        self.geometry = geometry


class UnsupportedShapeError(OrthoRectError):
    """The input is not a single hole-free polygon."""


class PrimitiveInvariantError(OrthoRectError):
    """
    The extraction scan found no rectangle although more than four vertices
    remain, or a rectangle was requested from a non-diagonal corner pair.
    Usually means the input is not orthogonal or not simple.
    """


class DecompositionError(OrthoRectError):
    """The remainder after a subtraction is not a single simple polygon."""
