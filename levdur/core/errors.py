class LevinsonDurbinError(Exception):
    """Base class of the errors raised while solving normal equations."""


class SingularNormalMatrixError(LevinsonDurbinError):
    """Prediction error energy fell below the minimum value of the determinant."""


class UnstableFilterError(LevinsonDurbinError):
    """Unstable frame found while the caller asked to stop on unstable frames."""


class UnstableLpcError(LevinsonDurbinError):
    """Reflection coefficient of the given LPC has a magnitude of 1 or more."""


class StreamError(LevinsonDurbinError):
    """Failed to read or write a frame."""


class DimensionMismatchError(ValueError):
    """Matrices are not conformant for the requested operation."""
