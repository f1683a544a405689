"""Exceptions raised by the simulation core."""


class LifeError(Exception):
    """Base class for termlife errors."""


class InvalidDimension(LifeError, ValueError):
    """Raised when a grid is created with a non-positive width or height."""


class IndexOutOfRange(LifeError, IndexError):
    """Raised when a write or strict read lands outside the grid."""


class UnknownPatternName(LifeError, ValueError):
    """Raised when a pattern name is not in the catalog."""
