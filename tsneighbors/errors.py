"""Exceptions raised by tsneighbors."""


class InvalidInputError(ValueError):
    """Input is empty, too short, or otherwise unusable."""


class ShapeMismatchError(ValueError):
    """Vectors or series that must be paired have different shapes."""
