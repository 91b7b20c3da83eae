# planar/geometry/errors.py
"""Errors raised by the geometry kernel."""


class DegenerateInputError(ValueError):
    """Input configuration has no defined result (zero-length direction, coincident centres, equal radii)."""
