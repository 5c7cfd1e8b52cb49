"""Error taxonomy for the layout reconstruction core."""

from __future__ import annotations


class TypeMismatchError(TypeError):
    """Raised when a text-element operation receives something else."""


class DegenerateGeometryError(ArithmeticError):
    """Raised when a statistic is undefined for the given geometry."""


__all__ = ["TypeMismatchError", "DegenerateGeometryError"]
