"""Errors raised by the computations that a cache holder memoizes."""

from __future__ import annotations


class ComputationError(Exception):
    """The supplied computation could not produce a result for its input."""


class NonSquareMatrixError(ComputationError, ValueError):
    """Input is not a 2-D square matrix."""


class SingularMatrixError(ComputationError, ValueError):
    """Input matrix has no inverse."""
