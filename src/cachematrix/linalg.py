"""Matrix inversion used as the cached computation."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import NonSquareMatrixError, SingularMatrixError
from .holder import CacheHolder

CacheMatrix = CacheHolder[np.ndarray, np.ndarray]

# Reciprocal condition numbers below this are treated as singular.
RCOND_TOLERANCE = float(np.finfo(np.float64).eps)


def _check_square(a: np.ndarray) -> None:
    if a.ndim != 2 or a.shape[0] != a.shape[1] or a.shape[0] == 0:
        raise NonSquareMatrixError(
            f"expected a non-empty square 2-D matrix, got shape {a.shape}"
        )


def _check_conditioning(a: np.ndarray) -> None:
    with np.errstate(all="ignore"):
        cond = float(np.linalg.cond(a))
    rcond = 1.0 / cond if np.isfinite(cond) and cond > 0 else 0.0
    if rcond < RCOND_TOLERANCE:
        raise SingularMatrixError(
            f"matrix of shape {a.shape} is computationally singular "
            f"(reciprocal condition number {rcond:.3g})"
        )


def solve(a: Any, b: Any = None) -> np.ndarray:
    """Solve ``a @ x = b``; with ``b`` omitted, return the inverse of ``a``.

    Raises :class:`SingularMatrixError` when ``a`` is exactly or numerically
    singular (reciprocal condition number below machine epsilon).
    """
    a = np.asarray(a, dtype=np.float64)
    _check_square(a)
    _check_conditioning(a)
    try:
        if b is None:
            return np.linalg.inv(a)
        return np.linalg.solve(a, np.asarray(b, dtype=np.float64))
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"matrix of shape {a.shape} is singular") from exc


def invert(a: Any) -> np.ndarray:
    return solve(a)


def make_cache_matrix(matrix: Any) -> CacheMatrix:
    """Wrap ``matrix`` (anything ``np.asarray`` accepts) in a cache holder."""
    return CacheHolder(np.asarray(matrix, dtype=np.float64))
