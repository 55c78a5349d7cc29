"""cachematrix: memoize an expensive computation on a single mutable value.

The worked example caches a matrix inverse::

    >>> import numpy as np
    >>> from cachematrix import make_cache_matrix, cache_solve
    >>> cm = make_cache_matrix(np.array([[2.0, 0.0], [0.0, 4.0]]))
    >>> bool(np.allclose(cache_solve(cm), [[0.5, 0.0], [0.0, 0.25]]))
    True
"""

from __future__ import annotations

from .errors import ComputationError, NonSquareMatrixError, SingularMatrixError
from .holder import CacheHolder
from .linalg import CacheMatrix, invert, make_cache_matrix, solve
from .fetch import cache_solve, compute_or_fetch

__all__ = [
    # Holder
    "CacheHolder",
    "compute_or_fetch",
    # Matrix example
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "solve",
    "invert",
    # Errors
    "ComputationError",
    "NonSquareMatrixError",
    "SingularMatrixError",
]

__version__ = "0.1.0"
