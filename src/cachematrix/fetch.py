"""Compute-or-fetch over a :class:`~cachematrix.holder.CacheHolder`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import numpy as np

from .holder import CacheHolder
from .linalg import CacheMatrix, solve

logger = logging.getLogger("cachematrix.fetch")

T = TypeVar("T")
R = TypeVar("R")


def compute_or_fetch(
    holder: CacheHolder[T, R],
    compute: Callable[..., R],
    *args: Any,
    label: str = "result",
    **kwargs: Any,
) -> R:
    """Return the holder's cached result, computing and storing it on a miss.

    On a miss ``compute(holder.get_value(), *args, **kwargs)`` is called and
    its result written back into the holder.  Errors raised by ``compute``
    propagate unchanged and leave the slot empty.

    Extra ``args``/``kwargs`` are forwarded to ``compute`` but are not part
    of the cache key: a hit returns the stored result whatever they are.

    ``label`` only names the result in log messages and is consumed here;
    a keyword argument called ``label`` is never forwarded to ``compute``.

    If ``compute`` replaces the holder's value while it runs, the result is
    returned but not stored, since it belongs to the previous value.
    """
    if holder.has_cached_result:
        logger.info("getting cached %s", label)
        if args or kwargs:
            logger.warning(
                "extra arguments ignored on cache hit; call invalidate() "
                "to recompute %s with different arguments",
                label,
            )
        return holder.get_cached_result()  # type: ignore[return-value]

    logger.info("recalculating %s", label)
    value = holder.get_value()
    result = compute(value, *args, **kwargs)
    if holder.get_value() is not value:
        logger.debug("value replaced during computation; not caching %s", label)
        return result
    holder.set_cached_result(result)
    return result


def cache_solve(cache_matrix: CacheMatrix, *args: Any, **kwargs: Any) -> np.ndarray:
    """Inverse of the held matrix (or ``solve(matrix, *args)``), cached."""
    return compute_or_fetch(cache_matrix, solve, *args, label="inverse", **kwargs)
