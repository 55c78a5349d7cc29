"""Environment-driven settings for the command-line demo.

Explicit keyword arguments always win.  Otherwise these env vars are read:

- ``CACHEMATRIX_DEMO_SIZE``     matrix dimension (default 1000)
- ``CACHEMATRIX_DEMO_REPEATS``  number of ``cache_solve`` calls (default 3)
- ``CACHEMATRIX_SEED``          RNG seed (default: unseeded)
- ``CACHEMATRIX_LOG_LEVEL``     level for the ``cachematrix`` logger (default INFO)
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

DEFAULT_SIZE = 1000
DEFAULT_REPEATS = 3

_LOG_FORMAT = "%(message)s"


@dataclass(frozen=True)
class DemoSettings:
    size: int = DEFAULT_SIZE
    repeats: int = DEFAULT_REPEATS
    seed: int | None = None


def _parse_int_env(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {name}={raw!r}; expected integer.") from exc


def _positive(name: str, value: int) -> int:
    if value <= 0:
        raise ValueError(f"{name} must be > 0 (got {value}).")
    return value


def _non_negative(name: str, value: int | None) -> int | None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must be >= 0 (got {value}).")
    return value


def demo_settings(
    *,
    size: int | None = None,
    repeats: int | None = None,
    seed: int | None = None,
) -> DemoSettings:
    if size is None:
        size = _parse_int_env("CACHEMATRIX_DEMO_SIZE")
    if size is None:
        size = DEFAULT_SIZE

    if repeats is None:
        repeats = _parse_int_env("CACHEMATRIX_DEMO_REPEATS")
    if repeats is None:
        repeats = DEFAULT_REPEATS

    if seed is None:
        seed = _parse_int_env("CACHEMATRIX_SEED")

    return DemoSettings(
        size=_positive("size", int(size)),
        repeats=_positive("repeats", int(repeats)),
        seed=_non_negative("seed", seed),
    )


def log_level(level: str | None = None) -> int:
    """Resolve a level name (or ``CACHEMATRIX_LOG_LEVEL``) to a logging level."""
    name = level or os.environ.get("CACHEMATRIX_LOG_LEVEL", "").strip() or "INFO"
    resolved = logging.getLevelName(name.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {name!r}.")
    return resolved


def configure_logging(level: str | None = None) -> logging.Logger:
    """Send ``cachematrix`` log records to stderr.  Idempotent."""
    logger = logging.getLogger("cachematrix")
    logger.setLevel(log_level(level))
    if not any(getattr(h, "_cachematrix", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._cachematrix = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False
    return logger
