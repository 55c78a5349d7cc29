"""CLI entry point: ``python -m cachematrix``.

Inverts a random uniform matrix several times through ``cache_solve`` and
prints how long each call took; only the first should do any work.
"""

from __future__ import annotations

import argparse
import sys
import time

import numpy as np

from .config import configure_logging, demo_settings
from .errors import ComputationError
from .linalg import make_cache_matrix
from .fetch import cache_solve


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m cachematrix",
        description="Demonstrate caching of a matrix inverse.",
    )
    parser.add_argument("--size", type=int, default=None, help="Matrix dimension (default 1000)")
    parser.add_argument("--repeats", type=int, default=None, help="Number of cache_solve calls (default 3)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--quiet", action="store_true", help="Suppress cache hit/miss messages")
    args = parser.parse_args(argv)

    try:
        settings = demo_settings(size=args.size, repeats=args.repeats, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging("WARNING" if args.quiet else None)

    rng = np.random.default_rng(settings.seed)
    a = rng.random((settings.size, settings.size))
    cm = make_cache_matrix(a)

    inv = None
    for i in range(settings.repeats):
        t0 = time.perf_counter()
        try:
            inv = cache_solve(cm)
        except ComputationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        elapsed = time.perf_counter() - t0
        print(f"call {i + 1}: {elapsed * 1e3:.3f} ms")

    residual = float(np.max(np.abs(cm.get_value() @ inv - np.eye(settings.size))))
    print(f"max |A @ inv(A) - I| = {residual:.3e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
