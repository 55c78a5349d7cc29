"""Single-slot cache holder.

A :class:`CacheHolder` wraps one mutable subject value together with at most
one derived result computed from it.  Replacing the value always empties the
slot, so a stored result is never observed next to a value it was not
computed from.

The holder does not check that a stored result actually belongs to the
current value; that is the job of :func:`cachematrix.fetch.compute_or_fetch`,
the only intended writer of the slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class _Slot:
    value: Any
    result: Any = None
    filled: bool = False


class CacheHolder(Generic[T, R]):
    """Holds a subject value and an optional cached result derived from it.

    Value and result live in one frozen snapshot that is swapped with a single
    assignment, so readers see either the old pair or the new one.

    Values passed to computations are the live objects, not copies; callers
    must not mutate them in place (or must call :meth:`invalidate` if they do).
    """

    def __init__(self, initial: T) -> None:
        self._slot = _Slot(value=initial)

    def __repr__(self) -> str:
        state = "filled" if self._slot.filled else "empty"
        return f"{type(self).__name__}(value={self._slot.value!r}, cache={state})"

    # -- subject value -----------------------------------------------------

    def get_value(self) -> T:
        return self._slot.value

    def set_value(self, y: T) -> None:
        """Replace the held value and drop any cached result."""
        self._slot = _Slot(value=y)

    @property
    def value(self) -> T:
        return self.get_value()

    @value.setter
    def value(self, y: T) -> None:
        self.set_value(y)

    # -- cache slot --------------------------------------------------------

    def get_cached_result(self) -> R | None:
        return self._slot.result if self._slot.filled else None

    def set_cached_result(self, r: R) -> None:
        self._slot = _Slot(value=self._slot.value, result=r, filled=True)

    @property
    def has_cached_result(self) -> bool:
        return self._slot.filled

    def invalidate(self) -> None:
        """Empty the cache slot, keeping the current value."""
        self._slot = _Slot(value=self._slot.value)
