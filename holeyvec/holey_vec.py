"""Index-stable vector with O(1) removal and hole reuse.

``HoleyVec`` keeps every value at the index ``push`` handed out for it.
Removing a value leaves a hole instead of shifting its neighbours; the hole's
index goes on a LIFO free stack and the next ``push`` fills the most recently
vacated slot before the backing list grows.

An index is only meaningful until its slot is removed.  Once the slot is
reused the same number refers to the new value, and the container cannot tell
a stale index from a fresh one.  Callers that keep indices around must stop
using them when they remove the value.

The container does no locking; share an instance between threads only behind
an external lock.
"""
from __future__ import annotations

import logging
import operator
import reprlib
from typing import Any, Generic, Iterable, Iterator, List, Tuple, TypeVar

from .errors import NotOccupiedError, OutOfBoundsError
from .slots import HOLE, Occupied, Slot

T = TypeVar("T")

logger = logging.getLogger("holeyvec")


class HoleyVec(Generic[T]):
    """Growable list of slots where removals leave reusable holes."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self._slots: List[Slot[T]] = []
        self._free: List[int] = []
        # Bumped by push and remove so live iterators can detect them.
        self._version = 0
        if iterable is not None:
            for value in iterable:
                self.push(value)

    # -- lookups ---------------------------------------------------------

    def _occupied(self, index: Any) -> Tuple[int, Occupied[T]]:
        index = operator.index(index)
        if index < 0 or index >= len(self._slots):
            logger.debug(
                "index out of bounds",
                extra={"index": index, "slot_count": len(self._slots)},
            )
            raise OutOfBoundsError(index, len(self._slots))
        slot = self._slots[index]
        if not isinstance(slot, Occupied):
            logger.debug("slot not occupied", extra={"index": index})
            raise NotOccupiedError(index)
        return index, slot

    def get(self, index: int) -> T:
        """Return the value at ``index``.

        Raises :class:`OutOfBoundsError` when ``index`` is past the last slot
        and :class:`NotOccupiedError` when the slot is a hole.
        """
        return self._occupied(index)[1].value

    def set(self, index: int, value: T) -> T:
        """Replace the value at an occupied ``index`` and return the old one.

        Occupancy is unchanged, so this is allowed while iterating.  Fails the
        same way as :meth:`get`.
        """
        _, slot = self._occupied(index)
        old = slot.value
        slot.value = value
        return old

    def is_hole(self, index: int) -> bool:
        """Return ``True`` if ``index`` is in range and its slot is a hole."""
        index = operator.index(index)
        return 0 <= index < len(self._slots) and self._slots[index] is HOLE

    # -- structural changes ---------------------------------------------

    def push(self, value: T) -> int:
        """Store ``value`` and return its index.

        The most recently freed hole is reused first; only when no hole is
        left does the backing list grow by one slot.
        """
        if self._free:
            index = self._free.pop()
            self._slots[index] = Occupied(value)
            logger.debug("hole reused", extra={"index": index})
        else:
            index = len(self._slots)
            self._slots.append(Occupied(value))
            logger.debug("slot appended", extra={"index": index})
        self._version += 1
        return index

    def remove(self, index: int) -> T:
        """Take the value out of ``index`` and leave a hole behind.

        Raises :class:`OutOfBoundsError` or :class:`NotOccupiedError` without
        touching the container when ``index`` holds no value.
        """
        index, slot = self._occupied(index)
        self._slots[index] = HOLE
        self._free.append(index)
        self._version += 1
        logger.debug("slot removed", extra={"index": index})
        return slot.value

    # -- sizes -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def slot_count(self) -> int:
        """Number of slots including holes; never decreases."""
        return len(self._slots)

    def next_index(self) -> int:
        """Index the next :meth:`push` will return."""
        if self._free:
            return self._free[-1]
        return len(self._slots)

    # -- iteration -------------------------------------------------------

    def _walk(self, version: int) -> Iterator[Tuple[int, T]]:
        for index in range(len(self._slots)):
            if self._version != version:
                raise RuntimeError("HoleyVec changed size during iteration")
            slot = self._slots[index]
            if isinstance(slot, Occupied):
                yield index, slot.value
        if self._version != version:
            raise RuntimeError("HoleyVec changed size during iteration")

    def items(self) -> Iterator[Tuple[int, T]]:
        """Yield ``(index, value)`` for occupied slots in index order."""
        return self._walk(self._version)

    # Writes go through ``vec[index] = new`` while walking the pairs.
    iter_mut = items

    def indices(self) -> Iterator[int]:
        return (index for index, _ in self.items())

    def iter(self) -> Iterator[T]:
        """Yield occupied values in ascending index order, skipping holes."""
        return (value for _, value in self.items())

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __contains__(self, value: object) -> bool:
        return any(item is value or item == value for item in self.iter())

    # -- item protocol ---------------------------------------------------

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __delitem__(self, index: int) -> None:
        self.remove(index)

    # -- copying and comparison -----------------------------------------

    def copy(self) -> "HoleyVec[T]":
        """Shallow copy keeping holes and free-stack order."""
        clone: HoleyVec[T] = HoleyVec()
        clone._slots = [
            Occupied(slot.value) if isinstance(slot, Occupied) else HOLE
            for slot in self._slots
        ]
        clone._free = list(self._free)
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HoleyVec):
            return NotImplemented
        return self._slots == other._slots and self._free == other._free

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        body = ", ".join(
            repr(slot.value) if isinstance(slot, Occupied) else "HOLE"
            for slot in self._slots
        )
        return f"HoleyVec([{body}])"


__all__ = ["HoleyVec"]
