"""Exceptions raised by :class:`holeyvec.HoleyVec` lookups and removals."""
from __future__ import annotations


class HoleyVecError(LookupError):
    """Base class for failed index lookups."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(message)
        self.index = index


class OutOfBoundsError(HoleyVecError, IndexError):
    """The index is not below the current slot count."""

    def __init__(self, index: int, slot_count: int) -> None:
        super().__init__(
            index, f"index {index} out of bounds for {slot_count} slots"
        )
        self.slot_count = slot_count


class NotOccupiedError(HoleyVecError):
    """The index is in range but the slot is a hole."""

    def __init__(self, index: int) -> None:
        super().__init__(index, f"slot {index} is not occupied")


__all__ = ["HoleyVecError", "OutOfBoundsError", "NotOccupiedError"]
