"""Tagged slots stored by :class:`holeyvec.HoleyVec`.

A slot is either ``Occupied(value)`` or the ``HOLE`` marker.  Checking the tag
with ``isinstance`` keeps ``None`` usable as an ordinary stored value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass
class Occupied(Generic[T]):
    """Slot holding a value."""

    value: T


class Hole:
    """Slot vacated by a removal and waiting on the free stack."""

    _instance: "Hole | None" = None

    def __new__(cls) -> "Hole":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "HOLE"

    def __copy__(self) -> "Hole":
        return self

    def __deepcopy__(self, memo: dict) -> "Hole":
        return self


HOLE = Hole()

Slot = Union[Occupied[T], Hole]


__all__ = ["Occupied", "Hole", "HOLE", "Slot"]
