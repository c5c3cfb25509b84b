"""Index-stable container with O(1) removal and LIFO hole reuse."""
from .errors import HoleyVecError, NotOccupiedError, OutOfBoundsError
from .holey_vec import HoleyVec
from .slots import HOLE, Hole, Occupied

__version__ = "0.1.0"

__all__ = [
    "HoleyVec",
    "HoleyVecError",
    "OutOfBoundsError",
    "NotOccupiedError",
    "Occupied",
    "Hole",
    "HOLE",
]
