import sys
import pathlib

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))

from holeyvec import HoleyVec


@pytest.fixture
def scenario_vec():
    """Container after push(1), push(2), push(3), remove(1)."""
    vec = HoleyVec()
    for value in (1, 2, 3):
        vec.push(value)
    vec.remove(1)
    return vec
