from __future__ import annotations

import numpy as np
import pytest

from vecto import Vector2


@pytest.fixture
def vec() -> Vector2[float]:
    return Vector2(1.2, 3.4)


@pytest.fixture
def vec32() -> Vector2[np.float32]:
    return Vector2(np.float32(3.0), np.float32(4.0))


@pytest.fixture
def int_vec() -> Vector2[int]:
    return Vector2(7, -3)
