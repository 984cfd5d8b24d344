from __future__ import annotations

from numbers import Number
from typing import TypeVar

import numpy as np

# these empty comments are because of the autodocumentation

T = TypeVar("T")
""
SCALAR_TYPES = (Number, np.number)
"""
Types that can be broadcast to both components of a vector: Python numbers
and NumPy scalars.
"""
