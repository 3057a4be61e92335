"""
Tests: tests/utils/test_validation
"""
import math
import numbers

import numpy as np
import pandas as pd

# promoted through their decimal repr so that e.g. float32(0.1) stays 0.1
_SHORT_FLOAT_TYPES = (np.float32, np.float16)


def is_missing(x):
    """Return True if x is None, pd.NA or pd.NaT."""
    return x is None or x is pd.NA or x is pd.NaT

def to_double(x) -> float:
    """Convert a scalar to a Python float.

    Missing markers become NaN, half and single precision numpy scalars are
    promoted through their shortest decimal representation.

    Raises
    ------
    TypeError
        If x is not a real number.
    """
    if is_missing(x):
        return math.nan

    if isinstance(x, _SHORT_FLOAT_TYPES):
        return float(str(x))

    if isinstance(x, numbers.Real):
        return float(x)

    raise TypeError(f"Cannot format value {x!r} of type {type(x).__name__}")
