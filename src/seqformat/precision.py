"""
Per-value precision analysis.

For a single finite value find the smallest display shape (digits left and
right of the point, notation, exponent width) that shows the value without
trailing zero noise, using at most ``digits`` fractional digits.

Tests: tests/test_precision
"""
import math

import numpy as np

from .core.consts import (
    DEFAULT_DIGITS,
    DEFAULT_THRESHOLD,
    KP_MAX,
    MAX_DIGITS,
    MIN_DIGITS,
    power_of_ten,
)
from .core.types import PrecisionSpec
from .log_config import setup_logger

logger = setup_logger(__name__)

# largest chunk used when shifting by a power of ten outside the float range
_MAX_POW_STEP = 300


def clamp_digits(digits: int) -> int:
    """Constrain ``digits`` to ``[MIN_DIGITS, MAX_DIGITS]``."""
    clamped = max(MIN_DIGITS, min(MAX_DIGITS, int(digits)))
    if clamped != digits:
        logger.debug(f"digits={digits} clamped to {clamped}")
    return clamped

def clamp_threshold(threshold: int) -> int:
    """Negative thresholds behave like 0: every value is scientific."""
    clamped = max(0, int(threshold))
    if clamped != threshold:
        logger.debug(f"threshold={threshold} clamped to {clamped}")
    return clamped

def order_of_magnitude(x: float) -> int:
    """Integer k such that ``10**(k-1) <= |x| < 10**k``.

    >>> order_of_magnitude(5.0), order_of_magnitude(0.5), order_of_magnitude(0.005)
    (1, 0, -2)
    """
    return int(np.floor(np.log10(abs(x)))) + 1

def _shift(r: float, n: int) -> float:
    """Multiply r by ``10**n`` with direct powers, in steps that stay inside the float range."""
    while abs(n) > _MAX_POW_STEP:
        step = _MAX_POW_STEP if n > 0 else -_MAX_POW_STEP
        r *= 10.0 ** step
        n -= step
    return r * 10.0 ** n

def normalize_mantissa(r: float, order: int, threshold: int) -> float:
    """Bring ``r = |x|`` to the form whose fractional digits are counted.

    In fixed notation r is kept as is. In scientific notation it is shifted so
    that a single non-zero digit stays before the point: through the power
    table while ``|order| < KP_MAX``, through direct powers beyond.
    """
    abs_order = abs(order)
    if abs_order < threshold:
        return r
    if abs_order < KP_MAX:
        if order > 0:
            return r / power_of_ten(order - 1)
        return r * power_of_ten(1 - order)
    return _shift(r, 1 - order)

def significant_right_digits(r: float, digits: int) -> int:
    """Minimal number of fractional digits of r, capped at ``digits`` and floored at 1."""
    scaled = r * power_of_ten(digits)
    if not math.isfinite(scaled):
        # every float this large is integral, so no fractional digit survives
        return 1

    alpha = math.floor(scaled + 0.5)
    if alpha == 0:
        return 1

    a = float(alpha)
    d = digits
    while True:
        a /= 10.0
        if a != math.floor(a):
            return max(1, d)
        d -= 1

def _rounds_up_to_next_order(r: float, order: int, digits: int) -> bool:
    # 9.999 at 2 digits shows as 10.00; a 9.99 mantissa at 1 digit shows as 1.0 with the next exponent
    scaled = r * power_of_ten(digits)
    if order <= 0 or not math.isfinite(scaled):
        return False
    return math.floor(scaled + 0.5) >= 10 ** (order + digits)

def exponent_width(order: int) -> int:
    """Digits needed by the exponent ``order - 1`` of a mantissa in [1, 10)."""
    return 3 if abs(order - 1) >= 100 else 2

def analyze(x: float, digits: int = DEFAULT_DIGITS, threshold: int = DEFAULT_THRESHOLD) -> PrecisionSpec:
    """Smallest display shape of one finite value.

    Parameters
    ----------
    x : float
        Finite value to analyze.
    digits : int
        Maximum number of fractional digits, clamped to [1, 10].
    threshold : int
        Absolute order of magnitude from which scientific notation is used.
        ``0`` (or any negative value) forces scientific notation.

    Returns
    -------
    PrecisionSpec

    Raises
    ------
    ValueError
        If x is not finite.
    """
    x = float(x)
    if not math.isfinite(x):
        raise ValueError(f"analyze expects a finite value, got {x}")
    threshold = clamp_threshold(threshold)

    if x == 0.0:
        return PrecisionSpec.zero()

    digits = clamp_digits(digits)
    r = abs(x)
    order = order_of_magnitude(r)
    scientific = abs(order) >= threshold

    mantissa = normalize_mantissa(r, order, threshold)
    right = significant_right_digits(mantissa, digits)

    sign = 1 if x < 0 else 0
    if scientific:
        # a mantissa has a single integer digit
        if _rounds_up_to_next_order(mantissa, 1, digits):
            order += 1
        left = 1 + sign
    elif order <= 0:
        left = 1 + sign
    else:
        if _rounds_up_to_next_order(r, order, digits):
            order += 1
        left = order + sign

    return PrecisionSpec(
        scientific=scientific,
        exponent_digits=exponent_width(order),
        left_digits=left,
        right_digits=right,
    )
