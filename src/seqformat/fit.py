"""
Fit one display shape to a whole batch of values.

Tests: tests/test_fit
"""
import math

from .core.consts import DEFAULT_DIGITS, DEFAULT_THRESHOLD
from .core.enums import NonFiniteToken
from .core.types import FitResult, PrecisionSpec
from .log_config import setup_logger
from .precision import analyze, clamp_threshold, clamp_digits
from .utils.validation import to_double

logger = setup_logger(__name__)

def _fold(values, digits: int, threshold: int):
    """Widen the shapes of all finite values. Returns None when fixed notation is impossible."""
    spec = None
    non_finite_width = 0
    for x in values:
        if not math.isfinite(x):
            non_finite_width = max(non_finite_width, NonFiniteToken.width_for(x))
            continue

        current = analyze(x, digits, threshold)
        if current.scientific and threshold > 0:
            logger.debug(f"{x!r} needs scientific notation at threshold={threshold}")
            return None
        spec = current if spec is None else spec.widen(current)

    if spec is None:
        spec = PrecisionSpec.zero()
    return FitResult.from_spec(spec, non_finite_width)

def fit_precision(xs, digits: int = DEFAULT_DIGITS, threshold: int = DEFAULT_THRESHOLD) -> FitResult:
    """Find the display shape shared by every value in ``xs``.

    Each finite value is analyzed on its own and the shapes are widened to
    their maximum. As soon as one value needs scientific notation the whole
    batch is refitted with ``threshold=0``, so fixed and scientific values are
    never mixed. Non-finite and missing values only reserve room for their
    ``Inf``/``-Inf``/``NaN`` token.

    Parameters
    ----------
    xs : iterable
        Floats, ints, numpy scalars, ``None`` or ``pd.NA``. Consumed once.
    digits : int
        Maximum number of fractional digits, clamped to [1, 10].
    threshold : int
        Absolute order of magnitude from which scientific notation is used.

    Returns
    -------
    FitResult
    """
    digits = clamp_digits(digits)
    threshold = clamp_threshold(threshold)
    values = [to_double(x) for x in xs]

    result = _fold(values, digits, threshold)
    if result is None:
        # threshold=0 makes every value scientific, so this fold cannot fail
        result = _fold(values, digits, 0)

    logger.debug(f"Fitted {len(values)} values: {result}")
    return result
