"""
Formatter factory: fit a batch once, then render any value with that shape.

Tests: tests/test_formatters
"""
import math
from typing import Callable, List

from .core.consts import DEFAULT_DIGITS, DEFAULT_THRESHOLD
from .core.enums import NonFiniteToken
from .fit import fit_precision
from .template import FormatTemplate
from .utils.validation import to_double


def build_formatter(template: FormatTemplate, trim: bool = False) -> Callable[[object], str]:
    """Wrap a template into a ``value -> str`` function."""
    def fmt(x) -> str:
        x = to_double(x)
        if math.isfinite(x):
            res = template.render(x)
        else:
            res = template.render_token(NonFiniteToken.for_value(x))
        return res.strip() if trim else res

    fmt.template = template
    return fmt

def formatter(xs, digits: int = DEFAULT_DIGITS, threshold: int = DEFAULT_THRESHOLD,
              trim: bool = False) -> Callable[[object], str]:
    """Create a formatter fitted to a sequence of numbers.

    Parameters
    ----------
    xs : iterable
        Values the format is fitted to. ``None`` and ``pd.NA`` count as NaN.
    digits : int
        Maximum number of fractional digits, clamped to [1, 10].
    threshold : int
        Absolute order of magnitude from which scientific notation is used;
        ``0`` forces scientific notation.
    trim : bool
        Strip the alignment padding from every rendered string.

    Returns
    -------
    Callable
        ``f(x) -> str``. Reusable for any value; the fit is not repeated.

    Examples
    --------
    >>> f = formatter([1.0, 2.5, 10.25])
    >>> f(1.0), f(10.25)
    (' 1.00', '10.25')
    """
    fit = fit_precision(xs, digits, threshold)
    return build_formatter(FormatTemplate.from_fit(fit), trim=trim)

def format_sequence(xs, digits: int = DEFAULT_DIGITS, threshold: int = DEFAULT_THRESHOLD,
                    trim: bool = False) -> List[str]:
    """Format every value of ``xs`` with one shared format.

    Same parameters as :func:`formatter`. Returns a list of strings in input order.
    """
    values = list(xs)
    fmt = formatter(values, digits, threshold, trim)
    return [fmt(x) for x in values]
