"""Read-only numeric constants shared by the analyzer and the fitter."""

# largest power of ten handled through the table; beyond it ``10 ** n`` is used directly
KP_MAX = 22

# POWERS_OF_TEN[k] == 10 ** (k - 1), i.e. 1e-1 .. 1e22
POWERS_OF_TEN = (
    1e-1,
    1e00, 1e01, 1e02, 1e03, 1e04, 1e05, 1e06, 1e07, 1e08, 1e09,
    1e10, 1e11, 1e12, 1e13, 1e14, 1e15, 1e16, 1e17, 1e18, 1e19,
    1e20, 1e21, 1e22,
)

MIN_DIGITS = 1
MAX_DIGITS = 10

DEFAULT_DIGITS = 8
DEFAULT_THRESHOLD = 8


def power_of_ten(n: int) -> float:
    """Return ``10 ** n`` from the table, for ``-1 <= n <= KP_MAX``."""
    return POWERS_OF_TEN[n + 1]
