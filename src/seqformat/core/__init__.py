from .consts import (
    DEFAULT_DIGITS,
    DEFAULT_THRESHOLD,
    KP_MAX,
    MAX_DIGITS,
    MIN_DIGITS,
    POWERS_OF_TEN,
)
from .enums import Notation, NonFiniteToken
from .types import FitResult, PrecisionSpec
