from enum import Enum

class Notation(Enum):
    """Display notation shared by a whole batch."""
    FIXED       = "fixed"       # 123.45
    SCIENTIFIC  = "scientific"  # 1.2345E+02

    @classmethod
    def from_flag(cls, scientific: bool) -> "Notation":
        return cls.SCIENTIFIC if scientific else cls.FIXED

    def is_scientific(self):
        return self == self.SCIENTIFIC

class NonFiniteToken:
    """Literal tokens rendered in place of non-finite values."""
    POS_INF = "Inf"
    NEG_INF = "-Inf"
    NAN     = "NaN"

    @classmethod
    def for_value(cls, x: float) -> str:
        if x != x:
            return cls.NAN
        return cls.NEG_INF if x < 0 else cls.POS_INF

    @classmethod
    def width_for(cls, x: float) -> int:
        """Characters taken by the token of a non-finite value."""
        return len(cls.for_value(x))
