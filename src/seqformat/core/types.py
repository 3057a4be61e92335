from dataclasses import dataclass

from .enums import Notation

@dataclass(frozen=True)
class PrecisionSpec:
    """Minimal display shape of a value, or of a whole batch once widened.

    Attributes
    ----------
    scientific : bool
        Whether the value is shown as mantissa and exponent.
    exponent_digits : int
        Width of the exponent (2 or 3). Only meaningful when ``scientific``.
    left_digits : int
        Characters before the decimal point, sign included.
    right_digits : int
        Digits after the decimal point (of the mantissa in scientific notation).
    """
    scientific      : bool  = False
    exponent_digits : int   = 0
    left_digits     : int   = 1
    right_digits    : int   = 1

    @classmethod
    def zero(cls) -> "PrecisionSpec":
        """Canonical shape of ``0.0``."""
        return cls(False, 0, 1, 1)

    @property
    def notation(self) -> Notation:
        return Notation.from_flag(self.scientific)

    def widen(self, other: "PrecisionSpec") -> "PrecisionSpec":
        """Field-wise maximum of two shapes; scientific wins over fixed."""
        return PrecisionSpec(
            scientific=self.scientific or other.scientific,
            exponent_digits=max(self.exponent_digits, other.exponent_digits),
            left_digits=max(self.left_digits, other.left_digits),
            right_digits=max(self.right_digits, other.right_digits),
        )

@dataclass(frozen=True)
class FitResult(PrecisionSpec):
    """Shape fitted over a batch plus the room reserved for Inf/-Inf/NaN tokens."""
    non_finite_width: int = 0

    @classmethod
    def from_spec(cls, spec: PrecisionSpec, non_finite_width: int = 0) -> "FitResult":
        return cls(
            scientific=spec.scientific,
            exponent_digits=spec.exponent_digits,
            left_digits=spec.left_digits,
            right_digits=spec.right_digits,
            non_finite_width=non_finite_width,
        )

    @property
    def spec(self) -> PrecisionSpec:
        return PrecisionSpec(self.scientific, self.exponent_digits, self.left_digits, self.right_digits)

    @property
    def numeric_width(self) -> int:
        if self.scientific:
            # "." + "E" + exponent sign
            return self.left_digits + self.right_digits + self.exponent_digits + 3
        # "."
        return self.left_digits + self.right_digits + 1

    @property
    def field_width(self) -> int:
        """Total character width shared by every rendered value."""
        return max(self.non_finite_width, self.numeric_width)

