"""
Render templates: turn a fitted shape into fixed-width strings.

Tests: tests/test_template
"""
from dataclasses import dataclass

from .core.enums import Notation
from .core.types import FitResult

@dataclass(frozen=True)
class FormatTemplate:
    """Resolved rendering instruction for one batch.

    Attributes
    ----------
    width : int
        Field width every rendering is right-aligned to.
    right_digits : int
        Fractional digits (of the mantissa in scientific notation).
    notation : Notation
    exponent_digits : int
        Minimum exponent width, zero padded. Ignored in fixed notation.
    """
    width           : int
    right_digits    : int
    notation        : Notation  = Notation.FIXED
    exponent_digits : int       = 2

    @classmethod
    def from_fit(cls, fit: FitResult) -> "FormatTemplate":
        return cls(
            width=fit.field_width,
            right_digits=fit.right_digits,
            notation=fit.notation,
            exponent_digits=max(fit.exponent_digits, 1),
        )

    @property
    def format_spec(self) -> str:
        """Python format spec of the numeric field, e.g. ``'>7.2f'``."""
        kind = "E" if self.notation.is_scientific() else "f"
        return f">{self.width}.{self.right_digits}{kind}"

    def _scientific(self, x: float) -> str:
        # Python pads the exponent to two digits only
        mantissa, exponent = f"{x:.{self.right_digits}E}".split("E")
        sign, digits = exponent[0], exponent[1:]
        return f"{mantissa}E{sign}{digits.zfill(self.exponent_digits)}"

    def render(self, x: float) -> str:
        """Render a finite value; negative zero is shown as zero."""
        x = x + 0.0
        if self.notation.is_scientific():
            return self._scientific(x).rjust(self.width)
        return format(x, self.format_spec)

    def render_token(self, token: str) -> str:
        """Right-align a literal token such as ``Inf`` to the field width."""
        return f"{token:>{self.width}}"
