"""Data models for canonical money values and input handling policies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidInputPolicy(Enum):
    """What the parser does with input that holds no usable number."""

    COERCE = "coerce"
    REJECT = "reject"


@dataclass(frozen=True)
class CanonicalValue:
    """A parsed money value, independent of any display format.

    ``integer_digits`` never has leading zeros (``"0"`` at minimum) and
    ``fraction_digits`` holds exactly the configured precision, or is
    empty when decimals are disabled.
    """

    integer_digits: str = "0"
    fraction_digits: str = ""
    is_negative: bool = False

    def __post_init__(self) -> None:
        if not self.integer_digits.isdigit() or not self.integer_digits.isascii():
            raise ValueError(f"Invalid integer digits: {self.integer_digits!r}")
        if self.fraction_digits and not (
            self.fraction_digits.isdigit() and self.fraction_digits.isascii()
        ):
            raise ValueError(f"Invalid fraction digits: {self.fraction_digits!r}")

    @property
    def sign(self) -> str:
        """Return ``"-"`` for negative values, otherwise an empty string."""
        return "-" if self.is_negative else ""

    @property
    def is_zero(self) -> bool:
        """Whether every digit of the value is zero."""
        return not (self.integer_digits + self.fraction_digits).strip("0")

    @classmethod
    def zero(cls, precision: int = 0) -> CanonicalValue:
        """Return the zero value with *precision* fraction digits."""
        return cls(integer_digits="0", fraction_digits="0" * precision)
