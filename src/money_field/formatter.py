"""Render canonical money values as display text, machine strings and numbers."""

from __future__ import annotations

from decimal import Decimal

from money_field.config import MoneyFieldConfig
from money_field.models import CanonicalValue


class NumericFormatter:
    """Turns a :class:`CanonicalValue` back into text for one field configuration."""

    def __init__(self, config: MoneyFieldConfig) -> None:
        self.config = config

    def group_digits(self, integer_digits: str) -> str:
        """Insert the grouping separator every 3 digits counted from the right.

        Args:
            integer_digits: Plain digits, e.g. ``'1234567'``.

        Returns:
            The grouped digits, e.g. ``'1.234.567'`` when grouping with ``'.'``.
            Values of 3 digits or fewer are returned unchanged.
        """
        if len(integer_digits) <= 3:
            return integer_digits
        head = len(integer_digits) % 3 or 3
        groups = [integer_digits[:head]]
        groups.extend(integer_digits[i : i + 3] for i in range(head, len(integer_digits), 3))
        return self.config.grouping_separator.join(groups)

    def _sign(self, value: CanonicalValue) -> str:
        return value.sign if self.config.allow_negative else ""

    def _fraction(self, value: CanonicalValue) -> str:
        precision = self.config.precision
        return value.fraction_digits[:precision].ljust(precision, "0")

    def format(self, value: CanonicalValue) -> str:
        """Format a value for display, e.g. ``'-23.452,10'``."""
        text = self._sign(value) + self.group_digits(value.integer_digits)
        if self.config.allow_decimals:
            text += self.config.decimal_separator + self._fraction(value)
        return text

    def to_plain_number_string(self, value: CanonicalValue) -> str:
        """Format a value as a machine-readable string, e.g. ``'-23452.10'``.

        Always uses ``'.'`` as decimal point and no grouping, whatever the
        display configuration.
        """
        text = self._sign(value) + value.integer_digits
        if self.config.allow_decimals:
            text += "." + self._fraction(value)
        return text

    def to_number(self, value: CanonicalValue) -> Decimal | int:
        """Return the value as a number.

        Returns a Decimal with the configured precision, or an int when
        decimals are disabled (the fraction is truncated, not rounded).
        """
        if not self.config.allow_decimals:
            return int(self._sign(value) + value.integer_digits)
        return Decimal(self.to_plain_number_string(value))
