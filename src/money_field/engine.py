"""The operations a host field calls into, bundled per configuration."""

from __future__ import annotations

from decimal import Decimal

from money_field.config import MoneyFieldConfig
from money_field.formatter import NumericFormatter
from money_field.models import CanonicalValue
from money_field.parser import InvalidAmountError, NumericParser
from money_field.policy import CharacterPolicy
from money_field.validation import integer_length_errors


class MoneyEngine:
    """Keystroke policy, parser and formatter sharing one configuration.

    Typical host lifecycle: :meth:`is_keystroke_allowed` before each
    insertion, :meth:`normalize` on blur, :meth:`display_for` when a value
    is assigned from code, and :meth:`to_plain_number_string` to fill any
    machine-readable mirror of the field.
    """

    def __init__(self, config: MoneyFieldConfig | None = None) -> None:
        self.config = config or MoneyFieldConfig()
        self.policy = CharacterPolicy(self.config)
        self.parser = NumericParser(self.config)
        self.formatter = NumericFormatter(self.config)

    def is_keystroke_allowed(
        self,
        character: str | None,
        current_raw_value: str,
        *,
        key: str | None = None,
        cursor_position: int | None = None,
    ) -> bool:
        """See :meth:`CharacterPolicy.is_keystroke_allowed`."""
        return self.policy.is_keystroke_allowed(
            character, current_raw_value, key=key, cursor_position=cursor_position
        )

    def parse(self, raw: str | None) -> CanonicalValue:
        """Parse field text into a canonical value."""
        return self.parser.parse(raw)

    def format(self, value: CanonicalValue) -> str:
        """Format a canonical value for display."""
        return self.formatter.format(value)

    def to_plain_number_string(self, value: CanonicalValue) -> str:
        """Format a canonical value as a machine-readable string."""
        return self.formatter.to_plain_number_string(value)

    def to_number(self, value: CanonicalValue) -> Decimal | int:
        """Return a canonical value as a Decimal, or an int without decimals."""
        return self.formatter.to_number(value)

    def normalize(self, raw: str | None) -> str:
        """Rewrite typed text into its display form, e.g. ``'23452.1'`` -> ``'23,452.10'``."""
        return self.format(self.parse(raw))

    def display_for(self, value: str | int | float | Decimal | None) -> str:
        """Return the display text for a programmatically assigned value."""
        return self.format(self.parser.parse_value(value))

    @property
    def placeholder(self) -> str:
        """The zero value as displayed, used as the empty-field hint."""
        return self.format(self.parser.zero())

    def integer_value(self, raw: str | None) -> str:
        """Return the integer part of the machine string for *raw*, sign included."""
        return self.to_plain_number_string(self.parse(raw)).split(".")[0]

    def fraction_value(self, raw: str | None) -> str:
        """Return the fraction digits for *raw*, or an empty string without decimals."""
        return self.parse(raw).fraction_digits

    def get_errors(self, raw: str | None) -> list[str]:
        """Return user-visible validation messages for *raw*; empty when valid.

        In strict mode, text the parser rejects is reported here as a message.
        """
        try:
            value = self.parse(raw)
        except InvalidAmountError as exc:
            return [str(exc)]
        return integer_length_errors(value, self.config)
