"""Parse typed money text into canonical values.

Parsing never fails by default: anything that holds no digits becomes
zero, because a money field must always be able to show a value.  The
``InvalidInputPolicy.REJECT`` setting turns that into an error instead.

Fraction digits beyond the configured precision are truncated, not
rounded.  This is a display rule for typed input, not a numeric
rounding guarantee.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from money_field.config import MoneyFieldConfig
from money_field.log import get_logger
from money_field.models import CanonicalValue, InvalidInputPolicy
from money_field.policy import DIGITS

log = get_logger(__name__)


class InvalidAmountError(ValueError):
    """Raised in strict mode when input cannot be read as an amount."""


class NumericParser:
    """Reduces raw field text to a :class:`CanonicalValue`."""

    def __init__(self, config: MoneyFieldConfig) -> None:
        self.config = config
        self._kept = frozenset(DIGITS + config.decimal_separator + config.grouping_separator)

    def strip_garbage(self, text: str) -> str:
        """Drop every character that is not a digit or one of the two separators."""
        return "".join(c for c in text if c in self._kept)

    def has_grouping_marks(self, text: str) -> bool:
        """Whether *text* carries digit-grouping marks that must be removed.

        This is the case when the grouping separator appears at all, or
        when the decimal separator appears more than once.
        """
        return (
            self.config.grouping_separator in text
            or text.count(self.config.decimal_separator) > 1
        )

    def resolve_separators(self, text: str) -> str:
        """Delete grouping separators so only decimal separators remain.

        ``"23.452,10"`` becomes ``"23452,10"`` when the decimal separator is
        ``","``, and ``"23,452.10"`` becomes ``"23452.10"`` when it is ``"."``.
        """
        if self.has_grouping_marks(text):
            return text.replace(self.config.grouping_separator, "")
        return text

    def split_parts(self, text: str) -> tuple[str, str]:
        """Split on the decimal separator into (integer, fraction) substrings.

        Anything after a second decimal separator is ignored.
        """
        parts = text.split(self.config.decimal_separator)
        return parts[0], parts[1] if len(parts) > 1 else ""

    def zero(self) -> CanonicalValue:
        """Return the zero value for this configuration."""
        return CanonicalValue.zero(self.config.precision)

    def parse(self, raw: str | None) -> CanonicalValue:
        """Parse display or typed text such as ``"23.452,1"`` or ``"0045.5"``.

        Args:
            raw: The field text.  May hold stray characters, grouping marks
                and a leading minus sign.

        Returns:
            The canonical value.  Empty or digit-less text yields zero.

        Raises:
            InvalidAmountError: Only in strict mode, for text that holds
                characters outside the accepted set or no digits at all.
        """
        raw = raw or ""
        if self.config.on_invalid is InvalidInputPolicy.REJECT:
            self._check_strict(raw, self._kept)

        cleaned = self.resolve_separators(self.strip_garbage(raw))
        if not any(c in DIGITS for c in cleaned):
            if raw.strip():
                log.debug("parse_coerced_to_zero", raw=raw)
            return self.zero()

        integer_part, fraction_part = self.split_parts(cleaned)
        return self._build(self._is_negative(raw), integer_part, fraction_part)

    def parse_value(self, value: str | int | float | Decimal | None) -> CanonicalValue:
        """Parse a programmatically assigned value.

        Numbers are taken as they are.  Strings are read as plain machine
        numbers (``"1234.50"``: ``"."`` decimal point, no grouping) unless
        they contain a comma or more than one dot, in which case they are
        treated as display text and handed to :meth:`parse`.

        Raises:
            InvalidAmountError: In strict mode, for non-finite numbers or
                strings that hold no number.
            TypeError: For values of any other type.
        """
        if value is None or value == "":
            return self.zero()

        if isinstance(value, str):
            if "," in value or value.count(".") > 1:
                return self.parse(value)
            return self._parse_plain(value)

        if isinstance(value, (int, float, Decimal)):
            try:
                number = Decimal(str(value))
            except InvalidOperation:
                number = Decimal("NaN")
            if not number.is_finite():
                if self.config.on_invalid is InvalidInputPolicy.REJECT:
                    raise InvalidAmountError(f"Not a finite amount: {value!r}")
                log.debug("parse_coerced_to_zero", raw=str(value))
                return self.zero()
            integer_part, _, fraction_part = f"{abs(number):f}".partition(".")
            return self._build(number < 0, integer_part, fraction_part)

        raise TypeError(f"Cannot read an amount from {type(value).__name__}")

    def _parse_plain(self, text: str) -> CanonicalValue:
        plain_kept = frozenset(DIGITS + ".")
        if self.config.on_invalid is InvalidInputPolicy.REJECT:
            self._check_strict(text, plain_kept)
        digits = "".join(c for c in text if c in plain_kept)
        if not any(c in DIGITS for c in digits):
            return self.zero()
        integer_part, _, fraction_part = digits.partition(".")
        return self._build(self._is_negative(text), integer_part, fraction_part)

    def _is_negative(self, raw: str) -> bool:
        return raw.strip().startswith("-")

    def _check_strict(self, raw: str, kept: frozenset[str]) -> None:
        """Raise for text a strict field refuses to coerce."""
        text = raw.strip()
        if self.config.allow_negative and text.startswith("-"):
            text = text[1:]
        invalid = sorted({c for c in text if c not in kept})
        if invalid:
            log.info("parse_rejected", raw=raw, invalid=invalid)
            raise InvalidAmountError(f"Invalid characters in amount: {''.join(invalid)!r}")
        if text and not any(c in DIGITS for c in text):
            log.info("parse_rejected", raw=raw)
            raise InvalidAmountError(f"No digits in amount: {raw!r}")

    def _build(self, negative: bool, integer_part: str, fraction_part: str) -> CanonicalValue:
        """Assemble a value: trim leading zeros, pad or truncate the fraction."""
        precision = self.config.precision
        fraction = fraction_part[:precision].ljust(precision, "0") if precision else ""
        value = CanonicalValue(
            integer_digits=integer_part.lstrip("0") or "0",
            fraction_digits=fraction,
            is_negative=negative and self.config.allow_negative,
        )
        if value.is_negative and value.is_zero:
            return CanonicalValue(value.integer_digits, value.fraction_digits)
        return value
