"""Deferred validation for money fields.

Violations are reported as user-visible messages.  The value itself is
still accepted and stored; the host decides how to flag it.
"""

from __future__ import annotations

from money_field.config import MoneyFieldConfig
from money_field.models import CanonicalValue

MAX_LENGTH_TEXT = "The maximum length for this field is {0}"


def integer_length_errors(value: CanonicalValue, config: MoneyFieldConfig) -> list[str]:
    """Check the integer part of *value* against ``max_integer_digits``.

    Returns:
        An empty list when no maximum is set or the value fits, otherwise
        a single message naming the maximum.
    """
    limit = config.max_integer_digits
    if limit is None or len(value.integer_digits) <= limit:
        return []
    return [MAX_LENGTH_TEXT.format(limit)]
