"""Keystroke filtering for money fields."""

from __future__ import annotations

from money_field.config import MoneyFieldConfig

# Keys that are editing or navigation actions rather than characters.
PASSTHROUGH_KEYS = frozenset(
    {
        "backspace",
        "delete",
        "left",
        "right",
        "home",
        "end",
        "tab",
        "shift+tab",
        "escape",
        "enter",
        "up",
        "down",
    }
)

DIGITS = "0123456789"


def is_passthrough_key(key: str | None) -> bool:
    """Whether *key* is a navigation, editing or ctrl-combination key."""
    if not key:
        return False
    return key in PASSTHROUGH_KEYS or key.startswith("ctrl+")


class CharacterPolicy:
    """Decides which typed characters may enter a money field's buffer.

    Accepted characters are digits, the decimal separator (once) and,
    when negative amounts are allowed, a single minus sign at the start.
    The grouping separator is never typed; the formatter inserts it.
    """

    def __init__(self, config: MoneyFieldConfig) -> None:
        self.config = config
        allowed = DIGITS + config.decimal_separator
        if config.allow_negative:
            allowed += "-"
        self.allowed_characters = frozenset(allowed)

    def is_keystroke_allowed(
        self,
        character: str | None,
        current_raw_value: str,
        *,
        key: str | None = None,
        cursor_position: int | None = None,
    ) -> bool:
        """Return whether *character* may be inserted into *current_raw_value*.

        Args:
            character: The printable character produced by the keystroke,
                or None for keys that produce no character.
            current_raw_value: The field text before insertion.
            key: The key name, if known (e.g. ``"backspace"``, ``"ctrl+a"``).
                Navigation, editing and ctrl keys are always allowed.
            cursor_position: Where the character would be inserted.  When
                given, a minus sign is only accepted at position 0.

        Returns:
            True if the host should insert the character.
        """
        if is_passthrough_key(key):
            return True

        if not character or len(character) != 1:
            return False

        if character not in self.allowed_characters:
            return False

        if character == self.config.decimal_separator:
            return character not in current_raw_value

        if character == "-":
            if "-" in current_raw_value:
                return False
            if cursor_position is not None and cursor_position != 0:
                return False

        return True
