"""Tests for keystroke filtering."""

from money_field.config import MoneyFieldConfig
from money_field.policy import CharacterPolicy, is_passthrough_key


class TestAllowedCharacters:
    """Tests for the character set derived from configuration."""

    def test_default_set(self, us_config):
        """Digits and the dot are allowed by default."""
        assert CharacterPolicy(us_config).allowed_characters == frozenset("0123456789.")

    def test_comma_decimal_set(self, euro_config):
        """The comma replaces the dot for comma-decimal fields."""
        assert CharacterPolicy(euro_config).allowed_characters == frozenset("0123456789,")

    def test_negative_adds_minus(self, signed_config):
        """Allowing negatives adds the minus sign."""
        assert "-" in CharacterPolicy(signed_config).allowed_characters

    def test_grouping_separator_never_typed(self, euro_config):
        """The grouping separator is not in the set."""
        assert "." not in CharacterPolicy(euro_config).allowed_characters


class TestIsKeystrokeAllowed:
    """Tests for CharacterPolicy.is_keystroke_allowed."""

    def test_digit_allowed(self, us_config):
        """Digits are always accepted."""
        assert CharacterPolicy(us_config).is_keystroke_allowed("5", "12.3")

    def test_letter_rejected(self, us_config):
        """Letters are rejected."""
        assert not CharacterPolicy(us_config).is_keystroke_allowed("a", "")

    def test_minus_rejected_without_negative(self, us_config):
        """A minus is rejected when negatives are off."""
        assert not CharacterPolicy(us_config).is_keystroke_allowed("-", "")

    def test_first_decimal_separator_allowed(self, us_config):
        """The first decimal separator is accepted."""
        assert CharacterPolicy(us_config).is_keystroke_allowed(".", "12")

    def test_second_decimal_separator_rejected(self, us_config):
        """A second decimal separator is rejected."""
        assert not CharacterPolicy(us_config).is_keystroke_allowed(".", "12.3")

    def test_grouping_separator_rejected(self, us_config):
        """The grouping separator cannot be typed."""
        assert not CharacterPolicy(us_config).is_keystroke_allowed(",", "12")

    def test_comma_decimal_separator(self, euro_config):
        """Comma-decimal fields accept one comma and no dot."""
        policy = CharacterPolicy(euro_config)
        assert policy.is_keystroke_allowed(",", "12")
        assert not policy.is_keystroke_allowed(",", "12,3")
        assert not policy.is_keystroke_allowed(".", "12")

    def test_minus_allowed_when_negative_enabled(self, signed_config):
        """A minus at the start is accepted when negatives are on."""
        assert CharacterPolicy(signed_config).is_keystroke_allowed("-", "", cursor_position=0)

    def test_second_minus_rejected(self, signed_config):
        """Only one minus sign is accepted."""
        assert not CharacterPolicy(signed_config).is_keystroke_allowed("-", "-12", cursor_position=0)

    def test_minus_after_digits_rejected(self, signed_config):
        """A minus is rejected away from the start."""
        assert not CharacterPolicy(signed_config).is_keystroke_allowed("-", "12", cursor_position=2)

    def test_minus_without_cursor_position(self, signed_config):
        """Without a cursor position only the sign count is checked."""
        assert CharacterPolicy(signed_config).is_keystroke_allowed("-", "12")

    def test_empty_character_rejected(self, us_config):
        """Missing characters are rejected."""
        policy = CharacterPolicy(us_config)
        assert not policy.is_keystroke_allowed(None, "")
        assert not policy.is_keystroke_allowed("", "")

    def test_multi_character_rejected(self, us_config):
        """Multi-character input is not a keystroke."""
        assert not CharacterPolicy(us_config).is_keystroke_allowed("12", "")

    def test_navigation_keys_bypass_filter(self, us_config):
        """Editing and navigation keys are always allowed."""
        policy = CharacterPolicy(us_config)
        for key in ("backspace", "delete", "left", "right", "home", "end", "tab"):
            assert policy.is_keystroke_allowed(None, "12.3", key=key)

    def test_ctrl_combination_bypasses_filter(self, us_config):
        """Ctrl combinations are always allowed."""
        assert CharacterPolicy(us_config).is_keystroke_allowed("a", "", key="ctrl+a")

    def test_decimal_separator_accepted_without_decimals(self):
        """The decimal separator can still be typed when decimals are off."""
        policy = CharacterPolicy(MoneyFieldConfig(decimal_precision=0))
        assert policy.is_keystroke_allowed(".", "12")


class TestIsPassthroughKey:
    """Tests for the is_passthrough_key helper."""

    def test_named_keys(self):
        """Named editing keys pass through."""
        assert is_passthrough_key("backspace")
        assert is_passthrough_key("shift+tab")

    def test_ctrl_keys(self):
        """Ctrl combinations pass through."""
        assert is_passthrough_key("ctrl+v")

    def test_printable_keys(self):
        """Printable keys are filtered."""
        assert not is_passthrough_key("a")
        assert not is_passthrough_key("full_stop")

    def test_missing_key(self):
        """A missing key name does not pass through."""
        assert not is_passthrough_key(None)
        assert not is_passthrough_key("")
