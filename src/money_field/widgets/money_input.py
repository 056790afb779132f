"""Money input widget with keystroke filtering and locale-aware formatting on blur."""

from __future__ import annotations

from decimal import Decimal

from textual.events import Blur
from textual.validation import ValidationResult, Validator
from textual.widgets import Input

from money_field.config import MoneyFieldConfig
from money_field.engine import MoneyEngine
from money_field.log import get_logger
from money_field.models import CanonicalValue
from money_field.parser import InvalidAmountError
from money_field.policy import is_passthrough_key

log = get_logger(__name__)


class MoneyValidator(Validator):
    """Reports the engine's deferred validation messages to Textual."""

    def __init__(self, engine: MoneyEngine) -> None:
        super().__init__()
        self.engine = engine

    def validate(self, value: str) -> ValidationResult:
        errors = self.engine.get_errors(value)
        if errors:
            return self.failure("; ".join(errors), value)
        return self.success()


class MoneyInput(Input):
    """An Input that only accepts valid amount characters and formats on blur.

    Which characters are accepted, and how the value is rendered, comes
    from the field's :class:`MoneyFieldConfig`.  With the defaults the
    field takes digits and one ``.``; on blur ``23452.1`` becomes
    ``23,452.10``.  The machine-readable value (``23452.10``) is always
    available from :attr:`plain_value`.

    Values over ``max_integer_digits`` are kept but flagged: the field gets
    the ``-invalid`` class through Textual's validation.  In strict mode,
    text the parser rejects is kept as entered and flagged the same way.
    """

    def __init__(
        self,
        value: str | int | float | Decimal | None = None,
        config: MoneyFieldConfig | None = None,
        **kwargs,
    ) -> None:
        """Initialize the field.

        Args:
            value: Initial amount, as a number or a plain string like ``'1234.50'``.
            config: Field configuration.  Defaults to ``MoneyFieldConfig()``.
            **kwargs: Passed on to :class:`textual.widgets.Input`.
        """
        self.engine = MoneyEngine(config)
        kwargs.setdefault("placeholder", self.engine.placeholder)
        validators = kwargs.pop("validators", None) or []
        if isinstance(validators, Validator):
            validators = [validators]
        kwargs["validators"] = [MoneyValidator(self.engine), *validators]
        initial = self._display_text(value) if value not in (None, "") else ""
        super().__init__(value=initial, **kwargs)

    def _display_text(self, value: str | int | float | Decimal | None) -> str:
        """Format *value* for display, keeping text a strict field rejects as is."""
        try:
            return self.engine.display_for(value)
        except InvalidAmountError:
            log.info("amount_rejected", value=str(value))
            return str(value)

    @property
    def config(self) -> MoneyFieldConfig:
        """The configuration this field was built with."""
        return self.engine.config

    @property
    def canonical(self) -> CanonicalValue:
        """The current text parsed into a canonical value."""
        return self.engine.parse(self.value)

    @property
    def amount(self) -> Decimal | int:
        """The current value as a number."""
        return self.engine.to_number(self.canonical)

    @property
    def plain_value(self) -> str:
        """The current value as a machine string, e.g. ``'23452.10'``."""
        return self.engine.to_plain_number_string(self.canonical)

    @property
    def errors(self) -> list[str]:
        """Validation messages for the current text; empty when valid."""
        return self.engine.get_errors(self.value)

    def set_amount(self, value: str | int | float | Decimal | None) -> None:
        """Assign a value from code and show it formatted.

        Args:
            value: A number or a plain string like ``'1234.50'``.
        """
        self.value = self._display_text(value)

    async def _on_key(self, event) -> None:
        """Intercept keys: allow configured amount characters and navigation only."""
        key = event.key

        # Let navigation, editing and ctrl keys pass through.
        if is_passthrough_key(key):
            await super()._on_key(event)
            return

        # Use event.character for printable-character checks because Textual
        # maps some keys to names (e.g. "full_stop" for ".", "minus" for "-").
        if self.engine.is_keystroke_allowed(
            event.character, self.value, cursor_position=self.cursor_position
        ):
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()

    def _on_blur(self, event: Blur) -> None:
        """Reformat the typed text when the field loses focus."""
        if self.value.strip():
            try:
                formatted = self.engine.normalize(self.value)
            except InvalidAmountError:
                formatted = self.value
            if formatted != self.value:
                log.debug("field_committed", raw=self.value, display=formatted)
                self.value = formatted
