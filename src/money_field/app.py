"""Demo Textual application hosting a single money field."""

from __future__ import annotations

from decimal import Decimal

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, Label, Static

from money_field.config import MoneyFieldConfig
from money_field.parser import InvalidAmountError
from money_field.widgets.money_input import MoneyInput


class MoneyFieldApp(App):
    """A small form showing a money field next to its machine-readable value."""

    TITLE = "money-field"

    CSS = """
    #money-form {
        padding: 1 2;
        height: auto;
    }
    .form-field {
        height: auto;
    }
    .form-field Label {
        width: 10;
        padding: 1 0;
    }
    #amount {
        width: 30;
        text-align: right;
    }
    #errors {
        color: $error;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: MoneyFieldConfig | None = None,
        value: str | int | float | Decimal | None = None,
    ) -> None:
        """Initialize the app.

        Args:
            config: Configuration for the money field.
            value: Initial amount for the field.
        """
        super().__init__()
        self.field_config = config or MoneyFieldConfig()
        self.initial_value = value
        self.mirror_value = ""

    def compose(self) -> ComposeResult:
        """Create the form layout."""
        with Vertical(id="money-form"):
            with Horizontal(classes="form-field"):
                yield Label("Amount:")
                yield MoneyInput(value=self.initial_value, config=self.field_config, id="amount")
            with Horizontal(classes="form-field"):
                yield Label("Note:")
                yield Input(placeholder="optional", id="note")
            yield Static("", id="mirror")
            yield Static("", id="errors")

    def on_mount(self) -> None:
        """Show the initial machine value and focus the amount."""
        self._refresh_mirror()
        self.query_one("#amount", MoneyInput).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Keep the mirror line in sync with the money field."""
        if event.input.id == "amount":
            self._refresh_mirror()

    def _refresh_mirror(self) -> None:
        """Write the field's plain value and validation messages below the form."""
        amount = self.query_one("#amount", MoneyInput)
        try:
            self.mirror_value = amount.plain_value
        except InvalidAmountError:
            self.mirror_value = ""
        self.query_one("#mirror", Static).update(f"Value: {self.mirror_value}")
        self.query_one("#errors", Static).update("\n".join(amount.errors))
