"""Tests for the demo application and its entry point."""

from __future__ import annotations

import pytest

from money_field import __main__ as entry
from money_field import log
from money_field.app import MoneyFieldApp
from money_field.config import MoneyFieldConfig
from money_field.widgets.money_input import MoneyInput


class TestMoneyFieldApp:
    """Tests for MoneyFieldApp."""

    async def test_amount_focused_on_mount(self):
        """The amount field has focus after startup."""
        app = MoneyFieldApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.focused is app.query_one("#amount", MoneyInput)

    async def test_initial_value_mirrored(self):
        """The initial value is shown formatted and mirrored as a plain number."""
        app = MoneyFieldApp(config=MoneyFieldConfig(decimal_separator=","), value="1234.5")
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#amount", MoneyInput).value == "1.234,50"
            assert app.mirror_value == "1234.50"

    async def test_mirror_follows_typing(self):
        """The mirror line updates while typing."""
        app = MoneyFieldApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("4", "2", ".", "5")
            await pilot.pause()
            assert app.mirror_value == "42.50"

    async def test_empty_field_mirrors_zero(self):
        """An empty field mirrors the zero value."""
        app = MoneyFieldApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.mirror_value == "0.00"

    async def test_strict_invalid_initial_value_starts(self):
        """A strict app starts with an unparseable initial value and shows the error."""
        app = MoneyFieldApp(config=MoneyFieldConfig(on_invalid="reject"), value="abc")
        async with app.run_test() as pilot:
            await pilot.pause()
            amount = app.query_one("#amount", MoneyInput)
            assert amount.value == "abc"
            assert amount.errors
            assert app.mirror_value == ""


class TestMain:
    """Tests for the command-line entry point."""

    def test_invalid_config_exits(self, isolated_config, monkeypatch):
        """An invalid configuration exits with an error."""
        monkeypatch.setattr("sys.argv", ["money-field", "--precision", "-1"])
        with pytest.raises(SystemExit):
            entry.main()

    def test_runs_app_with_resolved_config(self, isolated_config, monkeypatch):
        """The app is started with the resolved config and initial value."""
        started = []
        monkeypatch.setattr("sys.argv", ["money-field", "-d", ",", "--value", "12.5"])
        monkeypatch.setattr(MoneyFieldApp, "run", lambda self: started.append(self))
        entry.main()
        assert len(started) == 1
        assert started[0].field_config.decimal_separator == ","
        assert started[0].initial_value == "12.5"

    def test_log_file_closed_after_run(self, isolated_config, monkeypatch, tmp_path):
        """The log file opened for the run is closed when the app exits."""
        log_file = tmp_path / "money-field.log"
        monkeypatch.setattr("sys.argv", ["money-field", "--log-file", str(log_file)])
        monkeypatch.setattr(MoneyFieldApp, "run", lambda self: None)
        entry.main()
        assert log._log_stream is None
        assert log_file.exists()
