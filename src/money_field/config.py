"""Configuration for money fields.

Priority order (highest to lowest):
1. command-line arguments
2. ~/.config/money-field/config.toml -> [field] table
3. MoneyFieldConfig defaults
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, fields
from pathlib import Path

from money_field.log import get_logger
from money_field.models import InvalidInputPolicy

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_CONFIG_PATH = Path.home() / ".config" / "money-field" / "config.toml"

log = get_logger(__name__)


class ConfigurationError(ValueError):
    """Raised when a money field is configured inconsistently."""


@dataclass(frozen=True)
class MoneyFieldConfig:
    """Immutable settings shared by the policy, parser and formatter of one field.

    ``grouping_separator`` defaults to the complement of the decimal
    separator (``"."`` for ``","`` and ``","`` for anything else).  A
    precision of 0 turns ``allow_decimals`` off.
    """

    decimal_separator: str = "."
    grouping_separator: str | None = None
    decimal_precision: int = 2
    allow_decimals: bool = True
    allow_negative: bool = False
    max_integer_digits: int | None = None
    on_invalid: InvalidInputPolicy = InvalidInputPolicy.COERCE

    def __post_init__(self) -> None:
        _check_separator("decimal_separator", self.decimal_separator)
        if self.grouping_separator is None:
            grouping = "." if self.decimal_separator == "," else ","
            object.__setattr__(self, "grouping_separator", grouping)
        _check_separator("grouping_separator", self.grouping_separator)
        if self.grouping_separator == self.decimal_separator:
            raise ConfigurationError(
                f"decimal_separator and grouping_separator are both {self.decimal_separator!r}"
            )

        for name in ("allow_decimals", "allow_negative"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(
                    f"{name} must be true or false, got {getattr(self, name)!r}"
                )

        if not _is_int(self.decimal_precision) or self.decimal_precision < 0:
            raise ConfigurationError(
                f"decimal_precision must be a non-negative integer, got {self.decimal_precision!r}"
            )
        if self.decimal_precision == 0:
            object.__setattr__(self, "allow_decimals", False)

        if self.max_integer_digits is not None and (
            not _is_int(self.max_integer_digits) or self.max_integer_digits <= 0
        ):
            raise ConfigurationError(
                f"max_integer_digits must be a positive integer, got {self.max_integer_digits!r}"
            )

        if not isinstance(self.on_invalid, InvalidInputPolicy):
            try:
                policy = InvalidInputPolicy(self.on_invalid)
            except ValueError:
                raise ConfigurationError(f"Unknown on_invalid policy: {self.on_invalid!r}") from None
            object.__setattr__(self, "on_invalid", policy)

    @property
    def precision(self) -> int:
        """Number of fraction digits actually kept (0 when decimals are off)."""
        return self.decimal_precision if self.allow_decimals else 0


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_separator(name: str, value: object) -> None:
    """Reject anything that is not a single non-digit, non-sign character."""
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError(f"{name} must be a single character, got {value!r}")
    if value.isdigit() or value == "-":
        raise ConfigurationError(f"{name} cannot be {value!r}")


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        log.warning("config_unreadable", path=str(_CONFIG_PATH), error=str(exc))
        return {}


def load_field_settings() -> dict:
    """Return the ``[field]`` table of config.toml, keeping only known keys.

    Example config.toml::

        [field]
        decimal_separator = ","
        decimal_precision = 2
        allow_negative = true

    Returns:
        A dict of MoneyFieldConfig keyword arguments.  Empty when the file
        or the table is missing.
    """
    table = _load_config_dict().get("field", {})
    if not isinstance(table, dict):
        return {}
    known = {f.name for f in fields(MoneyFieldConfig)}
    return {k: v for k, v in table.items() if k in known}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace.  Options that were not given are None so that
        config.toml values can fill them in.
    """
    parser = argparse.ArgumentParser(
        prog="money-field",
        description="An interactive, locale-aware money input field.",
    )
    parser.add_argument(
        "-d",
        "--decimal-separator",
        help="Character used as the decimal separator (default '.').",
        default=None,
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        help="Number of fraction digits to keep (0 disables decimals).",
        default=None,
    )
    parser.add_argument(
        "--allow-negative",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Accept negative amounts (--no-allow-negative to refuse them).",
    )
    parser.add_argument(
        "--max-digits",
        type=int,
        help="Maximum number of integer digits before the field is flagged invalid.",
        default=None,
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reject unparseable input instead of showing zero (--no-strict to coerce).",
    )
    parser.add_argument("--value", help="Initial amount, e.g. 1234.50.", default=None)
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    parser.add_argument("--log-file", default=None, help="Write logs to this file.")
    return parser.parse_args(argv)


def resolve_field_config(args: argparse.Namespace | None = None) -> MoneyFieldConfig:
    """Build the field configuration from CLI arguments and config.toml.

    Args:
        args: Parsed CLI namespace, or None to use config.toml only.

    Returns:
        A validated MoneyFieldConfig.

    Raises:
        ConfigurationError: If the merged settings are inconsistent.
    """
    settings = load_field_settings()
    if args is not None:
        on_invalid = None
        if args.strict is not None:
            on_invalid = InvalidInputPolicy.REJECT if args.strict else InvalidInputPolicy.COERCE
        cli = {
            "decimal_separator": args.decimal_separator,
            "decimal_precision": args.precision,
            "allow_negative": args.allow_negative,
            "max_integer_digits": args.max_digits,
            "on_invalid": on_invalid,
        }
        settings.update({k: v for k, v in cli.items() if v is not None})
    return MoneyFieldConfig(**settings)
