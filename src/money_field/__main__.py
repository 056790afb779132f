"""Entry point for money-field."""

import sys

from money_field.app import MoneyFieldApp
from money_field.config import ConfigurationError, parse_args, resolve_field_config
from money_field.log import close_logging, setup_logging


def main() -> None:
    """Run the money-field demo application."""
    args = parse_args()
    setup_logging(args.log_level, args.log_file)
    try:
        try:
            config = resolve_field_config(args)
        except ConfigurationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        app = MoneyFieldApp(config=config, value=args.value)
        app.run()
    finally:
        close_logging()


if __name__ == "__main__":
    main()
