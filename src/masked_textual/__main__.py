"""Entry point for masked-textual."""

import sys

from masked_textual.app import MaskedTextualApp
from masked_textual.config import parse_args, resolve_settings
from masked_textual.errors import ConfigError
from masked_textual.log import setup_logging


def main() -> None:
    """Run the masked-textual demo application."""
    args = parse_args()
    try:
        settings = resolve_settings(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    setup_logging(settings.log_level, settings.log_file)
    app = MaskedTextualApp(settings)
    app.run()


if __name__ == "__main__":
    main()
