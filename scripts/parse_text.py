#!/usr/bin/env python3
"""Parse bill text from a file (or stdin) and print the outcome as JSON."""
import sys
from pathlib import Path

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from bill_extraction.config import Settings
from bill_extraction.models.locale import Locale, UnsupportedLocaleError
from bill_extraction.pipeline import parse_manual_input
from bill_extraction.utils.logging import setup_logging


def main(source: str, locale_code: str | None = None) -> None:
    """Parse *source* ("-" for stdin) and print the manual-entry outcome."""
    settings = Settings()
    setup_logging(settings.log_level, json_output=False)

    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source).expanduser()
        if not path.exists():
            print(f"Error: File not found: {source}")
            sys.exit(1)
        text = path.read_text(encoding="utf-8")

    try:
        locale = Locale.from_code(locale_code) if locale_code else settings.default_locale
    except UnsupportedLocaleError as e:
        print(f"Error: {e}")
        sys.exit(1)

    outcome = parse_manual_input(text, locale)
    print(outcome.model_dump_json(indent=2))
    sys.exit(0 if outcome.success else 2)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/parse_text.py <path-to-text|-> [tr|en]")
        sys.exit(1)

    main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
