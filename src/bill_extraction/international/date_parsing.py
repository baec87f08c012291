"""Due-date normalization for bill text."""
from __future__ import annotations
from datetime import date, timedelta
import re

_SEPARATORS = re.compile(r"[/.\-]")
_DIGITS = re.compile(r"[0-9]+")

MIN_YEAR_EXCLUSIVE = 2000


def normalize_date(raw: str) -> date | None:
    """Convert a matched date token to a ``date``.

    Parts are always read as day, month, year, whatever the locale, so a
    US-style "03/15/2024" is rejected (month 15). Years with fewer than three
    digits are taken as 20xx. Day-of-month is only checked against 1..31:
    an overflowing day rolls into the following month ("31/02/2024" becomes
    2024-03-02) rather than being rejected.
    """
    if not raw:
        return None

    parts = _SEPARATORS.split(raw.strip())
    if len(parts) != 3 or not all(_DIGITS.fullmatch(p) for p in parts):
        return None

    day, month, year = (int(p) for p in parts)
    if len(parts[2]) < 3:
        year += 2000

    if not (1 <= day <= 31 and 1 <= month <= 12 and year > MIN_YEAR_EXCLUSIVE):
        return None

    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        # beyond date.max
        return None

