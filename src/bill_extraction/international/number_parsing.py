"""Locale-tolerant amount normalization for bill text."""
from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENTS = Decimal("0.01")

_SWAP_SEPARATORS = str.maketrans({".": ",", ",": "."})


def normalize_amount(raw: str, decimal_separator: str = ",") -> Decimal | None:
    """Convert a matched amount token to a positive two-place ``Decimal``.

    Algorithm (decimal_separator=",", the Turkish convention):
    - Drop every "." (thousands separator): "1.234,56" -> "1234,56"
    - Turn every "," into ".": "1234,56" -> "1234.56"
    - If the first "." is followed by exactly three characters it was a
      thousands separator after all, so drop every ".": "1,234" -> "1234"
    - Parse; anything unparseable, non-finite or not above zero is rejected

    With decimal_separator="." (English) the two separators are swapped
    first, so "1,234.56" goes through the same steps as "1.234,56".

    The third step cannot tell "1.234" (thousands) from "1.234" (decimal);
    it is kept as-is for parity with existing bills.
    Returns ``None`` instead of raising on malformed input.
    """
    if not raw:
        return None

    cleaned = raw.strip()
    if decimal_separator == ".":
        cleaned = cleaned.translate(_SWAP_SEPARATORS)
    cleaned = cleaned.replace(".", "").replace(",", ".")

    if "." in cleaned and len(cleaned.split(".")[1]) == 3:
        cleaned = cleaned.replace(".", "")

    try:
        value = Decimal(cleaned)
        if not value.is_finite() or value <= 0:
            return None
        # Too many digits for the context precision also lands here
        value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

    return value if value > 0 else None
