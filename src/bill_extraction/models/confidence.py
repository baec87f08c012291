"""Confidence scoring for extracted bills.

The score reports how much structured information was recovered, not a
statistical probability. Each field contributes a fixed weight, so the only
possible results are 0, 20, 40, 60, 80 and 100.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from bill_extraction.models.schema import BillCategory

AMOUNT_WEIGHT = 40
DUE_DATE_WEIGHT = 40
CATEGORY_WEIGHT = 20


def score(
    amount: Decimal | None,
    due_date: date | None,
    category: BillCategory,
) -> int:
    """Return the 0-100 confidence for the given extraction outcome.

    Scoring rules
    -------------
    * An amount adds **+40**.
    * A due date adds **+40**.
    * Any category other than ``OTHER`` adds **+20**.
    """

    points = 0
    if amount is not None:
        points += AMOUNT_WEIGHT
    if due_date is not None:
        points += DUE_DATE_WEIGHT
    if category != BillCategory.OTHER:
        points += CATEGORY_WEIGHT
    return points
