"""Bill category classification.

Scans text against a locale's category rules in their declared order and
returns the first hit. Bills often name more than one service (an ISP that
also sells phone lines, say), so declaration order decides ties.
"""

from __future__ import annotations

from bill_extraction.international.patterns import PatternSet
from bill_extraction.models.schema import BillCategory


def classify(text: str, pattern_set: PatternSet) -> BillCategory:
    """Return the first matching category for *text*, or ``OTHER``."""
    for category, pattern in pattern_set.category_patterns:
        if pattern.search(text):
            return category
    return BillCategory.OTHER
