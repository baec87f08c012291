"""Result schema for bill extraction.

Every result is an immutable value object created fresh per call. The engine
never persists these; callers own storage of any bill a user confirms.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BillCategory(StrEnum):
    ELECTRICITY = "electricity"
    WATER = "water"
    GAS = "gas"
    INTERNET = "internet"
    PHONE = "phone"
    RENT = "rent"
    SUBSCRIPTION = "subscription"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class ExtractedBill(BaseModel):
    """Structured fields recovered from a piece of bill text.

    ``confidence`` is derived from the other three fields; see
    :func:`bill_extraction.models.confidence.score`.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal | None = Field(default=None, gt=0, decimal_places=2)
    due_date: date | None = None
    category: BillCategory = BillCategory.OTHER
    confidence: int = Field(default=0, ge=0, le=100)
    raw_text: str


class ManualParseOutcome(BaseModel):
    """Outcome of the manual-entry and recognition paths."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    data: ExtractedBill | None = None
