"""Extraction orchestrator: amount, due date and category -> confidence -> result."""
from __future__ import annotations
import re
from collections.abc import Callable, Sequence
from functools import partial
from typing import TypeVar

import structlog

from .international.date_parsing import normalize_date
from .international.messages import get_message
from .international.number_parsing import normalize_amount
from .international.patterns import get_pattern_set
from .models.classification import classify
from .models.confidence import score
from .models.locale import Locale
from .models.schema import ExtractedBill, ManualParseOutcome
from .recognition.base import RecognitionError, TextRecognizer

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _first_normalized(
    text: str,
    patterns: Sequence[re.Pattern[str]],
    normalize: Callable[[str], T | None],
) -> T | None:
    """Try *patterns* in order and return the first match that normalizes.

    Only the first match of each pattern is considered; a match that fails
    normalization moves on to the next pattern.
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match and match.group(1):
            value = normalize(match.group(1))
            if value is not None:
                return value
    return None


def parse_bill_from_text(text: str, locale: Locale | str = Locale.TURKISH) -> ExtractedBill:
    """Extract amount, due date and category from recognized bill text.

    Raises ``UnsupportedLocaleError`` for an unknown locale code. Any text,
    however malformed, yields a result.
    """
    locale = Locale.from_code(locale)
    patterns = get_pattern_set(locale)

    amount = _first_normalized(
        text,
        patterns.amount_patterns,
        partial(normalize_amount, decimal_separator=patterns.decimal_separator),
    )
    due_date = _first_normalized(text, patterns.due_date_patterns, normalize_date)
    category = classify(text, patterns)
    confidence = score(amount, due_date, category)

    logger.debug(
        "bill_parsed",
        locale=locale.value,
        text_length=len(text),
        amount_found=amount is not None,
        due_date_found=due_date is not None,
        category=category.value,
        confidence=confidence,
    )

    return ExtractedBill(
        amount=amount,
        due_date=due_date,
        category=category,
        confidence=confidence,
        raw_text=text,
    )


def parse_manual_input(text: str, locale: Locale | str = Locale.TURKISH) -> ManualParseOutcome:
    """Parse text a user typed or pasted, with a user-facing outcome message."""
    locale = Locale.from_code(locale)

    if not text or not text.strip():
        logger.info("manual_input_empty", locale=locale.value)
        return ManualParseOutcome(success=False, message=get_message(locale, "no_text"))

    bill = parse_bill_from_text(text, locale)
    if bill.confidence > 0:
        message = get_message(locale, "found", confidence=bill.confidence)
    else:
        message = get_message(locale, "not_found")

    return ManualParseOutcome(success=bill.confidence > 0, message=message, data=bill)


async def recognize_and_parse(
    image_ref: str,
    locale: Locale | str = Locale.TURKISH,
    recognizer: TextRecognizer | None = None,
) -> ManualParseOutcome:
    """Run an image through *recognizer* and parse the text it returns.

    Without a recognizer the outcome asks the user to enter details by hand.
    """
    locale = Locale.from_code(locale)

    if recognizer is None:
        logger.info("recognition_not_configured", image_ref=image_ref)
        return ManualParseOutcome(success=False, message=get_message(locale, "not_configured"))

    try:
        text = await recognizer.recognize_text(image_ref)
    except RecognitionError as e:
        logger.warning(
            "recognition_failed",
            provider=recognizer.get_provider_name(),
            image_ref=image_ref,
            error=str(e),
        )
        return ManualParseOutcome(
            success=False,
            message=get_message(locale, "recognition_failed", reason=str(e)),
        )

    logger.info(
        "recognition_completed",
        provider=recognizer.get_provider_name(),
        image_ref=image_ref,
        text_length=len(text),
    )
    return parse_manual_input(text, locale)
