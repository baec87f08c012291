"""Per-locale pattern sets for bill text.

Each locale defines three ordered pattern groups:

* amount patterns, each with one capturing group around the numeric token
* due-date patterns, each with one capturing group around the date token
* category patterns, plain presence checks tried in declaration order

Label-before-value and value-before-label layouts are both covered, since
both show up on real bills. The tables are built at import time and never
mutated afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from bill_extraction.models.locale import Locale
from bill_extraction.models.schema import BillCategory

_FLAGS = re.IGNORECASE

# Turkish bills use "." for thousands and "," for decimals, but OCR output
# mixes both, so either separator is accepted in the token.
_TR_NUMBER = r"([0-9]{1,3}(?:[.,][0-9]{3})*(?:[.,][0-9]{2})?)"
_TR_CURRENCY = r"(?:TL|₺|TRY)"
_EN_NUMBER = r"([0-9]{1,3}(?:,[0-9]{3})*(?:\.[0-9]{2})?)"
_DATE = r"([0-9]{1,2}[/.\-][0-9]{1,2}[/.\-][0-9]{2,4})"


@dataclass(frozen=True)
class PatternSet:
    """Immutable pattern groups for one locale."""

    locale: Locale
    decimal_separator: str
    amount_patterns: tuple[re.Pattern[str], ...]
    due_date_patterns: tuple[re.Pattern[str], ...]
    category_patterns: tuple[tuple[BillCategory, re.Pattern[str]], ...]


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, _FLAGS) for p in patterns)


def _categories(rules: list[tuple[BillCategory, str]]) -> tuple[tuple[BillCategory, re.Pattern[str]], ...]:
    return tuple((category, re.compile(pattern, _FLAGS)) for category, pattern in rules)


TURKISH_PATTERNS = PatternSet(
    locale=Locale.TURKISH,
    decimal_separator=",",
    amount_patterns=_compile(
        rf"(?:toplam|tutar|ödenecek|borç|ödeme)\s*:?\s*{_TR_NUMBER}\s*{_TR_CURRENCY}?",
        rf"{_TR_NUMBER}\s*{_TR_CURRENCY}",
        rf"{_TR_CURRENCY}\s*{_TR_NUMBER}",
    ),
    due_date_patterns=_compile(
        rf"(?:son\s*ödeme|vade|ödeme\s*tarihi)\s*:?\s*{_DATE}",
        rf"{_DATE}\s*(?:son\s*ödeme|vade)",
    ),
    category_patterns=_categories([
        (BillCategory.ELECTRICITY, r"elektrik|enerji|tedaş|enerjisa|bedaş|ayedaş"),
        (BillCategory.WATER, r"su\s*fatura|iski|aski|muski|sular\s*idare"),
        (BillCategory.GAS, r"doğalgaz|igdaş|başkentgaz|esgaz|naturelgaz"),
        (BillCategory.INTERNET, r"internet|türk\s*telekom|superonline|turknet|vodafone|turkcell"),
        (BillCategory.PHONE, r"telefon|gsm|hat\s*fatura|cep\s*telefon"),
        (BillCategory.RENT, r"kira|ev\s*kira|daire\s*kira"),
        (BillCategory.SUBSCRIPTION, r"netflix|spotify|youtube|amazon|disney|abonelik"),
    ]),
)

ENGLISH_PATTERNS = PatternSet(
    locale=Locale.ENGLISH,
    decimal_separator=".",
    amount_patterns=_compile(
        rf"(?:total|amount|due|balance|pay)\s*:?\s*\$?\s*{_EN_NUMBER}",
        rf"\$\s*{_EN_NUMBER}",
    ),
    due_date_patterns=_compile(
        rf"(?:due\s*date|payment\s*due|pay\s*by)\s*:?\s*{_DATE}",
        rf"{_DATE}\s*(?:due|payment)",
    ),
    category_patterns=_categories([
        (BillCategory.ELECTRICITY, r"electric|power|energy|utility"),
        (BillCategory.WATER, r"water|sewer|drainage"),
        (BillCategory.GAS, r"gas|natural\s*gas|heating"),
        (BillCategory.INTERNET, r"internet|broadband|fiber|wifi"),
        (BillCategory.PHONE, r"phone|mobile|cellular|telecom"),
        (BillCategory.RENT, r"rent|lease|housing"),
        (BillCategory.SUBSCRIPTION, r"netflix|spotify|youtube|amazon|disney|subscription"),
    ]),
)

PATTERN_SETS: MappingProxyType[Locale, PatternSet] = MappingProxyType({
    Locale.TURKISH: TURKISH_PATTERNS,
    Locale.ENGLISH: ENGLISH_PATTERNS,
})


def get_pattern_set(locale: Locale) -> PatternSet:
    """Return the pattern set for *locale*."""
    return PATTERN_SETS[locale]
