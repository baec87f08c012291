"""Outcome messages shown to the user, per locale."""
from __future__ import annotations

from bill_extraction.models.locale import Locale

MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.ENGLISH: {
        "no_text": "No text provided",
        "found": "Found {confidence}% of bill information",
        "not_found": "Could not extract bill information",
        "not_configured": "OCR API not configured. Please enter bill details manually.",
        "recognition_failed": "OCR failed: {reason}",
    },
    Locale.TURKISH: {
        "no_text": "Metin girilmedi",
        "found": "Fatura bilgilerinin %{confidence} kadarı bulundu",
        "not_found": "Fatura bilgileri çıkarılamadı",
        "not_configured": "OCR servisi yapılandırılmadı. Lütfen fatura bilgilerini elle girin.",
        "recognition_failed": "OCR başarısız: {reason}",
    },
}


def get_message(locale: Locale, key: str, **params: object) -> str:
    """Return the *key* message for *locale* with *params* filled in."""
    return MESSAGES[locale][key].format(**params)
