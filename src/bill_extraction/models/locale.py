"""Supported locales and the boundary check for incoming locale codes.

A ``Locale`` selects both the pattern set used for extraction and the
language of outcome messages. Codes arriving from callers are plain
two-letter strings; anything outside the enum is rejected here so it never
reaches the extraction core.
"""

from __future__ import annotations

from enum import StrEnum


class UnsupportedLocaleError(ValueError):
    """Raised when a locale code has no pattern set."""

    def __init__(self, code: object):
        self.code = code
        supported = ", ".join(repr(locale.value) for locale in Locale)
        super().__init__(f"Unsupported locale {code!r}; expected one of {supported}")


class Locale(StrEnum):
    TURKISH = "tr"
    ENGLISH = "en"

    @classmethod
    def from_code(cls, code: Locale | str) -> Locale:
        """Resolve a short code such as ``"tr"`` or ``" EN "`` to a ``Locale``."""
        if isinstance(code, Locale):
            return code
        if not isinstance(code, str):
            raise UnsupportedLocaleError(code)
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise UnsupportedLocaleError(code) from None
