"""Text recognition provider abstract base class."""
from __future__ import annotations
from abc import ABC, abstractmethod


class RecognitionError(Exception):
    """A text recognition provider failed to produce text for an image."""


class TextRecognizer(ABC):
    """Abstract base class for image-to-text providers.

    Implementations turn an image reference (a file path, URI or storage key
    the provider understands) into plain text. Extraction only ever sees the
    returned string.
    """

    @abstractmethod
    async def recognize_text(self, image_ref: str) -> str:
        """Return the text recognized in *image_ref*.

        Raises ``RecognitionError`` on provider-side failure.
        """
        ...

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the provider name for logging."""
        ...
