"""Shared test fixtures."""
import pytest
from unittest.mock import AsyncMock
from bill_extraction.config import Settings
from bill_extraction.models.locale import Locale
from bill_extraction.recognition.base import TextRecognizer
from tests.factories import TURKISH_BILL_TEXT


@pytest.fixture
def test_settings():
    """Create test settings independent of the environment."""
    return Settings(
        default_locale=Locale.TURKISH,
        max_text_length=500,
        log_level="DEBUG",
        cors_origins=["http://testserver"],
    )


@pytest.fixture
def mock_recognizer():
    """Create a mock text recognizer that returns a Turkish bill."""
    recognizer = AsyncMock(spec=TextRecognizer)
    recognizer.get_provider_name.return_value = "mock-ocr"
    recognizer.recognize_text.return_value = TURKISH_BILL_TEXT
    return recognizer
