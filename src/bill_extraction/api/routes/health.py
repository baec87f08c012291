"""Health check endpoint."""
from __future__ import annotations
from fastapi import APIRouter
from ...models.locale import Locale

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check, listing the locales the service can parse."""
    return {
        "status": "ok",
        "service": "bill-extraction-api",
        "locales": [locale.value for locale in Locale],
    }
