"""Extraction API routes."""
from __future__ import annotations
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from ...models.locale import Locale
from ...models.schema import ExtractedBill, ManualParseOutcome
from ...pipeline import parse_bill_from_text, parse_manual_input

router = APIRouter()


class ParseTextRequest(BaseModel):
    """Bill text plus an optional locale code ("tr" or "en")."""
    text: str
    locale: Locale | None = None


def _resolve_locale(request: Request, body: ParseTextRequest) -> Locale:
    settings = request.app.state.settings
    if len(body.text) > settings.max_text_length:
        raise HTTPException(
            status_code=422,
            detail=f"Text exceeds {settings.max_text_length} characters",
        )
    return body.locale or settings.default_locale


@router.post("/text", response_model=ExtractedBill)
async def extract_from_text(body: ParseTextRequest, request: Request):
    """Extract bill fields from recognized text."""
    locale = _resolve_locale(request, body)
    return parse_bill_from_text(body.text, locale)


@router.post("/manual", response_model=ManualParseOutcome)
async def extract_from_manual_input(body: ParseTextRequest, request: Request):
    """Extract bill fields from typed or pasted text, with an outcome message."""
    locale = _resolve_locale(request, body)
    return parse_manual_input(body.text, locale)
