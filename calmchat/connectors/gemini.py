# calmchat/connectors/gemini.py
from typing import Any, Optional

import httpx

from ..config import Settings

GENERATION_CONFIG = {"maxOutputTokens": 200, "temperature": 0.6, "topP": 0.95}


def build_request_body(prompt: str) -> dict:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


async def generate_content(
    prompt: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Single POST to {base}/{model}:generateContent; returns the decoded JSON."""
    if not settings.api_key:
        raise RuntimeError("GEMINI_API_KEY not set")
    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": settings.api_key,
    }
    async with httpx.AsyncClient(timeout=settings.timeout, transport=transport) as client:
        r = await client.post(settings.endpoint, json=build_request_body(prompt), headers=headers)
        r.raise_for_status()
        return r.json()
