# calmchat/handler.py
from typing import Optional

import httpx

from .config import Settings
from .connectors.gemini import generate_content
from .logger import logger
from .prompts import CRISIS_REPLY, FALLBACK_REPLY, NO_API_KEY_NOTE, build_prompt
from .provider import extract_text, parse_reply, truncate_reply
from .risk import RiskLevel, classify
from .schemas import ChatOut


class ChatHandler:
    """
    Turns one user message into a reply.

    High-risk messages get the fixed crisis text and never leave the process.
    Without a provider key every other message gets the fixed breathing
    exercise. Otherwise the provider is asked once and its text relayed.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    async def reply(self, message: str) -> ChatOut:
        risk = classify(message)

        if risk == RiskLevel.HIGH:
            logger.warning("High-risk message, returning crisis resources")
            return ChatOut(risk=risk, reply=CRISIS_REPLY)

        if not self.settings.provider_configured:
            logger.info("No provider key configured, returning fallback reply")
            return ChatOut(risk=risk, reply=FALLBACK_REPLY, note=NO_API_KEY_NOTE)

        payload = await generate_content(build_prompt(message), self.settings, self.transport)
        parsed = parse_reply(payload)
        logger.debug(f"Provider reply matched shape: {parsed.kind}")
        return ChatOut(risk=risk, reply=truncate_reply(extract_text(parsed)))
