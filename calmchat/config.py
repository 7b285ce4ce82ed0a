# calmchat/config.py
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-1.5-mini"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True)
class Settings:
    """Read-only process settings handed to the app and the chat handler."""
    model: str = DEFAULT_MODEL
    api_key: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def provider_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.model}:generateContent"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()  # picks up .env next to the working directory, if any
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
            # blank key counts as missing
            api_key=(os.getenv("GEMINI_API_KEY") or "").strip() or None,
            api_base=os.getenv("GEMINI_BASE") or DEFAULT_API_BASE,
            timeout=float(os.getenv("GEMINI_TIMEOUT", str(DEFAULT_TIMEOUT))),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
