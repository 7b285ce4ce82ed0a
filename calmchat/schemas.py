# calmchat/schemas.py
from typing import Optional
from pydantic import BaseModel

from .risk import RiskLevel

# ----- Chat -----
class ChatIn(BaseModel):
    message: Optional[str] = None

class ChatOut(BaseModel):
    risk: RiskLevel
    reply: str
    note: Optional[str] = None  # set only on the no-credential fallback

class ErrorOut(BaseModel):
    error: str

# ----- Service -----
class HealthOut(BaseModel):
    status: str = "ok"
    provider_configured: bool
    model: str
