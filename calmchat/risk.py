# calmchat/risk.py
from enum import Enum
from typing import Iterable, Optional

# explicit self-harm / suicide language
HIGH_RISK_PHRASES = (
    "suicide", "kill myself", "want to die", "end my life", "hurt myself",
    "i want to die", "i'll kill myself", "i will kill myself",
)

# hopelessness / despair language
MODERATE_RISK_PHRASES = (
    "hopeless", "worthless", "can't go on", "cant go on", "no reason to live",
    "empty", "broken", "give up", "depressed", "i can't",
)


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


def _contains_any(text: str, phrases: Iterable[str]) -> bool:
    return any(p in text for p in phrases)


def classify(
    text: Optional[str],
    high: Iterable[str] = HIGH_RISK_PHRASES,
    moderate: Iterable[str] = MODERATE_RISK_PHRASES,
) -> RiskLevel:
    """
    Coarse self-harm risk of a chat message.
    High-risk phrases always win over moderate ones; empty text is low.
    """
    if not text:
        return RiskLevel.LOW
    lower = text.lower()
    if _contains_any(lower, high):
        return RiskLevel.HIGH
    if _contains_any(lower, moderate):
        return RiskLevel.MODERATE
    return RiskLevel.LOW
