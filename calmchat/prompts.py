# calmchat/prompts.py

CRISIS_REPLY = (
    "I’m really sorry you’re feeling this way. I’m not a professional. "
    "Please contact immediate help now: TeleMANAS (India) 14416 or Emergency 112. "
    "If you are in immediate danger, call your local emergency number."
)

FALLBACK_REPLY = "I’m here with you. Try a slow breath: inhale 4s, hold 2s, exhale 6s."

NO_API_KEY_NOTE = "no-api-key"

PROMPT_TEMPLATE = """You are a calm, concise, empathetic assistant. You are NOT a doctor or therapist.
Keep answers short (1-3 sentences), supportive, and give one simple coping action (breathing or grounding).
Do NOT provide medical or diagnostic advice. If the user expresses suicidal intent, instruct them to seek immediate help.
User: {user_text}"""


def build_prompt(user_text: str) -> str:
    # str.format does not re-scan the substituted value, braces in user text are safe
    return PROMPT_TEMPLATE.format(user_text=user_text)
