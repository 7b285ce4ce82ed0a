# calmchat/provider.py
"""
Reply shapes of the generative provider.

The provider payload is not contractually fixed, so it is matched in order
against a small set of known shapes. Each shape is a pydantic model; the
first one that validates wins. Strings become RawTextReply and anything else
is kept as UnknownReply.
"""
import json
from typing import Annotated, Any, ClassVar, List, Union

from pydantic import BaseModel, BeforeValidator, Field, ValidationError

MAX_REPLY_CHARS = 800
ELLIPSIS = "..."


def _first_only(value: Any) -> Any:
    # only the first element of a list is ever read
    if isinstance(value, list):
        return value[:1]
    return value


class TextPart(BaseModel):
    text: str = Field(min_length=1)


class ContentList(BaseModel):
    content: Annotated[List[TextPart], BeforeValidator(_first_only), Field(min_length=1)]


class PartsContent(BaseModel):
    parts: Annotated[List[TextPart], BeforeValidator(_first_only), Field(min_length=1)]


class ContentParts(BaseModel):
    content: PartsContent


# -------------------- Known shapes --------------------

class CandidatesReply(BaseModel):
    """candidates[0].content[0].text"""
    kind: ClassVar[str] = "candidates"
    candidates: Annotated[List[ContentList], BeforeValidator(_first_only), Field(min_length=1)]

    @property
    def text(self) -> str:
        return self.candidates[0].content[0].text


class CandidatePartsReply(BaseModel):
    """candidates[0].content.parts[0].text, the documented generateContent shape."""
    kind: ClassVar[str] = "candidate_parts"
    candidates: Annotated[List[ContentParts], BeforeValidator(_first_only), Field(min_length=1)]

    @property
    def text(self) -> str:
        return self.candidates[0].content.parts[0].text


class OutputsReply(BaseModel):
    """outputs[0].content[0].text"""
    kind: ClassVar[str] = "outputs"
    outputs: Annotated[List[ContentList], BeforeValidator(_first_only), Field(min_length=1)]

    @property
    def text(self) -> str:
        return self.outputs[0].content[0].text


class RawTextReply(BaseModel):
    kind: ClassVar[str] = "raw_text"
    text: str


class UnknownReply(BaseModel):
    kind: ClassVar[str] = "unknown"
    payload: Any = None


ProviderReply = Union[CandidatesReply, CandidatePartsReply, OutputsReply, RawTextReply, UnknownReply]

# match order matters
KNOWN_SHAPES = (CandidatesReply, CandidatePartsReply, OutputsReply)


def parse_reply(payload: Any) -> ProviderReply:
    for shape in KNOWN_SHAPES:
        try:
            return shape.model_validate(payload)
        except ValidationError:
            continue
    if isinstance(payload, str):
        return RawTextReply(text=payload)
    return UnknownReply(payload=payload)


def extract_text(reply: ProviderReply) -> str:
    if isinstance(reply, UnknownReply):
        return json.dumps(reply.payload, separators=(",", ":"), ensure_ascii=False)
    return reply.text


def truncate_reply(text: str, limit: int = MAX_REPLY_CHARS) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text
