"""Answer Parser - Turn a chat-completion envelope into a NameSuggestion.

This module handles:
- Locating the answer text in the envelope (string, content parts, or reasoning field)
- Parsing the text as JSON, with one fallback to a fenced code block
- Validating the four required suggestion fields

Interface Contract:
- extract_answer_text(envelope) -> str
- parse_answer_json(text) -> Any
- validate_suggestion(parsed) -> NameSuggestion
- All failures raise AnswerParseError subclasses (HTTP 502)
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

from hanname.models import NameSuggestion


class AnswerParseError(Exception):
    """Raised when the model answer cannot be turned into a suggestion."""
    status_code = 502

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self)}


class EmptyAnswerError(AnswerParseError):
    """Raised when no answer text can be found."""

    def __init__(self, message: str = "DeepSeek returned empty content"):
        super().__init__(message)


class UnparsableAnswerError(AnswerParseError):
    """Raised when the answer is not JSON, directly or inside a code block."""

    def __init__(self, raw: str):
        super().__init__("DeepSeek response is not valid JSON")
        self.raw = raw

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self), "raw": self.raw}


class IncompleteAnswerError(AnswerParseError):
    """Raised when the parsed answer lacks required fields."""

    def __init__(self, raw: Any, missing: list[str]):
        super().__init__(f"DeepSeek response is missing required fields: {', '.join(missing)}")
        self.raw = raw
        self.missing = missing

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self), "raw": self.raw}


# ============================================================================
# Answer extraction
# ============================================================================

@dataclass(frozen=True)
class TextContent:
    """``message.content`` is a plain string."""
    text: str


@dataclass(frozen=True)
class PartsContent:
    """``message.content`` is a list of content parts."""
    parts: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.parts)


@dataclass(frozen=True)
class ReasoningContent:
    """``message.content`` is absent; some DeepSeek models answer in ``reasoning_content``."""
    text: str


MessageContent = Union[TextContent, PartsContent, ReasoningContent]


def _part_text(part: Any) -> str:
    if isinstance(part, str):
        return part
    if isinstance(part, dict) and part.get("type") == "text" and isinstance(part.get("text"), str):
        return part["text"]
    return ""


def decode_message_content(message: Any) -> MessageContent | None:
    """Classify the assistant message into one of the known content shapes."""
    if not isinstance(message, dict):
        return None

    content = message.get("content")
    if isinstance(content, str):
        return TextContent(content)
    if isinstance(content, list):
        return PartsContent(tuple(_part_text(part) for part in content))

    reasoning = message.get("reasoning_content")
    if content is None and isinstance(reasoning, str):
        return ReasoningContent(reasoning)
    return None


def extract_answer_text(envelope: Any) -> str:
    """Return the assistant's answer text from ``choices[0].message``.

    Raises:
        EmptyAnswerError: If no non-empty text is found
    """
    message = None
    if isinstance(envelope, dict):
        choices = envelope.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            message = choices[0].get("message")

    decoded = decode_message_content(message)
    if decoded is None or not decoded.text:
        raise EmptyAnswerError()
    return decoded.text


# ============================================================================
# JSON recovery
# ============================================================================

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def parse_answer_json(text: str) -> Any:
    """Parse the answer as JSON, falling back to the first fenced code block.

    Raises:
        EmptyAnswerError: If the text is empty after trimming
        UnparsableAnswerError: If neither attempt yields valid JSON
    """
    trimmed = (text or "").strip()
    if not trimmed:
        raise EmptyAnswerError()

    try:
        return json.loads(trimmed)
    except json.JSONDecodeError:
        pass

    match = _FENCED_BLOCK.search(trimmed)
    candidate = match.group(1).strip() if match else ""
    if not candidate:
        raise UnparsableAnswerError(trimmed)

    try:
        return json.loads(candidate)
    except json.JSONDecodeError as e:
        raise UnparsableAnswerError(trimmed) from e


# ============================================================================
# Validation
# ============================================================================

# Keys requested of the model -> NameSuggestion attribute; the attribute name is accepted too
SUGGESTION_FIELDS = {
    "name": "name",
    "pinyin": "phonetic",
    "meaning": "meaning",
    "reason": "rationale",
}


def _field_value(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if not value:
        return ""
    return str(value)


def validate_suggestion(parsed: Any) -> NameSuggestion:
    """Build a NameSuggestion from the parsed answer, dropping extra fields.

    Raises:
        IncompleteAnswerError: If any required field is missing or empty
    """
    data = parsed if isinstance(parsed, dict) else {}

    values: dict[str, str] = {}
    missing: list[str] = []
    for key, attr in SUGGESTION_FIELDS.items():
        value = _field_value(data.get(key)) or _field_value(data.get(attr))
        if value:
            values[attr] = value
        else:
            missing.append(key)

    if missing:
        raise IncompleteAnswerError(parsed, missing)
    return NameSuggestion(**values)
