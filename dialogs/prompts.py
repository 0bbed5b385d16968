"""
Prompt primitives: free text and yes/no.

A prompt is a suspension point. The waterfall records the PromptSpec on the
frame, and the next inbound message is parsed here before the dialog moves on.
"""

import re
from enum import Enum
from dataclasses import dataclass
from typing import Any

from dialogs.errors import MalformedPromptAnswer


class PromptKind(Enum):
    TEXT = "text"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class PromptSpec:
    kind: PromptKind
    prompt_id: str
    message: str


YES_WORDS = {"yes", "y", "yeah", "yep", "sure", "ok", "okay", "true", "correct", "1"}
NO_WORDS = {"no", "n", "nope", "nah", "false", "2"}

_TOKEN_RE = re.compile(r"[a-z0-9]+")


def parse_text(value: Any) -> str:
    """Accept any non-empty string."""
    if value is None:
        raise MalformedPromptAnswer("Expected text, got nothing")
    text = str(value).strip()
    if not text:
        raise MalformedPromptAnswer("Expected text, got an empty message")
    return text


def parse_confirm(value: Any) -> bool:
    """
    Parse a yes/no answer.

    Booleans pass through. For text, the answer is yes (or no) when it
    contains a yes word (or no word) and nothing from the other side.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        raise MalformedPromptAnswer("Expected yes or no, got nothing")

    tokens = set(_TOKEN_RE.findall(str(value).lower()))
    said_yes = bool(tokens & YES_WORDS)
    said_no = bool(tokens & NO_WORDS)
    if said_yes and not said_no:
        return True
    if said_no and not said_yes:
        return False
    raise MalformedPromptAnswer(f"Expected yes or no, got '{value}'")


def parse_answer(spec: PromptSpec, value: Any) -> Any:
    if spec.kind is PromptKind.CONFIRM:
        return parse_confirm(value)
    return parse_text(value)
