"""
Turn plumbing shared by the dialog engine and its hosts.

A TurnContext carries one inbound message and collects the outbound
activities produced while the turn runs. TurnResult tells the host whether
the stack is waiting on a prompt, has completed, or was empty.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Optional


class InputHint(str, Enum):
    ACCEPTING_INPUT = "acceptingInput"
    EXPECTING_INPUT = "expectingInput"
    IGNORING_INPUT = "ignoringInput"


@dataclass
class Activity:
    text: str
    speak: str
    input_hint: InputHint = InputHint.ACCEPTING_INPUT

    def to_dict(self) -> dict:
        return {"text": self.text, "speak": self.speak, "input_hint": self.input_hint.value}


@dataclass
class TurnContext:
    conversation_id: str
    text: Any = None
    responses: List[Activity] = field(default_factory=list)

    def send_activity(
        self,
        text: str,
        speak: Optional[str] = None,
        input_hint: InputHint = InputHint.ACCEPTING_INPUT,
    ) -> Activity:
        """Queue a message for the channel. Fire-and-forget for callers."""
        activity = Activity(text=text, speak=speak if speak is not None else text, input_hint=input_hint)
        self.responses.append(activity)
        return activity


class TurnStatus(Enum):
    WAITING = "waiting"
    COMPLETE = "complete"
    EMPTY = "empty"


@dataclass(frozen=True)
class TurnResult:
    status: TurnStatus
    step_id: Optional[str] = None
    prompt: Optional[str] = None
    payload: Any = None

    @classmethod
    def waiting(cls, step_id: str, prompt: str) -> "TurnResult":
        return cls(TurnStatus.WAITING, step_id=step_id, prompt=prompt)

    @classmethod
    def complete(cls, payload: Any = None) -> "TurnResult":
        return cls(TurnStatus.COMPLETE, payload=payload)

    @classmethod
    def empty(cls) -> "TurnResult":
        return cls(TurnStatus.EMPTY)


class StepEntry(Enum):
    INITIAL_ENTRY = "initial_entry"   # previous step's value, or the trigger on step 0
    PROMPT_ANSWER = "prompt_answer"   # user's reply to the prompt the frame is suspended on
    CHILD_RESULT = "child_result"     # payload of a child dialog that just completed


@dataclass(frozen=True)
class StepInvocation:
    entry: StepEntry
    value: Any = None

    @classmethod
    def initial(cls, value: Any = None) -> "StepInvocation":
        return cls(StepEntry.INITIAL_ENTRY, value)

    @classmethod
    def prompt_answer(cls, value: Any) -> "StepInvocation":
        return cls(StepEntry.PROMPT_ANSWER, value)

    @classmethod
    def child_result(cls, value: Any) -> "StepInvocation":
        return cls(StepEntry.CHILD_RESULT, value)
