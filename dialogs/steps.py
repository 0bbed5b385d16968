"""
Step outcomes and the context handed to each waterfall step.

Every step returns exactly one outcome; the DialogStack turns outcomes into
frame transitions:

  Prompt      → suspend the frame until the next inbound message
  Next        → advance to the following step carrying a value
  Complete    → end the dialog and hand the payload to the parent frame
  BeginChild  → push a child dialog; its result comes back to this same step
  ReplaceWith → swap the current frame for a fresh one
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from dialogs.errors import UnknownDialog
from dialogs.prompts import PromptSpec
from dialogs.turn import InputHint, StepEntry, StepInvocation, TurnContext

if TYPE_CHECKING:
    from dialogs.dialog import WaterfallDialog
    from dialogs.stack import DialogFrame


@dataclass(frozen=True)
class Prompt:
    spec: PromptSpec


@dataclass(frozen=True)
class Next:
    value: Any = None


@dataclass(frozen=True)
class Complete:
    payload: Any = None


@dataclass(frozen=True)
class BeginChild:
    dialog_id: str
    options: Any = None


@dataclass(frozen=True)
class ReplaceWith:
    dialog_id: str
    options: Any = None


class WaterfallStepContext:
    """What a single step sees: its frame's options and the value it was entered with."""

    def __init__(
        self,
        turn_context: TurnContext,
        dialog: "WaterfallDialog",
        frame: "DialogFrame",
        invocation: StepInvocation,
    ):
        self.turn_context = turn_context
        self.dialog = dialog
        self.frame = frame
        self.invocation = invocation

    @property
    def options(self) -> Any:
        return self.frame.options

    @property
    def result(self) -> Any:
        return self.invocation.value

    @property
    def entry(self) -> StepEntry:
        return self.invocation.entry

    @property
    def is_child_result(self) -> bool:
        return self.invocation.entry is StepEntry.CHILD_RESULT

    def prompt(self, prompt_id: str, text: str) -> Prompt:
        """Send the prompt message and suspend the frame on it."""
        kind = self.dialog.prompts.get(prompt_id)
        if kind is None:
            raise UnknownDialog(prompt_id)
        self.turn_context.send_activity(text, text, InputHint.EXPECTING_INPUT)
        return Prompt(PromptSpec(kind=kind, prompt_id=prompt_id, message=text))

    def next(self, value: Any = None) -> Next:
        return Next(value)

    def end_dialog(self, payload: Any = None) -> Complete:
        return Complete(payload)

    def begin_dialog(self, dialog_id: str, options: Any = None) -> BeginChild:
        return BeginChild(dialog_id, options)

    def replace_dialog(self, dialog_id: str, options: Any = None) -> ReplaceWith:
        return ReplaceWith(dialog_id, options)
