"""
Dialogs and the registry the stack resolves dialog ids against.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, TYPE_CHECKING

from chat_logger import get_logger, sanitize_log_string
from dialogs.errors import MalformedPromptAnswer, UnknownDialog
from dialogs.prompts import PromptKind, parse_answer
from dialogs.steps import Next, Prompt, WaterfallStepContext
from dialogs.turn import InputHint, StepEntry, StepInvocation, TurnContext

if TYPE_CHECKING:
    from dialogs.stack import DialogFrame

logger = get_logger()

Step = Callable[[WaterfallStepContext], Any]


class Dialog:
    """
    A named, reusable unit of conversation.

    Subclasses set `interruptible = True` to have the CancelInterceptor
    inspect input before each of their steps.
    """

    interruptible = False

    def __init__(self, dialog_id: str):
        self.id = dialog_id

    @property
    def step_count(self) -> int:
        raise NotImplementedError

    def step_id(self, index: int) -> str:
        return f"{self.id}[{index}]"

    def run(self, turn_context: TurnContext, frame: "DialogFrame", invocation: StepInvocation):
        raise NotImplementedError


class WaterfallDialog(Dialog):
    """Ordered sequence of steps executed forward, one suspension point at a time."""

    def __init__(
        self,
        dialog_id: str,
        steps: Optional[Iterable[Step]] = None,
        prompts: Optional[Dict[str, PromptKind]] = None,
    ):
        super().__init__(dialog_id)
        self.steps: List[Step] = list(steps or [])
        self.prompts: Dict[str, PromptKind] = dict(prompts or {})

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def step_id(self, index: int) -> str:
        if 0 <= index < len(self.steps):
            return f"{self.id}.{getattr(self.steps[index], '__name__', index)}"
        return super().step_id(index)

    def run(self, turn_context: TurnContext, frame: "DialogFrame", invocation: StepInvocation):
        if invocation.entry is StepEntry.PROMPT_ANSWER:
            return self._read_prompt_answer(turn_context, frame, invocation)

        step = self.steps[frame.step_index]
        outcome = step(WaterfallStepContext(turn_context, self, frame, invocation))
        if isinstance(outcome, Prompt):
            frame.pending_prompt = outcome.spec
        return outcome

    def _read_prompt_answer(self, turn_context: TurnContext, frame: "DialogFrame", invocation: StepInvocation):
        spec = frame.pending_prompt
        try:
            value = parse_answer(spec, invocation.value)
        except MalformedPromptAnswer as e:
            logger.info(
                f"Prompt retry | dialog={self.id} | step={self.step_id(frame.step_index)} "
                f"| reason={sanitize_log_string(str(e))}"
            )
            turn_context.send_activity(spec.message, spec.message, InputHint.EXPECTING_INPUT)
            return Prompt(spec)

        frame.pending_prompt = None
        return Next(value)


class DialogSet:
    """Registry of dialogs by id."""

    def __init__(self, dialogs: Optional[Iterable[Dialog]] = None):
        self._dialogs: Dict[str, Dialog] = {}
        for dialog in dialogs or []:
            self.add(dialog)

    def add(self, dialog: Dialog) -> "DialogSet":
        self._dialogs[dialog.id] = dialog
        return self

    def find(self, dialog_id: str) -> Dialog:
        if dialog_id not in self:
            raise UnknownDialog(dialog_id)
        return self._dialogs[dialog_id]

    def __contains__(self, dialog_id: str) -> bool:
        return dialog_id in self._dialogs
