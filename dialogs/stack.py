"""
DialogStack: per-conversation stack of active dialog frames.

The stack is plain data (a list of DialogFrame) so it can be stored between
turns; suspension is "frame + step index + pending prompt", never a live
call stack. Only the top frame receives input.

Within one turn the stack cascades: a step's outcome may advance the frame,
push a child, pop back into the parent or replace the frame, and the loop
keeps going until some step suspends on a prompt or the stack empties.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from chat_logger import get_logger
from dialogs.dialog import DialogSet
from dialogs.interceptor import CancelInterceptor
from dialogs.prompts import PromptSpec
from dialogs.steps import BeginChild, Complete, Next, Prompt, ReplaceWith
from dialogs.turn import StepInvocation, TurnContext, TurnResult

logger = get_logger()


@dataclass
class DialogFrame:
    dialog_id: str
    step_index: int = 0
    options: Any = None
    pending_prompt: Optional[PromptSpec] = None

    def to_dict(self) -> dict:
        options = self.options.to_dict() if hasattr(self.options, "to_dict") else self.options
        return {
            "dialog_id": self.dialog_id,
            "step_index": self.step_index,
            "options": options,
            "pending_prompt": self.pending_prompt.prompt_id if self.pending_prompt else None,
        }


class DialogStack:

    def __init__(
        self,
        dialogs: DialogSet,
        frames: Optional[List[DialogFrame]] = None,
        interceptor: Optional[CancelInterceptor] = None,
    ):
        self.dialogs = dialogs
        # Shared with the caller's ConversationState so mutations persist
        self.frames: List[DialogFrame] = frames if frames is not None else []
        self.interceptor = interceptor

    @property
    def top(self) -> Optional[DialogFrame]:
        return self.frames[-1] if self.frames else None

    @property
    def is_empty(self) -> bool:
        return not self.frames

    def __len__(self) -> int:
        return len(self.frames)

    # ─── Stack mutations ───

    def push(self, dialog_id: str, options: Any = None) -> DialogFrame:
        self.dialogs.find(dialog_id)
        frame = DialogFrame(dialog_id=dialog_id, options=options)
        self.frames.append(frame)
        logger.debug(f"Stack push | dialog={dialog_id} | depth={len(self.frames)}")
        return frame

    def replace_top(self, dialog_id: str, options: Any = None) -> DialogFrame:
        self.dialogs.find(dialog_id)
        if self.frames:
            old = self.frames.pop()
            logger.debug(f"Stack replace | {old.dialog_id} → {dialog_id}")
        frame = DialogFrame(dialog_id=dialog_id, options=options)
        self.frames.append(frame)
        return frame

    def cancel_all(self) -> None:
        logger.debug(f"Stack cancel | dropped={len(self.frames)}")
        self.frames.clear()

    # ─── Turn entry points ───

    def begin(self, turn_context: TurnContext, dialog_id: str, options: Any = None) -> TurnResult:
        frame = self.push(dialog_id, options)
        dialog = self.dialogs.find(dialog_id)
        outcome = dialog.run(turn_context, frame, StepInvocation.initial(options))
        return self._drive(turn_context, outcome)

    def continue_dialog(self, turn_context: TurnContext) -> TurnResult:
        frame = self.top
        if frame is None:
            return TurnResult.empty()

        dialog = self.dialogs.find(frame.dialog_id)
        if self.interceptor is not None and dialog.interruptible:
            if self.interceptor.intercept(turn_context) is not None:
                self.cancel_all()
                return TurnResult.complete(None)

        if frame.pending_prompt is not None:
            invocation = StepInvocation.prompt_answer(turn_context.text)
        else:
            invocation = StepInvocation.initial(turn_context.text)
        outcome = dialog.run(turn_context, frame, invocation)
        return self._drive(turn_context, outcome)

    def pop_and_resume(self, turn_context: TurnContext, result: Any = None) -> TurnResult:
        """
        Pop the top frame, then hand `result` to the new top frame's current
        step. The parent's step index is left alone; the parent step decides.
        """
        if not self.frames:
            return TurnResult.complete(result)
        return self._drive(turn_context, Complete(result))

    # ─── Cascade ───

    def _drive(self, turn_context: TurnContext, outcome: Any) -> TurnResult:
        while True:
            if isinstance(outcome, Prompt):
                frame = self.top
                step_id = self.dialogs.find(frame.dialog_id).step_id(frame.step_index)
                return TurnResult.waiting(step_id, outcome.spec.message)

            if isinstance(outcome, Next):
                frame = self.top
                dialog = self.dialogs.find(frame.dialog_id)
                frame.step_index += 1
                if frame.step_index >= dialog.step_count:
                    outcome = Complete(outcome.value)
                    continue
                outcome = dialog.run(turn_context, frame, StepInvocation.initial(outcome.value))

            elif isinstance(outcome, Complete):
                finished = self.frames.pop()
                logger.debug(f"Stack pop | dialog={finished.dialog_id} | depth={len(self.frames)}")
                parent = self.top
                if parent is None:
                    return TurnResult.complete(outcome.payload)
                dialog = self.dialogs.find(parent.dialog_id)
                outcome = dialog.run(turn_context, parent, StepInvocation.child_result(outcome.payload))

            elif isinstance(outcome, BeginChild):
                child = self.push(outcome.dialog_id, outcome.options)
                dialog = self.dialogs.find(child.dialog_id)
                outcome = dialog.run(turn_context, child, StepInvocation.initial(outcome.options))

            elif isinstance(outcome, ReplaceWith):
                frame = self.replace_top(outcome.dialog_id, outcome.options)
                dialog = self.dialogs.find(frame.dialog_id)
                outcome = dialog.run(turn_context, frame, StepInvocation.initial(outcome.options))

            else:
                raise TypeError(f"Unsupported step outcome: {outcome!r}")
