"""
Cancel / help interception.

Checked before each continued step of an interruptible dialog. A match sends
a canned reply and tells the stack to drop every open frame at once, so no
half-finished child dialog is left in the persisted stack.
"""

from enum import Enum
from typing import Iterable, Optional

from chat_logger import get_logger
from dialogs.turn import InputHint, TurnContext
from services.bot_message import CANCEL_MESSAGE, HELP_MESSAGE

logger = get_logger()

CANCEL_TRIGGERS = ("cancel", "quit")
HELP_TRIGGERS = ("help", "?")


class Interruption(Enum):
    CANCEL = "cancel"
    HELP = "help"


class CancelInterceptor:

    def __init__(
        self,
        cancel_triggers: Iterable[str] = CANCEL_TRIGGERS,
        help_triggers: Iterable[str] = HELP_TRIGGERS,
    ):
        self.cancel_triggers = {t.lower() for t in cancel_triggers}
        self.help_triggers = {t.lower() for t in help_triggers}

    def intercept(self, turn_context: TurnContext) -> Optional[Interruption]:
        """Return the interruption that fired, or None to let the step run."""
        if not isinstance(turn_context.text, str):
            return None
        text = turn_context.text.strip().lower()

        if text in self.cancel_triggers:
            turn_context.send_activity(CANCEL_MESSAGE, CANCEL_MESSAGE, InputHint.IGNORING_INPUT)
            logger.info(f"Interrupted | conversation={turn_context.conversation_id} | kind=cancel")
            return Interruption.CANCEL
        if text in self.help_triggers:
            turn_context.send_activity(HELP_MESSAGE, HELP_MESSAGE, InputHint.IGNORING_INPUT)
            logger.info(f"Interrupted | conversation={turn_context.conversation_id} | kind=help")
            return Interruption.HELP
        return None
