"""
Conversation Flow: turn driver for the food order bot.

One inbound message per call:
  1. Load a working copy of the conversation's dialog stack
  2. Continue the top frame (or start OrderSession when the stack is empty)
  3. Restart OrderSession right away if the turn ended the whole stack
  4. Save the state and hand back the outbound activities

Turns for the same conversation are serialized; different conversations
run independently.
"""

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from chat_logger import get_logger, sanitize_log_string
from classifier import FoodOrderRecognizer, LuisApplication
from core.session import (
    ConversationState,
    load_conversation,
    save_conversation,
    sessions,
)
from dialogs import (
    Activity,
    CancelInterceptor,
    DialogStack,
    OrderDialog,
    OrderSession,
    TurnContext,
    TurnResult,
    TurnStatus,
)

logger = get_logger()


@dataclass
class TurnReply:
    conversation_id: str
    result: TurnResult
    activities: List[Activity] = field(default_factory=list)
    stack_depth: int = 0


class ConversationFlow:

    def __init__(
        self,
        main_dialog: OrderSession,
        store: Optional[Dict[str, ConversationState]] = None,
        interceptor: Optional[CancelInterceptor] = None,
    ):
        self.main_dialog = main_dialog
        self.store = sessions if store is None else store
        self.interceptor = interceptor or CancelInterceptor()
        # One lock per conversation id, kept for the flow's lifetime like the store;
        # eviction is left to the host.
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, conversation_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(conversation_id, threading.Lock())

    def run_turn(self, state: ConversationState, turn_context: TurnContext) -> TurnResult:
        """Advance `state` by one inbound message. Mutates `state.frames` in place."""
        stack = DialogStack(self.main_dialog.dialogs, state.frames, self.interceptor)

        result = stack.continue_dialog(turn_context)
        if result.status is TurnStatus.EMPTY:
            result = stack.begin(turn_context, self.main_dialog.id, {})
        elif result.status is TurnStatus.COMPLETE and stack.is_empty:
            logger.info(f"Stack ended | conversation={state.conversation_id} | restarting session")
            result = stack.begin(turn_context, self.main_dialog.id, {})
        return result

    def handle_message(self, conversation_id: str, text) -> TurnReply:
        """
        Process one message for a conversation.

        Errors propagate to the host; the stored state is only replaced
        when the turn completes.
        """
        with self._lock_for(conversation_id):
            state = load_conversation(conversation_id, self.store)
            turn_context = TurnContext(conversation_id=conversation_id, text=text)
            if isinstance(text, str):
                state.remember("user", text)

            result = self.run_turn(state, turn_context)

            for activity in turn_context.responses:
                state.remember("bot", activity.text)
            save_conversation(state, self.store)

        logger.info(
            f"Turn done | conversation={conversation_id} | status={result.status.value} "
            f"| step={result.step_id} | depth={len(state.frames)} "
            f"| replies={len(turn_context.responses)} | message=\"{sanitize_log_string(str(text))[:100]}\""
        )
        return TurnReply(
            conversation_id=conversation_id,
            result=result,
            activities=list(turn_context.responses),
            stack_depth=len(state.frames),
        )


def build_flow(
    config: Optional[LuisApplication] = None,
    store: Optional[Dict[str, ConversationState]] = None,
) -> ConversationFlow:
    """Wire recognizer → dialogs → flow from settings (or the given config)."""
    recognizer = FoodOrderRecognizer(config or LuisApplication.from_settings())
    logger.info(f"LUIS configured: {recognizer.is_configured}")
    main_dialog = OrderSession(recognizer, OrderDialog())
    return ConversationFlow(main_dialog, store=store)
