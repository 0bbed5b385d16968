"""Core package - exports conversation state storage and response helpers."""

from .session import (
    sessions,
    ConversationState,
    get_session,
    load_conversation,
    save_conversation,
)
from .helpers import (
    activities_to_dicts,
    turn_result_to_dict,
    conversation_to_dict,
)

__all__ = [
    "sessions",
    "ConversationState",
    "get_session",
    "load_conversation",
    "save_conversation",
    "activities_to_dicts",
    "turn_result_to_dict",
    "conversation_to_dict",
]
