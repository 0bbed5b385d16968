"""
Session Management

In-memory conversation state store keyed by conversation id.

Turns work on a deep copy of the stored state and write it back only when
they finish, so a failed turn leaves the last good state in place.
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from dialogs.stack import DialogFrame

# In-memory session store
sessions: Dict[str, "ConversationState"] = {}


@dataclass
class ConversationState:
    conversation_id: str
    frames: List[DialogFrame] = field(default_factory=list)
    history: List[Dict] = field(default_factory=list)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def remember(self, role: str, message: str) -> None:
        self.history.append({
            "role": role,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })


def get_session(session_id: str, store: Optional[Dict] = None) -> Optional[ConversationState]:
    """Get the stored state by ID. Returns None if not found."""
    store = sessions if store is None else store
    return store.get(session_id)


def load_conversation(session_id: str, store: Optional[Dict] = None) -> ConversationState:
    """Return a working copy of the conversation, creating it on first turn."""
    stored = get_session(session_id, store)
    if stored is None:
        return ConversationState(conversation_id=session_id)
    return copy.deepcopy(stored)


def save_conversation(state: ConversationState, store: Optional[Dict] = None) -> None:
    """Create or update a conversation."""
    store = sessions if store is None else store
    store[state.conversation_id] = copy.deepcopy(state)
