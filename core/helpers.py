"""
Core Helpers

Conversion of turn output and conversation state into JSON-ready dicts.
"""

from typing import List

from dialogs.turn import Activity, TurnResult
from core.session import ConversationState


def activities_to_dicts(activities: List[Activity]) -> List[dict]:
    return [activity.to_dict() for activity in activities]


def turn_result_to_dict(result: TurnResult) -> dict:
    """Flatten a TurnResult for the response body."""
    payload = result.payload
    if hasattr(payload, "to_dict"):
        payload = payload.to_dict()
    return {
        "status": result.status.value,
        "step": result.step_id,
        "prompt": result.prompt,
        "payload": payload,
    }


def conversation_to_dict(state: ConversationState) -> dict:
    return {
        "conversation_id": state.conversation_id,
        "created_at": state.created_at,
        "stack": [frame.to_dict() for frame in state.frames],
        "history": list(state.history),
    }
