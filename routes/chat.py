"""
Chat endpoints as a Flask Blueprint.
"""

import time

from flask import Blueprint, current_app, jsonify, request

from chat_logger import get_logger, sanitize_log_string
from core.helpers import activities_to_dicts, conversation_to_dict, turn_result_to_dict
from core.session import get_session
from services.bot_message import TURN_ERROR_MESSAGE

logger = get_logger()

chat_bp = Blueprint("chat", __name__)


def _error_response(message: str, session_id: str, error: str, status_code: int):
    return jsonify({
        "success": False,
        "bot_messages": [{"text": message, "speak": message, "input_hint": "acceptingInput"}],
        "status": "error",
        "step": None,
        "session_id": session_id,
        "metadata": {"error": error},
    }), status_code


@chat_bp.route("/chat", methods=["POST"])
def chat():
    """
    Main chat endpoint.

    Request:
        POST /chat
        {"message": "i want a salami pizza and a coke", "session_id": "session_xxx"}

    Response:
        {
            "success": true,
            "bot_messages": [{"text": "...", "speak": "...", "input_hint": "expectingInput"}],
            "status": "waiting",
            "step": "orderDialog.beverage_step",
            "session_id": "...",
            "metadata": {...}
        }
    """
    start_time = time.time()
    flow = current_app.config["CONVERSATION_FLOW"]

    body = request.get_json(silent=True)
    if not isinstance(body, dict) or not body:
        logger.warning("POST /chat | Invalid JSON body")
        return _error_response(
            "Invalid request. Send JSON with 'message' and 'session_id' fields.",
            "", "Invalid JSON body", 400,
        )

    message = str(body.get("message", "")).strip()
    session_id = str(body.get("session_id", "")).strip()
    logger.info(f'POST /chat | session={session_id} | message="{sanitize_log_string(message[:100])}"')

    if not session_id:
        return _error_response("Please include a session_id.", "", "Missing session_id", 400)
    if not message:
        logger.warning(f"POST /chat | session={session_id} | Empty message")
        return _error_response(
            "Please type a message! Try \"I want a pizza and a coke\".",
            session_id, "Empty message", 400,
        )

    try:
        reply = flow.handle_message(session_id, message)
    except Exception as e:
        # Generic turn-error handler: state from the last good turn is kept
        logger.exception(f"POST /chat | session={session_id} | turn failed: {sanitize_log_string(str(e))}")
        return _error_response(TURN_ERROR_MESSAGE, session_id, type(e).__name__, 500)

    turn = turn_result_to_dict(reply.result)
    return jsonify({
        "success": True,
        "bot_messages": activities_to_dicts(reply.activities),
        "status": turn["status"],
        "step": turn["step"],
        "session_id": session_id,
        "metadata": {
            "processing_time_ms": int((time.time() - start_time) * 1000),
            "stack_depth": reply.stack_depth,
            "payload": turn["payload"],
        },
    })


@chat_bp.route("/health", methods=["GET"])
def health():
    flow = current_app.config["CONVERSATION_FLOW"]
    return jsonify({
        "status": "ok",
        "luis_configured": flow.main_dialog.recognizer.is_configured,
    })


@chat_bp.route("/session/<session_id>", methods=["GET"])
def session(session_id: str):
    flow = current_app.config["CONVERSATION_FLOW"]
    state = get_session(session_id, flow.store)
    if state is None:
        return jsonify({"success": False, "error": "Session not found"}), 404
    return jsonify({"success": True, "session": conversation_to_dict(state)})
