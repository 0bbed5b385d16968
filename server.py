"""
Food Order Bot: Chat API Backend
Runs on port 3978 with /chat endpoint.

Usage:
    python server.py

Endpoint:
    POST http://localhost:3978/chat
    Body: {"message": "...", "session_id": "..."}
"""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from chat_logger import get_logger
from config.settings import PORT, DEBUG
from conversation_flow import ConversationFlow, build_flow
from routes.chat import chat_bp

logger = get_logger()


def create_app(flow: Optional[ConversationFlow] = None) -> Flask:
    app = Flask(__name__)
    CORS(app)
    app.config["CONVERSATION_FLOW"] = flow or build_flow()
    app.register_blueprint(chat_bp)
    return app


if __name__ == "__main__":
    app = create_app()
    logger.info(f"Starting food order bot on port {PORT}")
    app.run(host="0.0.0.0", port=PORT, debug=DEBUG)
