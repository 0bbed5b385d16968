"""
Bot configuration: loads classifier credentials and app settings from .env.
"""

import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# ─────────────────────────────────────────────
# LUIS (intent classifier)
# ─────────────────────────────────────────────
LUIS_APP_ID = os.getenv("LuisAppId", "")
LUIS_API_KEY = os.getenv("LuisAPIKey", "")
LUIS_API_HOST_NAME = os.getenv("LuisAPIHostName", "")
LUIS_SLOT = os.getenv("LUIS_SLOT", "production")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 10))  # seconds

# ─────────────────────────────────────────────
# App Settings
# ─────────────────────────────────────────────
PORT = int(os.getenv("PORT", 3978))
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
