"""
chat_logger.py - Centralized logging configuration for the food order bot

Sets up Python logging with:
- File handler: logs/YYYY-MM-DD/chat.txt (daily folders)
- Console handler: stdout
- Configurable log level via LOG_LEVEL env variable
- Sanitization of user text and classifier keys
"""

import os
import re
import logging
from datetime import datetime
from pathlib import Path

DEFAULT_LOGGER_NAME = "food_order_bot"


def sanitize_log_string(text: str) -> str:
    """
    Sanitize string for logging to prevent log injection attacks.
    Removes newlines, carriage returns, and other control characters.

    Args:
        text: String to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not text:
        return text
    text = text.replace('\n', ' ').replace('\r', ' ').replace('\t', ' ')
    return ''.join(char if ord(char) >= 32 else ' ' for char in text)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds to the configured date format."""

    def formatTime(self, record, datefmt=None):
        if not datefmt:
            return super().formatTime(record, datefmt)
        s = datetime.fromtimestamp(record.created).strftime(datefmt)
        ms = int((record.created - int(record.created)) * 1000)
        return f"{s}.{ms:03d}"


def setup_logger(name: str = DEFAULT_LOGGER_NAME, log_level: str = "INFO") -> logging.Logger:
    """
    Configure and return a logger with file and console handlers.

    Args:
        name: Logger name
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    # Prevent duplicate handlers if setup is called multiple times
    if logger.handlers:
        return logger

    formatter = MillisecondFormatter(
        fmt="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # ─── File Handler (one folder per day) ───
    today = datetime.now().strftime("%Y-%m-%d")
    log_dir = Path(os.getenv("LOG_DIR", "logs")) / today
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_dir / "chat.txt", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # ─── Console Handler ───
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def sanitize_url(url: str) -> str:
    """
    Remove sensitive query parameters from URLs.
    Masks the LUIS subscription key.
    """
    if not url:
        return url
    return re.sub(r'subscription-key=[^&]*', 'subscription-key=***', url)


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get the configured logger instance.
    If logger doesn't exist, create it with default settings.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        setup_logger(name, os.getenv("LOG_LEVEL", "INFO"))
    return logger
