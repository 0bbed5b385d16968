"""Services package - exports the order backend stub and bot message helpers."""

from .order_service import (
    save_order,
    get_order_history,
    saved_orders,
)
from .bot_message import (
    order_confirmation_prompt,
    order_added_message,
    didnt_understand_message,
)

__all__ = [
    "save_order",
    "get_order_history",
    "saved_orders",
    "order_confirmation_prompt",
    "order_added_message",
    "didnt_understand_message",
]
