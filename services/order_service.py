"""
Order Service (stub backend)
============================
Commits confirmed orders and serves the order history shown for ShowOrders.

Orders live in process memory; a real fulfilment backend would replace
save_order() and get_order_history().
"""

from datetime import datetime, timezone
from typing import Dict, List

from chat_logger import get_logger
from models import OrderDetails

logger = get_logger()

ORDER_HISTORY = [
    "Pizza Salami & Coke Zero - 03/09/2019",
    "Pizza Margherita & Apple juice - 09/10/2019",
]

saved_orders: List[Dict] = []


def save_order(conversation_id: str, order_details: OrderDetails) -> Dict:
    """Record a confirmed order and return the stored record."""
    record = {
        "conversation_id": conversation_id,
        "food": order_details.food,
        "beverage": order_details.beverage,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    saved_orders.append(record)
    logger.info(
        f"Order saved | conversation={conversation_id} | food={order_details.food} "
        f"| beverage={order_details.beverage}"
    )
    return record


def get_order_history() -> List[str]:
    return list(ORDER_HISTORY)
