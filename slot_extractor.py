"""
Slot extraction: projects classifier entities onto the food/beverage order slots.

Missing entities are a normal branch, never an error.
"""

from typing import Optional
from models import ClassifiedResult, OrderDetails

FOOD_ENTITY = "Food"
BEVERAGE_ENTITY = "Beverage"


def _first_entity_text(result: Optional[ClassifiedResult], entity_name: str) -> Optional[str]:
    if result is None or not result.entities:
        return None
    instances = result.entities.get(entity_name) or []
    if not instances:
        return None
    return instances[0].text or None


def extract_food(result: Optional[ClassifiedResult]) -> Optional[str]:
    """Return the first recognized Food entity's surface text, or None."""
    return _first_entity_text(result, FOOD_ENTITY)


def extract_beverage(result: Optional[ClassifiedResult]) -> Optional[str]:
    """Return the first recognized Beverage entity's surface text, or None."""
    return _first_entity_text(result, BEVERAGE_ENTITY)


def extract_order_details(result: Optional[ClassifiedResult]) -> OrderDetails:
    return OrderDetails(food=extract_food(result), beverage=extract_beverage(result))
