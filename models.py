"""
Data models for the food order bot: intents, classifier results and order slots.
"""

from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict


class Intent(Enum):
    ORDER_FOOD   = "OrderFood"
    SHOW_ORDERS  = "ShowOrders"
    HELP         = "Help"

    # Anything the bot has no branch for; the raw label travels on ClassifiedResult
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Intent":
        """Map a classifier label onto the closed intent set."""
        for intent in cls:
            if intent is not cls.UNRECOGNIZED and intent.value == label:
                return intent
        return cls.UNRECOGNIZED


@dataclass
class EntityInstance:
    text: str
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    score: Optional[float] = None


@dataclass
class ClassifiedResult:
    text: str
    intent: Intent
    raw_intent: str
    confidence: float = 0.0
    intents: Dict[str, float] = field(default_factory=dict)
    # entity type name ("Food", "Beverage") → recognized instances, in order
    entities: Dict[str, List[EntityInstance]] = field(default_factory=dict)


@dataclass
class OrderDetails:
    food: Optional[str] = None
    beverage: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
