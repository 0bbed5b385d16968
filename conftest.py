"""
Pytest configuration and fixtures for the food order bot tests.

Provides a fake recognizer that returns canned classifier results by text,
so dialog tests never touch the network.
"""

import pytest
from typing import Dict, List, Optional

from models import ClassifiedResult, EntityInstance, Intent
from dialogs import (
    CancelInterceptor,
    DialogStack,
    OrderDialog,
    OrderSession,
    TurnContext,
)
from conversation_flow import ConversationFlow
from services import order_service


def make_result(
    label: str,
    text: str = "",
    food: Optional[str] = None,
    beverage: Optional[str] = None,
    score: float = 0.9,
) -> ClassifiedResult:
    """Build a ClassifiedResult the way the LUIS adapter would."""
    entities: Dict[str, List[EntityInstance]] = {}
    if food:
        entities["Food"] = [EntityInstance(text=food)]
    if beverage:
        entities["Beverage"] = [EntityInstance(text=beverage)]
    return ClassifiedResult(
        text=text,
        intent=Intent.from_label(label),
        raw_intent=label,
        confidence=score,
        intents={label: score},
        entities=entities,
    )


class FakeRecognizer:
    """
    Stand-in for FoodOrderRecognizer.
    Looks the turn text up in `results`; unknown text classifies as "None".
    """

    def __init__(self, results: Optional[Dict[str, ClassifiedResult]] = None, configured: bool = True):
        self.results = results or {}
        self.configured = configured
        self.calls: List[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def recognize(self, turn_context: TurnContext, text: Optional[str] = None) -> ClassifiedResult:
        text = str(turn_context.text if text is None else text)
        self.calls.append(text)
        return self.results.get(text) or make_result("None", text=text)


@pytest.fixture(autouse=True)
def clear_saved_orders():
    order_service.saved_orders.clear()
    yield
    order_service.saved_orders.clear()


@pytest.fixture
def recognizer():
    return FakeRecognizer({
        "i want a salami pizza and a coke": make_result(
            "OrderFood", "i want a salami pizza and a coke", food="salami pizza", beverage="coke"
        ),
        "i want a pizza": make_result("OrderFood", "i want a pizza", food="pizza"),
        "i want to order": make_result("OrderFood", "i want to order"),
        "show my orders": make_result("ShowOrders", "show my orders"),
        "what can you do": make_result("Help", "what can you do"),
        "book a flight": make_result("BookFlight", "book a flight"),
    })


@pytest.fixture
def unconfigured_recognizer():
    return FakeRecognizer(configured=False)


@pytest.fixture
def order_session(recognizer):
    return OrderSession(recognizer, OrderDialog())


@pytest.fixture
def stack(order_session):
    return DialogStack(order_session.dialogs, interceptor=CancelInterceptor())


@pytest.fixture
def flow(order_session):
    return ConversationFlow(order_session, store={})


@pytest.fixture
def unconfigured_flow(unconfigured_recognizer):
    return ConversationFlow(OrderSession(unconfigured_recognizer, OrderDialog()), store={})


def texts(turn_context_or_reply) -> List[str]:
    """Outbound message texts from a TurnContext or TurnReply."""
    activities = getattr(turn_context_or_reply, "responses", None)
    if activities is None:
        activities = turn_context_or_reply.activities
    return [a.text for a in activities]
