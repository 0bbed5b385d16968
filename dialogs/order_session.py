"""
OrderSession: the top-level dialog.

    Intro → Act → Final → (replace) Intro

Intro asks what the user wants, Act classifies the answer and either hands
off to the order-collection dialog or answers directly, Final commits a
confirmed order and restarts the session with a different prompt. The
session never ends on its own.
"""

import json

from chat_logger import get_logger
from dialogs.dialog import DialogSet, WaterfallDialog
from dialogs.errors import MissingRequiredConfig
from dialogs.order_dialog import OrderDialog, TEXT_PROMPT
from dialogs.prompts import PromptKind
from dialogs.steps import WaterfallStepContext
from dialogs.turn import InputHint
from models import Intent, OrderDetails
from services.bot_message import (
    HELP_INTENT_MESSAGE,
    LUIS_NOT_CONFIGURED_MESSAGE,
    ORDER_HISTORY_HEADER,
    RESTART_PROMPT,
    WELCOME_PROMPT,
    didnt_understand_message,
    order_added_message,
)
from services.order_service import get_order_history, save_order
from slot_extractor import extract_beverage, extract_food

logger = get_logger()

ORDER_SESSION = "orderSession"


class OrderSession(WaterfallDialog):

    def __init__(self, recognizer, order_dialog: OrderDialog, dialog_id: str = ORDER_SESSION):
        if recognizer is None:
            raise MissingRequiredConfig("[OrderSession]: Missing parameter 'recognizer' is required")
        if order_dialog is None:
            raise MissingRequiredConfig("[OrderSession]: Missing parameter 'order_dialog' is required")

        super().__init__(
            dialog_id,
            steps=[self.intro_step, self.act_step, self.final_step],
            prompts={TEXT_PROMPT: PromptKind.TEXT},
        )
        self.recognizer = recognizer
        self.order_dialog = order_dialog
        self.dialogs = DialogSet([self, order_dialog])

    def intro_step(self, step: WaterfallStepContext):
        """Ask what the user wants, e.g. "i want to order a salami pizza and a coke"."""
        if not self.recognizer.is_configured:
            step.turn_context.send_activity(
                LUIS_NOT_CONFIGURED_MESSAGE, None, InputHint.IGNORING_INPUT
            )
            return step.next()

        options = step.options or {}
        return step.prompt(TEXT_PROMPT, options.get("restart_msg") or WELCOME_PROMPT)

    def act_step(self, step: WaterfallStepContext):
        """
        Classify the answer to the intro prompt and pick up any order slots,
        then hand off to the order dialog to collect the rest.
        """
        if step.is_child_result:
            return step.next(step.result)

        order_details = OrderDetails()
        if not self.recognizer.is_configured:
            logger.info("LUIS not configured, running the order dialog directly")
            return step.begin_dialog(self.order_dialog.id, order_details)

        result = self.recognizer.recognize(step.turn_context, step.result)
        context = step.turn_context

        if result.intent is Intent.ORDER_FOOD:
            order_details.food = extract_food(result)
            order_details.beverage = extract_beverage(result)
            logger.info(f"LUIS extracted these order details: {json.dumps(order_details.to_dict())}")
            return step.begin_dialog(self.order_dialog.id, order_details)

        if result.intent is Intent.SHOW_ORDERS:
            context.send_activity(ORDER_HISTORY_HEADER)
            for line in get_order_history():
                context.send_activity(line)
        elif result.intent is Intent.HELP:
            logger.info("Help intent triggered")
            context.send_activity(HELP_INTENT_MESSAGE)
        else:
            message = didnt_understand_message(result.raw_intent)
            context.send_activity(message, message, InputHint.IGNORING_INPUT)
        return step.next(None)

    def final_step(self, step: WaterfallStepContext):
        # None here means the order dialog was declined or nothing was ordered
        if step.result is not None:
            order_details: OrderDetails = step.result
            save_order(step.turn_context.conversation_id, order_details)
            step.turn_context.send_activity(order_added_message(order_details))

        return step.replace_dialog(self.id, {"restart_msg": RESTART_PROMPT})
