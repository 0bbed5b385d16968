"""
Order-collection dialog.

Fills whatever food/beverage slots the caller left empty, asks for
confirmation and completes with the OrderDetails (or None when the user
says no). Cancel and help are intercepted while this dialog is on top.
"""

from chat_logger import get_logger
from dialogs.dialog import WaterfallDialog
from dialogs.prompts import PromptKind
from dialogs.steps import WaterfallStepContext
from models import OrderDetails
from services.bot_message import BEVERAGE_PROMPT, FOOD_PROMPT, order_confirmation_prompt

logger = get_logger()

ORDER_DIALOG = "orderDialog"
TEXT_PROMPT = "textPrompt"
CONFIRM_PROMPT = "confirmPrompt"


class OrderDialog(WaterfallDialog):

    interruptible = True

    def __init__(self, dialog_id: str = ORDER_DIALOG):
        super().__init__(
            dialog_id or ORDER_DIALOG,
            steps=[self.food_step, self.beverage_step, self.confirm_step, self.final_step],
            prompts={TEXT_PROMPT: PromptKind.TEXT, CONFIRM_PROMPT: PromptKind.CONFIRM},
        )

    def food_step(self, step: WaterfallStepContext):
        """If food has not been provided, prompt for it."""
        order_details: OrderDetails = step.options
        if not order_details.food:
            return step.prompt(TEXT_PROMPT, FOOD_PROMPT)
        return step.next(order_details.food)

    def beverage_step(self, step: WaterfallStepContext):
        """If a beverage has not been provided, prompt for one."""
        order_details: OrderDetails = step.options
        order_details.food = step.result
        if not order_details.beverage:
            return step.prompt(TEXT_PROMPT, BEVERAGE_PROMPT)
        return step.next(order_details.beverage)

    def confirm_step(self, step: WaterfallStepContext):
        order_details: OrderDetails = step.options
        order_details.beverage = step.result
        return step.prompt(CONFIRM_PROMPT, order_confirmation_prompt(order_details))

    def final_step(self, step: WaterfallStepContext):
        if step.result is True:
            return step.end_dialog(step.options)
        logger.info(f"Order not confirmed | conversation={step.turn_context.conversation_id}")
        return step.end_dialog(None)
