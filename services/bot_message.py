"""
User-facing bot messages.
"""

from models import OrderDetails

WELCOME_PROMPT = "What can I help you with today?"
RESTART_PROMPT = "What else can I do for you?"

LUIS_NOT_CONFIGURED_MESSAGE = (
    "NOTE: LUIS is not configured. To enable all capabilities, add "
    "`LuisAppId`, `LuisAPIKey` and `LuisAPIHostName` to the .env file."
)

FOOD_PROMPT = "What kind of food do you want to order?"
BEVERAGE_PROMPT = "What do you want to drink?"

ORDER_HISTORY_HEADER = "Here are your previous orders:"
HELP_INTENT_MESSAGE = "What can I do for you?"

CANCEL_MESSAGE = "Cancelling..."
HELP_MESSAGE = (
    "I can take a food order for you. Tell me what you would like to eat and drink, "
    "e.g. \"a salami pizza and a coke\". Say \"cancel\" to stop the current order."
)

TURN_ERROR_MESSAGE = "The bot encountered an error or bug."


def order_confirmation_prompt(order_details: OrderDetails) -> str:
    return (
        f"Please confirm the following order. Kind of pizza: {order_details.food} "
        f"along with: {order_details.beverage}. Is this correct?"
    )


def order_added_message(order_details: OrderDetails) -> str:
    return f"I have added your order: {order_details.food} including {order_details.beverage} to our system."


def didnt_understand_message(raw_intent: str) -> str:
    return f"Sorry, I didn't get that. Please try asking in a different way (intent was {raw_intent})"
