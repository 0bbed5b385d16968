"""
Food Order Recognizer: LUIS intent classifier adapter.

Calls the LUIS v3 prediction endpoint and maps the response onto the
closed Intent set at this boundary, so dialogs never switch on raw labels.

If any of applicationId / endpoint / endpointKey is missing the recognizer
reports itself unconfigured and the dialogs take the no-classifier path.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

from chat_logger import get_logger, sanitize_log_string, sanitize_url
from config.settings import (
    LUIS_APP_ID,
    LUIS_API_KEY,
    LUIS_API_HOST_NAME,
    LUIS_SLOT,
    REQUEST_TIMEOUT,
)
from dialogs.turn import TurnContext
from models import ClassifiedResult, EntityInstance, Intent

logger = get_logger()

NONE_INTENT = "None"


@dataclass
class LuisApplication:
    application_id: str = ""
    endpoint: str = ""
    endpoint_key: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.application_id and self.endpoint and self.endpoint_key)

    @classmethod
    def from_settings(cls) -> "LuisApplication":
        endpoint = LUIS_API_HOST_NAME
        if endpoint and not endpoint.startswith("http"):
            endpoint = f"https://{endpoint}"
        return cls(application_id=LUIS_APP_ID, endpoint=endpoint, endpoint_key=LUIS_API_KEY)


def top_intent(intents: Dict[str, float], default: str = NONE_INTENT) -> str:
    """Highest scoring intent label, or `default` when there are none."""
    if not intents:
        return default
    return max(intents.items(), key=lambda item: item[1])[0]


def parse_prediction(text: str, payload: dict) -> ClassifiedResult:
    """Convert a LUIS v3 prediction response into a ClassifiedResult."""
    prediction = payload.get("prediction") or {}

    intents = {
        name: float((data or {}).get("score", 0.0))
        for name, data in (prediction.get("intents") or {}).items()
    }
    label = prediction.get("topIntent") or top_intent(intents)

    entities: Dict[str, List[EntityInstance]] = {}
    instance_map = (prediction.get("entities") or {}).get("$instance") or {}
    for entity_name, instances in instance_map.items():
        entities[entity_name] = [
            EntityInstance(
                text=item.get("text", ""),
                start_index=item.get("startIndex"),
                end_index=(
                    item["startIndex"] + item["length"]
                    if "startIndex" in item and "length" in item else None
                ),
                score=item.get("score"),
            )
            for item in instances or []
        ]

    return ClassifiedResult(
        text=text,
        intent=Intent.from_label(label),
        raw_intent=label,
        confidence=intents.get(label, 0.0),
        intents=intents,
        entities=entities,
    )


class FoodOrderRecognizer:

    def __init__(self, config: Optional[LuisApplication] = None, timeout: int = REQUEST_TIMEOUT):
        self.config = config
        self.timeout = timeout
        self.session: Optional[requests.Session] = None
        if config is not None and config.is_complete:
            self.session = requests.Session()
            self.session.headers.update({"Accept": "application/json"})

    @property
    def is_configured(self) -> bool:
        return self.session is not None

    @property
    def prediction_url(self) -> str:
        endpoint = self.config.endpoint.rstrip("/")
        return (
            f"{endpoint}/luis/prediction/v3.0/apps/{self.config.application_id}"
            f"/slots/{LUIS_SLOT}/predict"
        )

    def recognize(self, turn_context: TurnContext, text: Optional[str] = None) -> ClassifiedResult:
        """
        Classify `text`, or the turn's text when none is given.

        Raises:
            RuntimeError: if the recognizer is not configured
            requests.exceptions.RequestException: on any HTTP failure
        """
        if not self.is_configured:
            raise RuntimeError("FoodOrderRecognizer is not configured")

        if text is None:
            text = turn_context.text
        text = str(text or "")
        params = {
            "subscription-key": self.config.endpoint_key,
            "query": text,
            "verbose": "true",
            "show-all-intents": "true",
        }
        try:
            response = self.session.get(self.prediction_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            url = getattr(getattr(e, "request", None), "url", None) or self.prediction_url
            logger.error(f"LUIS call failed | url={sanitize_url(url)} | error={sanitize_log_string(str(e))}")
            raise

        result = parse_prediction(text, response.json())
        logger.info(
            f"LUIS | conversation={turn_context.conversation_id} | intent={result.raw_intent} "
            f"| confidence={result.confidence:.2f} | entities={sorted(result.entities)}"
        )
        return result
