"""
Unit tests for the LUIS recognizer adapter.

HTTP is mocked; no request leaves the test process.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from classifier import FoodOrderRecognizer, LuisApplication, parse_prediction, top_intent
from dialogs import TurnContext
from models import Intent

CONFIG = LuisApplication(
    application_id="app-123",
    endpoint="https://westus.api.cognitive.microsoft.com",
    endpoint_key="secret-key",
)

PREDICTION = {
    "query": "i want a salami pizza and a coke",
    "prediction": {
        "topIntent": "OrderFood",
        "intents": {
            "OrderFood": {"score": 0.97},
            "ShowOrders": {"score": 0.02},
            "None": {"score": 0.01},
        },
        "entities": {
            "Food": ["salami pizza"],
            "Beverage": ["coke"],
            "$instance": {
                "Food": [{"text": "salami pizza", "startIndex": 9, "length": 12, "score": 0.95}],
                "Beverage": [{"text": "coke", "startIndex": 28, "length": 4, "score": 0.91}],
            },
        },
    },
}


class TestConfiguration:

    def test_complete_config_is_configured(self):
        assert FoodOrderRecognizer(CONFIG).is_configured

    @pytest.mark.parametrize("config", [
        None,
        LuisApplication(),
        LuisApplication("app", "https://host", ""),
        LuisApplication("", "https://host", "key"),
        LuisApplication("app", "", "key"),
    ])
    def test_any_missing_value_means_unconfigured(self, config):
        assert FoodOrderRecognizer(config).is_configured is False

    def test_recognize_without_config_raises(self):
        with pytest.raises(RuntimeError):
            FoodOrderRecognizer(None).recognize(TurnContext("c1", "hi"))

    def test_from_settings_adds_scheme_to_host_name(self):
        with patch("classifier.LUIS_APP_ID", "app"), \
             patch("classifier.LUIS_API_KEY", "key"), \
             patch("classifier.LUIS_API_HOST_NAME", "westus.api.cognitive.microsoft.com"):
            config = LuisApplication.from_settings()
        assert config.endpoint == "https://westus.api.cognitive.microsoft.com"
        assert config.is_complete


class TestParsePrediction:

    def test_order_food_prediction(self):
        result = parse_prediction("i want a salami pizza and a coke", PREDICTION)
        assert result.intent == Intent.ORDER_FOOD
        assert result.raw_intent == "OrderFood"
        assert result.confidence == pytest.approx(0.97)
        assert result.entities["Food"][0].text == "salami pizza"
        assert result.entities["Food"][0].end_index == 21
        assert result.entities["Beverage"][0].text == "coke"

    def test_unknown_label_is_unrecognized_but_kept(self):
        payload = {"prediction": {"topIntent": "BookFlight", "intents": {"BookFlight": {"score": 0.8}}}}
        result = parse_prediction("book a flight", payload)
        assert result.intent == Intent.UNRECOGNIZED
        assert result.raw_intent == "BookFlight"
        assert result.entities == {}

    def test_missing_top_intent_uses_highest_score(self):
        payload = {"prediction": {"intents": {"Help": {"score": 0.6}, "None": {"score": 0.3}}}}
        assert parse_prediction("?", payload).intent == Intent.HELP

    def test_empty_payload(self):
        result = parse_prediction("", {})
        assert result.raw_intent == "None"
        assert result.intent == Intent.UNRECOGNIZED
        assert result.entities == {}

    def test_top_intent_default(self):
        assert top_intent({}) == "None"
        assert top_intent({"a": 0.1, "b": 0.9}) == "b"


class TestRecognize:

    def _recognizer_with_response(self, payload=None, error=None):
        recognizer = FoodOrderRecognizer(CONFIG)
        response = MagicMock()
        response.json.return_value = payload
        if error is not None:
            response.raise_for_status.side_effect = error
        recognizer.session = MagicMock()
        recognizer.session.get.return_value = response
        return recognizer

    def test_recognize_calls_prediction_endpoint(self):
        recognizer = self._recognizer_with_response(PREDICTION)
        result = recognizer.recognize(TurnContext("c1", "i want a salami pizza and a coke"))

        assert result.intent == Intent.ORDER_FOOD
        args, kwargs = recognizer.session.get.call_args
        assert args[0] == (
            "https://westus.api.cognitive.microsoft.com/luis/prediction/v3.0/apps/app-123"
            "/slots/production/predict"
        )
        assert kwargs["params"]["query"] == "i want a salami pizza and a coke"
        assert kwargs["params"]["subscription-key"] == "secret-key"
        assert kwargs["timeout"] == recognizer.timeout

    def test_explicit_text_is_sent_as_query(self):
        recognizer = self._recognizer_with_response(PREDICTION)
        recognizer.recognize(TurnContext("c1", "  raw turn text "), "i want a salami pizza and a coke")
        _, kwargs = recognizer.session.get.call_args
        assert kwargs["params"]["query"] == "i want a salami pizza and a coke"

    def test_http_error_propagates(self):
        recognizer = self._recognizer_with_response(error=requests.exceptions.HTTPError("401"))
        with pytest.raises(requests.exceptions.HTTPError):
            recognizer.recognize(TurnContext("c1", "hi"))

    def test_connection_error_propagates(self):
        recognizer = FoodOrderRecognizer(CONFIG)
        recognizer.session = MagicMock()
        recognizer.session.get.side_effect = requests.exceptions.ConnectionError("down")
        with pytest.raises(requests.exceptions.ConnectionError):
            recognizer.recognize(TurnContext("c1", "hi"))
