import json
from unittest.mock import patch

from planty_api.services.health_check_service import is_health_check


def _probe(bool_value=True, intent="actions.intent.MAIN", name="is_health_check") -> str:
    return json.dumps(
        {"inputs": [{"intent": intent, "arguments": [{"name": name, "boolValue": bool_value}]}]}
    )


class TestIsHealthCheck:
    def test_health_probe_detected(self):
        body = '{"inputs":[{"intent":"actions.intent.MAIN","arguments":[{"name":"is_health_check","boolValue":true}]}]}'
        assert is_health_check(body) is True

    def test_bytes_body(self):
        assert is_health_check(_probe().encode("utf-8")) is True

    def test_bool_value_false(self):
        assert is_health_check(_probe(bool_value=False)) is False

    def test_other_intent(self):
        assert is_health_check(_probe(intent="actions.intent.TEXT")) is False

    def test_other_argument(self):
        assert is_health_check(_probe(name="is_sandbox")) is False

    def test_matching_input_not_first(self):
        body = json.dumps(
            {
                "inputs": [
                    {"intent": "actions.intent.TEXT", "arguments": []},
                    {"intent": "actions.intent.MAIN", "arguments": [{"name": "is_health_check", "boolValue": True}]},
                ]
            }
        )
        assert is_health_check(body) is True

    def test_input_without_arguments(self):
        assert is_health_check('{"inputs":[{"intent":"actions.intent.MAIN"}]}') is False

    def test_dialogflow_request_is_not_health_check(self):
        body = '{"queryResult":{"intent":{"displayName":"Default Welcome Intent"}}}'
        assert is_health_check(body) is False

    def test_non_json_body(self):
        assert is_health_check("this is not json") is False

    def test_empty_body(self):
        assert is_health_check(b"") is False

    def test_wrong_shape_does_not_raise(self):
        assert is_health_check('{"inputs": "nope"}') is False
        assert is_health_check("[1, 2, 3]") is False

    @patch("planty_api.services.health_check_service.logger")
    def test_decode_failure_is_logged(self, mock_logger):
        assert is_health_check("{oops") is False
        mock_logger.info.assert_called_once()
