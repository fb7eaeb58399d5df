import json

import httpx


def webhook_body(intent="EquivalentIncomeEstimateIntent", parameters=None, user=None, inputs=None) -> str:
    """Dialogflow v2 fulfillment request as the Actions on Google integration sends it."""
    payload = {}
    if user is not None:
        payload["user"] = user
    if inputs is not None:
        payload["inputs"] = inputs
    return json.dumps(
        {
            "responseId": "resp-1",
            "queryResult": {
                "queryText": "how much would I need in Zurich",
                "intent": {"displayName": intent},
                "parameters": parameters if parameters is not None else {},
            },
            "originalDetectIntentRequest": {"source": "google", "payload": payload},
        }
    )


HEALTH_PROBE = '{"inputs":[{"intent":"actions.intent.MAIN","arguments":[{"name":"is_health_check","boolValue":true}]}]}'

ESTIMATE_PARAMETERS = {
    "targetCity": "Zurich",
    "baseCity": "Austin",
    "baseIncome": {"amount": 80000, "currency": "USD"},
}


class PricingStub:
    """Records requests to the equivalent-income service and answers with a fixed body."""

    def __init__(self, body="93000", status_code=200):
        self.body = body
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)
