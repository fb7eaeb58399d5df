from enum import Enum

from planty_api.schemas.dialogflow import WebhookRequest
from planty_api.services.fields import get_field, get_string

INTENT_NO_INPUT = "actions.intent.NO_INPUT"


class RequestKind(str, Enum):
    EQUIVALENT_INCOME_ESTIMATE = "equivalent_income_estimate"
    HELP = "help"
    STOP = "stop"
    HEALTH_CHECK = "health_check"  # also the fallback for unknown intents


# Dialogflow display names, lower-cased. Nothing maps to HELP or STOP yet.
INTENT_KINDS = {
    "default welcome intent": RequestKind.EQUIVALENT_INCOME_ESTIMATE,
    "equivalentincomeestimateintent": RequestKind.EQUIVALENT_INCOME_ESTIMATE,
}


def classify_intent(display_name: str) -> RequestKind:
    """Map a Dialogflow intent display name to a RequestKind (case-insensitive)."""
    return INTENT_KINDS.get((display_name or "").lower(), RequestKind.HEALTH_CHECK)


def is_reprompt_request(request: WebhookRequest) -> bool:
    """True when the platform sent NO_INPUT, i.e. it is re-prompting a silent user."""
    inputs = get_field(request.originalDetectIntentRequest.payload, "inputs").unwrap_or(None)
    if not isinstance(inputs, list):
        return False

    for item in inputs:
        intent = get_string(item, "intent")
        if intent.ok:
            return intent.value.lower() == INTENT_NO_INPUT.lower()
    return False
