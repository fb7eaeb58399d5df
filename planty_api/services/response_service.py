from typing import Optional

from planty_api.schemas.dialogflow import (
    FulfillmentMessage,
    GooglePayload,
    ResponsePayload,
    SimpleResponse,
    SimpleResponses,
    WebhookResponse,
)
from planty_api.services.identity_service import encode_user_storage


def to_ssml(message: str) -> str:
    # Callers escape anything user-supplied before it gets here.
    return f"<speak>{message}</speak>"


def build_response(user_id: Optional[str], message: str, reprompt: Optional[str] = None) -> WebhookResponse:
    """Build the Dialogflow response for Actions on Google.

    ``expectUserResponse`` is set only when a non-blank reprompt is given, and
    the user id is stored in ``userStorage`` so the next turn can recover it.
    """
    expect_user_response = bool(reprompt and reprompt.strip())

    return WebhookResponse(
        fulfillmentMessages=[
            FulfillmentMessage(
                simpleResponses=SimpleResponses(simpleResponses=[SimpleResponse(ssml=to_ssml(message))]),
            )
        ],
        payload=ResponsePayload(
            google=GooglePayload(
                expectUserResponse=expect_user_response,
                userStorage=encode_user_storage(user_id),
            )
        ),
    )
