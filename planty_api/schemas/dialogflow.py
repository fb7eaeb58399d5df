from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

ACTIONS_ON_GOOGLE = "ACTIONS_ON_GOOGLE"


class _Inbound(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Intent(_Inbound):
    displayName: str
    name: Optional[str] = None


class QueryResult(_Inbound):
    intent: Intent
    parameters: dict[str, Any] = Field(default_factory=dict)
    queryText: Optional[str] = None
    languageCode: Optional[str] = None


class OriginalDetectIntentRequest(_Inbound):
    source: Optional[str] = None
    version: Optional[str] = None
    payload: Optional[dict[str, Any]] = None


class WebhookRequest(_Inbound):
    """Dialogflow v2 fulfillment request."""

    responseId: Optional[str] = None
    session: Optional[str] = None
    queryResult: QueryResult
    originalDetectIntentRequest: OriginalDetectIntentRequest = Field(
        default_factory=OriginalDetectIntentRequest
    )


class UserStorage(BaseModel):
    """Identity blob echoed back by Actions on Google on the next turn."""

    userId: Optional[str] = None


class SimpleResponse(BaseModel):
    ssml: str


class SimpleResponses(BaseModel):
    simpleResponses: list[SimpleResponse]


class FulfillmentMessage(BaseModel):
    platform: str = ACTIONS_ON_GOOGLE
    simpleResponses: SimpleResponses


class GooglePayload(BaseModel):
    expectUserResponse: bool
    userStorage: str


class ResponsePayload(BaseModel):
    google: GooglePayload


class WebhookResponse(BaseModel):
    fulfillmentMessages: list[FulfillmentMessage]
    payload: ResponsePayload
