from planty_api.services.dispatcher import (
    HELP_MESSAGE,
    HELP_REPROMPT,
    STOP_MESSAGE,
    MalformedRequest,
    MissingParameterError,
    RequestDispatcher,
)
from planty_api.services.identity_service import IdentityDecodeError, resolve_user_id
from planty_api.services.intent_service import RequestKind, classify_intent
from planty_api.services.pricing_client import DownstreamUnavailable, PricingClient, PricingQuery
from planty_api.services.response_service import build_response
