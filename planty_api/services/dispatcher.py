from typing import Any, Awaitable, Callable, Mapping, Optional, Union
from xml.sax.saxutils import escape

from pydantic import ValidationError

from planty_api.logging_config import get_logger
from planty_api.schemas.dialogflow import WebhookRequest, WebhookResponse
from planty_api.services.fields import get_number, get_string
from planty_api.services.health_check_service import is_health_check
from planty_api.services.identity_service import resolve_user_id
from planty_api.services.intent_service import RequestKind, classify_intent, is_reprompt_request
from planty_api.services.pricing_client import PricingClient, PricingQuery
from planty_api.services.response_service import build_response
from planty_api.services.result import Result

logger = get_logger("dispatcher")

HELP_MESSAGE = (
    "You can ask, how much would you need to make in a given city to maintain a comparable lifestyle,"
    " or, you can say exit... What can I help you with?"
)
HELP_REPROMPT = "What can I help you with?"
STOP_MESSAGE = "Goodbye!"
ESTIMATE_TEMPLATE = "You'd need to earn {amount} {currency}s, to maintain a comparable lifestyle."

Handler = Callable[[Optional[WebhookRequest], Optional[str]], Awaitable[WebhookResponse]]


class MalformedRequest(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParameterError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def _require(result: Result[Any]) -> Any:
    if not result.ok:
        raise MissingParameterError(result.error)
    return result.value


def extract_pricing_query(parameters: Mapping[str, Any]) -> PricingQuery:
    """Build the pricing query from Dialogflow parameters.

    ``baseIncome`` is a unit-currency entity: ``{"amount": 80000, "currency": "USD"}``.
    """
    base_currency = _require(get_string(parameters, "baseIncome", "currency"))
    return PricingQuery(
        target_city=_require(get_string(parameters, "targetCity")),
        base_city=_require(get_string(parameters, "baseCity")),
        base_income_amount=int(_require(get_number(parameters, "baseIncome", "amount"))),
        base_currency=base_currency,
        # TODO: take targetCurrency from the intent once the agent collects it
        target_currency=base_currency,
    )


class RequestDispatcher:
    """Turns one raw fulfillment body into one WebhookResponse."""

    def __init__(self, pricing_client: PricingClient):
        self.pricing_client = pricing_client
        self._handlers: dict[RequestKind, Handler] = {
            kind: getattr(self, name) for kind, name in HANDLER_NAMES.items()
        }

    async def dispatch(self, raw_body: Union[bytes, str]) -> WebhookResponse:
        if is_health_check(raw_body):
            logger.info("Health check request")
            return await self._handlers[RequestKind.HEALTH_CHECK](None, None)

        try:
            request = WebhookRequest.model_validate_json(raw_body)
        except ValidationError as e:
            logger.error("Web hook request could not be parsed.", exc_info=True)
            raise MalformedRequest("Error deserializing Dialog flow request from message body") from e

        user_id = resolve_user_id(request)
        display_name = request.queryResult.intent.displayName
        kind = classify_intent(display_name)

        logger.info(
            "Fulfillment request",
            extra={
                "context": {
                    "intent": display_name,
                    "kind": kind.value,
                    "user_id": user_id,
                    "reprompt": is_reprompt_request(request),
                }
            },
        )

        return await self._handlers[kind](request, user_id)

    async def handle_estimate(self, request: Optional[WebhookRequest], user_id: Optional[str]) -> WebhookResponse:
        query = extract_pricing_query(request.queryResult.parameters)
        amount = await self.pricing_client.get_equivalent_income(query)
        text = ESTIMATE_TEMPLATE.format(amount=amount, currency=escape(query.target_currency))
        return build_response(user_id, text)

    async def handle_help(self, request: Optional[WebhookRequest], user_id: Optional[str]) -> WebhookResponse:
        return build_response(user_id, HELP_MESSAGE, HELP_REPROMPT)

    async def handle_stop(self, request: Optional[WebhookRequest], user_id: Optional[str]) -> WebhookResponse:
        return build_response(user_id, STOP_MESSAGE)

    async def handle_health_check(
        self, request: Optional[WebhookRequest], user_id: Optional[str]
    ) -> WebhookResponse:
        return build_response(user_id, HELP_REPROMPT)


HANDLER_NAMES = {
    RequestKind.EQUIVALENT_INCOME_ESTIMATE: "handle_estimate",
    RequestKind.HELP: "handle_help",
    RequestKind.STOP: "handle_stop",
    RequestKind.HEALTH_CHECK: "handle_health_check",
}

_unhandled = set(RequestKind) - set(HANDLER_NAMES)
if _unhandled:
    raise RuntimeError(f"No dispatcher handler for: {sorted(k.value for k in _unhandled)}")
