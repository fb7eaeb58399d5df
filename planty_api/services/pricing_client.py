from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

import httpx

from planty_api.logging_config import get_logger

logger = get_logger("pricing_client")

EQUIVALENT_INCOME_PATH = "/api/equivalent-income"
ROUNDING_UNIT = Decimal(100)


class DownstreamUnavailable(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class PricingQuery:
    target_city: str
    base_city: str
    base_income_amount: int
    base_currency: str
    target_currency: str

    def to_params(self) -> dict:
        return {
            "targetCity": self.target_city,
            "targetCurrency": self.target_currency,
            "baseCity": self.base_city,
            "baseIncomeAmount": self.base_income_amount,
            "baseCurrency": self.base_currency,
        }


def round_to_hundreds(amount: Decimal) -> Decimal:
    return (amount / ROUNDING_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_EVEN) * ROUNDING_UNIT


class PricingClient:
    """Client for the equivalent-income service.

    The httpx client is created once by the application and shared; this
    class never opens or closes it.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def get_equivalent_income(self, query: PricingQuery) -> Decimal:
        url = f"{self.base_url}{EQUIVALENT_INCOME_PATH}"
        try:
            response = await self.http_client.get(url, params=query.to_params())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                "Equivalent income request failed",
                extra={"context": {"url": url, "error": str(e)}},
            )
            raise DownstreamUnavailable(f"Equivalent income request failed: {e}") from e

        body = response.text.strip()
        try:
            amount = Decimal(body)
        except InvalidOperation as e:
            logger.error(
                "Equivalent income response is not a number",
                extra={"context": {"url": url, "body": body[:100]}},
            )
            raise DownstreamUnavailable(f"Unexpected equivalent income response: {body[:100]!r}") from e

        if not amount.is_finite():
            raise DownstreamUnavailable(f"Unexpected equivalent income response: {body[:100]!r}")

        return round_to_hundreds(amount)
