import httpx
from fastapi import FastAPI

from planty_api.config import settings
from planty_api.logging_config import get_logger, setup_logging
from planty_api.routers import fulfillment
from planty_api.services.dispatcher import RequestDispatcher
from planty_api.services.pricing_client import PricingClient

setup_logging(settings.log_level)

logger = get_logger("main")

app = FastAPI(
    title="Planty Compare Fulfillment",
    description="Dialogflow fulfillment webhook for the Planty Compare voice app",
    version="0.1.0",
)

app.include_router(fulfillment.router)


@app.on_event("startup")
async def start_http_client() -> None:
    http_client = httpx.AsyncClient(timeout=settings.pricing_timeout_seconds)
    app.state.http_client = http_client
    app.state.dispatcher = RequestDispatcher(PricingClient(http_client, settings.pricing_service_url))
    logger.info(
        "Pricing client started",
        extra={"context": {"pricing_service_url": settings.pricing_service_url}},
    )


@app.on_event("shutdown")
async def stop_http_client() -> None:
    http_client = getattr(app.state, "http_client", None)
    if http_client is None:
        return
    await http_client.aclose()
    app.state.http_client = None


@app.get("/health")
async def health():
    return {"status": "ok"}
