from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from planty_api.logging_config import get_logger
from planty_api.services.dispatcher import MalformedRequest, RequestDispatcher

logger = get_logger("fulfillment")

router = APIRouter()


def get_dispatcher(request: Request) -> RequestDispatcher:
    return request.app.state.dispatcher


@router.post("/fulfillment")
# Legacy webhook path still configured on the Dialogflow agent
@router.post("/api/PlantyCompareHttpTrigger")
async def handle_fulfillment(request: Request, dispatcher: RequestDispatcher = Depends(get_dispatcher)):
    """Dialogflow fulfillment webhook for the Actions on Google app."""
    raw_body = await request.body()

    try:
        response = await dispatcher.dispatch(raw_body)
    except MalformedRequest as e:
        return PlainTextResponse(e.message, status_code=400)

    return JSONResponse(content=response.model_dump(), status_code=200)
