from planty_api.schemas.dialogflow import UserStorage, WebhookRequest, WebhookResponse
from planty_api.schemas.health_check import HealthCheckRequest

__all__ = ["WebhookRequest", "WebhookResponse", "UserStorage", "HealthCheckRequest"]
