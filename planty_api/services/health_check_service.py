from typing import Union

from pydantic import ValidationError

from planty_api.logging_config import get_logger
from planty_api.schemas.health_check import HealthCheckRequest

logger = get_logger("health_check_service")

INTENT_MAIN = "actions.intent.MAIN"
HEALTH_CHECK_ARGUMENT = "is_health_check"


def is_health_check(raw_body: Union[bytes, str]) -> bool:
    """Detect the Actions on Google health probe. Never raises."""
    try:
        probe = HealthCheckRequest.model_validate_json(raw_body)
    except ValidationError as e:
        logger.info(
            "Web hook request is not a health check. Cannot deserialize request as a health check.",
            extra={"context": {"errors": e.error_count()}},
        )
        return False

    for item in probe.inputs or []:
        if item.intent != INTENT_MAIN:
            continue
        for argument in item.arguments or []:
            if argument.name == HEALTH_CHECK_ARGUMENT and argument.boolValue:
                return True
    return False
