import uuid
from typing import Optional

from pydantic import ValidationError

from planty_api.logging_config import get_logger
from planty_api.schemas.dialogflow import UserStorage, WebhookRequest
from planty_api.services.fields import get_mapping, get_non_blank_string

logger = get_logger("identity_service")


class IdentityDecodeError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def new_user_id() -> str:
    return uuid.uuid4().hex


def encode_user_storage(user_id: Optional[str]) -> str:
    """Serialize the identity blob the platform echoes back next turn."""
    return UserStorage(userId=user_id).model_dump_json()


def decode_user_storage(text: str) -> Optional[str]:
    try:
        storage = UserStorage.model_validate_json(text)
    except ValidationError as e:
        raise IdentityDecodeError(f"Invalid userStorage: {e}") from e
    return storage.userId


def resolve_user_id(request: WebhookRequest) -> str:
    """Return the caller's user id, minting a new one if the platform sent none.

    Lookup order is ``payload.user.userStorage`` (JSON blob we wrote on a
    previous turn), then ``payload.user.userId``. A corrupt userStorage
    raises IdentityDecodeError rather than falling back.
    """
    user = get_mapping(request.originalDetectIntentRequest.payload, "user")

    storage_text = user.then(lambda u: get_non_blank_string(u, "userStorage"))
    if storage_text.ok:
        user_id = decode_user_storage(storage_text.value)
        # Returned as stored, blank included.
        if user_id is not None:
            return user_id
        logger.warning("userStorage carried no userId, generating a new one")
        return new_user_id()

    raw_user_id = user.then(lambda u: get_non_blank_string(u, "userId"))
    if raw_user_id.ok:
        return raw_user_id.value

    user_id = new_user_id()
    logger.info("No user id in request, generated one", extra={"context": {"user_id": user_id}})
    return user_id
