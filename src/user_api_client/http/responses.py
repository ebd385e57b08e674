import json

import httpx
from pydantic import ValidationError

from ..domain.errors import DecodeError, SerializationError, UnexpectedStatusError
from ..domain.user import User
from ..schema.user_schemas import UserPayload


def encode_user(user: User) -> bytes:
    """Encode a User as a JSON request body"""
    try:
        return json.dumps(user.to_payload()).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to encode user: {e}") from e


def ensure_status(response: httpx.Response, expected: int) -> None:
    """Raise UnexpectedStatusError unless the response carries the expected status"""
    if response.status_code == expected:
        return

    reason = response.reason_phrase or httpx.codes.get_reason_phrase(response.status_code)
    raise UnexpectedStatusError(response.status_code, reason, expected)


def decode_user(response: httpx.Response) -> User:
    """Decode a response body into a User"""
    try:
        payload = UserPayload.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f"failed to decode user: {e}") from e

    return User.from_payload(payload.model_dump())
