"""Domain entities and errors for the user client."""

from .errors import DecodeError, SerializationError, UnexpectedStatusError, UserClientError
from .user import User

__all__ = [
    "User",
    "UserClientError",
    "SerializationError",
    "UnexpectedStatusError",
    "DecodeError",
]
