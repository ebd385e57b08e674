"""
Client library for the user management service.

This library provides:
- Create, update and read operations over HTTP/JSON
- Bounded retry of failed send attempts
- Typed errors for unexpected statuses and undecodable bodies
- Structured logging and environment based configuration
"""

from .domain.errors import DecodeError, SerializationError, UnexpectedStatusError, UserClientError
from .domain.user import User
from .http.client import (
    AsyncUserClient,
    UserClient,
    create_async_user_client,
    create_user_client,
    new_client,
)
from .ports.user_client_port import AsyncUserClientPort, UserClientPort

__version__ = "1.0.0"
__author__ = "BPT Team"

__all__ = [
    "User",
    "UserClientPort",
    "AsyncUserClientPort",
    "UserClient",
    "AsyncUserClient",
    "new_client",
    "create_user_client",
    "create_async_user_client",
    "UserClientError",
    "SerializationError",
    "UnexpectedStatusError",
    "DecodeError",
]
