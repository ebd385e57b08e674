"""HTTP clients with bounded send retry."""

from .client import (
    AsyncUserClient,
    UserClient,
    create_async_user_client,
    create_user_client,
    new_client,
)
from .retry import MAX_SEND_ATTEMPTS, RETRY_DELAY_SECONDS, async_send_with_retry, send_with_retry

__all__ = [
    "UserClient",
    "AsyncUserClient",
    "new_client",
    "create_user_client",
    "create_async_user_client",
    "send_with_retry",
    "async_send_with_retry",
    "MAX_SEND_ATTEMPTS",
    "RETRY_DELAY_SECONDS",
]
