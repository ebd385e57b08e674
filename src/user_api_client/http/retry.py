import asyncio
import time
from collections.abc import Awaitable, Callable

import httpx

from ..logging.setup import get_logger

logger = get_logger(__name__)

MAX_SEND_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 0.1


def send_with_retry(
    send: Callable[[], httpx.Response],
    *,
    attempts: int = MAX_SEND_ATTEMPTS,
    delay: float = RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> httpx.Response:
    """
    Dispatch a request, retrying transport failures only

    Args:
        send: Callable performing one send attempt
        attempts: Total number of attempts
        delay: Fixed pause in seconds between attempts
        sleep: Pause function

    Returns:
        The first response received, whatever its status
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got: {attempts}")

    last_exception = None

    for attempt in range(1, attempts + 1):
        try:
            logger.debug("Sending request", attempt=attempt, max_attempts=attempts)
            return send()
        except httpx.TransportError as e:
            last_exception = e
            if attempt < attempts:
                sleep(delay)

    # Re-raise the last exception
    raise last_exception


async def async_send_with_retry(
    send: Callable[[], Awaitable[httpx.Response]],
    *,
    attempts: int = MAX_SEND_ATTEMPTS,
    delay: float = RETRY_DELAY_SECONDS,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> httpx.Response:
    """Coroutine twin of send_with_retry"""
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got: {attempts}")

    last_exception = None

    for attempt in range(1, attempts + 1):
        try:
            logger.debug("Sending request", attempt=attempt, max_attempts=attempts)
            return await send()
        except httpx.TransportError as e:
            last_exception = e
            if attempt < attempts:
                await sleep(delay)

    # Re-raise the last exception
    raise last_exception
