from urllib.parse import quote

import httpx

from ..config.settings import ClientSettings, get_settings
from ..domain.user import User
from ..logging.setup import configure_logging, get_correlation_id, get_logger, get_trace_id
from ..ports.user_client_port import AsyncUserClientPort, UserClientPort
from .responses import decode_user, encode_user, ensure_status
from .retry import async_send_with_retry, send_with_retry

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _context_headers() -> dict[str, str]:
    """Correlation and trace headers taken from the logging context"""
    headers = {}

    correlation_id = get_correlation_id()
    if correlation_id:
        headers["X-Correlation-ID"] = correlation_id

    trace_id = get_trace_id()
    if trace_id:
        headers["X-Trace-ID"] = trace_id

    return headers


def _json_headers() -> dict[str, str]:
    headers = _context_headers()
    headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


class _UserRoutes:
    """URL building shared by the sync and async clients"""

    base_url: str

    def _users_url(self) -> str:
        return f"{self.base_url}/users"

    def _user_url(self, user_id: str) -> str:
        return f"{self.base_url}/users/{quote(user_id, safe='')}"


class UserClient(_UserRoutes, UserClientPort):
    """HTTP client for the user management service"""

    def __init__(self, base_url: str, http_client: httpx.Client | None = None):
        self.base_url = base_url
        self.http_client = http_client or httpx.Client()

    def create_user(self, user: User) -> User:
        """Create a user; the service answers 201 with the stored user"""
        body = encode_user(user)
        request = self.http_client.build_request("POST", self._users_url(), content=body, headers=_json_headers())

        response = send_with_retry(lambda: self.http_client.send(request))
        ensure_status(response, httpx.codes.CREATED)
        created = decode_user(response)

        logger.info("User created", user_id=created.id)
        return created

    def update_user(self, user_id: str, user: User) -> User:
        """Replace a user; the service answers 200 with the stored user"""
        body = encode_user(user)
        request = self.http_client.build_request(
            "PUT", self._user_url(user_id), content=body, headers=_json_headers()
        )

        response = send_with_retry(lambda: self.http_client.send(request))
        ensure_status(response, httpx.codes.OK)
        updated = decode_user(response)

        logger.info("User updated", user_id=user_id)
        return updated

    def get_user(self, user_id: str) -> User:
        """Get a user by ID"""
        request = self.http_client.build_request("GET", self._user_url(user_id), headers=_context_headers())

        response = send_with_retry(lambda: self.http_client.send(request))
        ensure_status(response, httpx.codes.OK)
        user = decode_user(response)

        logger.debug("User retrieved", user_id=user_id)
        return user

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "UserClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncUserClient(_UserRoutes, AsyncUserClientPort):
    """Async HTTP client for the user management service"""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient | None = None):
        self.base_url = base_url
        self.http_client = http_client or httpx.AsyncClient()

    async def create_user(self, user: User) -> User:
        """Create a user; the service answers 201 with the stored user"""
        body = encode_user(user)
        request = self.http_client.build_request("POST", self._users_url(), content=body, headers=_json_headers())

        response = await async_send_with_retry(lambda: self.http_client.send(request))
        ensure_status(response, httpx.codes.CREATED)
        created = decode_user(response)

        logger.info("User created", user_id=created.id)
        return created

    async def update_user(self, user_id: str, user: User) -> User:
        """Replace a user; the service answers 200 with the stored user"""
        body = encode_user(user)
        request = self.http_client.build_request(
            "PUT", self._user_url(user_id), content=body, headers=_json_headers()
        )

        response = await async_send_with_retry(lambda: self.http_client.send(request))
        ensure_status(response, httpx.codes.OK)
        updated = decode_user(response)

        logger.info("User updated", user_id=user_id)
        return updated

    async def get_user(self, user_id: str) -> User:
        """Get a user by ID"""
        request = self.http_client.build_request("GET", self._user_url(user_id), headers=_context_headers())

        response = await async_send_with_retry(lambda: self.http_client.send(request))
        ensure_status(response, httpx.codes.OK)
        user = decode_user(response)

        logger.debug("User retrieved", user_id=user_id)
        return user

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncUserClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def new_client(base_url: str) -> UserClientPort:
    """Create a user client bound to base_url"""
    return UserClient(base_url)


def _apply_logging_settings(settings: ClientSettings) -> None:
    """Attach the library log handler when a log format is configured"""
    if settings.log_format is not None:
        configure_logging(settings.service_name, settings.log_level, settings.log_format)


def create_user_client(settings: ClientSettings | None = None) -> UserClient:
    """Factory function to create a user client from settings"""
    settings = settings or get_settings()
    _apply_logging_settings(settings)
    return UserClient(settings.base_url)


def create_async_user_client(settings: ClientSettings | None = None) -> AsyncUserClient:
    """Factory function to create an async user client from settings"""
    settings = settings or get_settings()
    _apply_logging_settings(settings)
    return AsyncUserClient(settings.base_url)
