"""Abstract capability set offered by user clients."""

from .user_client_port import AsyncUserClientPort, UserClientPort

__all__ = ["UserClientPort", "AsyncUserClientPort"]
