"""Wire schemas for the user management service."""

from .user_schemas import UserPayload

__all__ = ["UserPayload"]
