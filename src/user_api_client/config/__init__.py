"""Configuration management utilities."""

from .settings import ClientSettings, get_settings

__all__ = ["ClientSettings", "get_settings"]
