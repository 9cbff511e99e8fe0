"""Configuration."""

from .settings import TinSettings, get_settings

__all__ = ["TinSettings", "get_settings"]
