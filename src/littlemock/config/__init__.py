"""Configuration for littlemock."""

from littlemock.config.settings import Settings

__all__ = ["Settings"]
