"""Process configuration for the prediction server."""

from .settings import ServerSettings, load_settings

__all__ = ["ServerSettings", "load_settings"]
