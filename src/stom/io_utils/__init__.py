"""Input helpers for configuration files."""

from .loader import AppConfig, load_app_config

__all__ = ["AppConfig", "load_app_config"]
