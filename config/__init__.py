"""Configuration module."""

from config.settings import Settings, settings, get_settings
from config.logging_config import setup_logging, get_logger

__all__ = ["Settings", "settings", "get_settings", "setup_logging", "get_logger"]
