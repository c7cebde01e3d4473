"""Configuration module for stressgen."""

from stressgen.config.logging import configure_logging
from stressgen.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
