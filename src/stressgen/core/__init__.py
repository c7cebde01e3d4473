"""Core module with shared exceptions."""

from stressgen.core.exceptions import (
    ConfigurationError,
    DiscoveryError,
    InstantiationError,
    PropertyNotFoundError,
    StressGenError,
)

__all__ = [
    "ConfigurationError",
    "DiscoveryError",
    "InstantiationError",
    "PropertyNotFoundError",
    "StressGenError",
]
