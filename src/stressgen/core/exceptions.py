"""Custom exceptions for stressgen."""


class StressGenError(Exception):
    """Base exception for all stressgen errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(StressGenError):
    """Raised when there's a configuration problem."""

    pass


class DiscoveryError(StressGenError):
    """Raised when a target class cannot be introspected."""

    pass


class PropertyNotFoundError(StressGenError):
    """Raised when a registration names a property the class does not have."""

    pass


class InstantiationError(StressGenError):
    """Raised when a target instance cannot be created."""

    pass
