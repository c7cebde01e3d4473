"""Generator settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from stressgen.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Settings loaded from ``STRESSGEN_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STRESSGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = "console"  # "console" or "json"

    # Randomness
    seed: int | None = None

    # Value ranges
    string_min_length: int = 1
    string_max_length: int = 12
    int_min: int = -1000
    int_max: int = 1000

    # Nested objects deeper than this are left as None
    max_depth: int = 3

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.string_min_length > self.string_max_length:
            raise ConfigurationError(
                "string_min_length must not exceed string_max_length",
                details={
                    "string_min_length": self.string_min_length,
                    "string_max_length": self.string_max_length,
                },
            )
        if self.int_min > self.int_max:
            raise ConfigurationError(
                "int_min must not exceed int_max",
                details={"int_min": self.int_min, "int_max": self.int_max},
            )

    @property
    def is_json_logging(self) -> bool:
        return self.log_format.lower() == "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
