"""Typed runtime settings with dotenv support and startup validation."""

from typing import Final

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL_CHOICES: Final[tuple[str, ...]] = ("critical", "error", "warning", "info", "debug")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ResponderSettings(BaseSettings):
    """Runtime settings for the status responder listener.

    Environment variable names are the uppercase field names with the
    `STATUS_RESPONDER_` prefix. Example: `application_port` reads from
    `STATUS_RESPONDER_APPLICATION_PORT`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for listener binding.
        application_port: Listener TCP port; `0` asks the OS for an ephemeral port.
        log_level: Logging level name shared by the application and uvicorn.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATUS_RESPONDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=0, le=65535)
    log_level: str = Field(default="info")

    @field_validator("environment_name", "application_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in LOG_LEVEL_CHOICES:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVEL_CHOICES)}")
        return normalized_value


def config_load_settings(**overrides: object) -> ResponderSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        **overrides: Explicit field values taking precedence over the environment.
            `None` values are ignored so unset CLI options fall through.

    Returns:
        ResponderSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    explicit_values = {name: value for name, value in overrides.items() if value is not None}
    try:
        return ResponderSettings(**explicit_values)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
