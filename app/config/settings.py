"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PRODUCTION_ENVIRONMENT_NAMES = frozenset({"prod", "production"})
_ALLOWED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime metadata and debug surfaces.

    Environment variable names map directly to field names in uppercase.
    Example: `app_version` reads from `APP_VERSION`.

    Attributes:
        application_name: Service name reported by status payloads.
        app_version: Deployed application version label.
        environment_name: Runtime environment label (for example `dev` or `prod`).
        application_description: Human-readable description for info payloads.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        debug_endpoints_enabled: Explicit debug route toggle, derived from environment when unset.
        debug_slow_default_delay_ms: Default delay for the slow debug endpoint.
        debug_slow_max_delay_ms: Maximum accepted delay for the slow debug endpoint.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    application_name: str = Field(default="infoline-api")
    app_version: str = Field(default="1.0.0")
    environment_name: str = Field(default="dev")
    application_description: str = Field(default="API REST pour InfoLine - Actualités sportives & tech")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    debug_endpoints_enabled: bool | None = Field(default=None)
    debug_slow_default_delay_ms: int = Field(default=2000, ge=0)
    debug_slow_max_delay_ms: int = Field(default=30000, ge=0)

    @field_validator("application_name", "app_version", "environment_name")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _ALLOWED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
        return normalized_value

    @field_validator("debug_slow_max_delay_ms")
    @classmethod
    def _validate_slow_delay_bounds(cls, value: int, info) -> int:
        default_delay_ms = info.data.get("debug_slow_default_delay_ms", 2000)
        if value < default_delay_ms:
            raise ValueError("debug_slow_max_delay_ms must be greater than or equal to debug_slow_default_delay_ms")
        return value

    def config_debug_endpoints_active(self) -> bool:
        """Resolve whether debug routes should be mounted.

        Returns:
            bool: Explicit toggle when set, otherwise `True` outside production environments.
        """

        if self.debug_endpoints_enabled is not None:
            return self.debug_endpoints_enabled
        return self.environment_name.lower() not in _PRODUCTION_ENVIRONMENT_NAMES


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
