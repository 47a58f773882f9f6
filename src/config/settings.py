"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Route Verifier"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_route_testing(self) -> "Settings":
        for field_name in (
            "route_timeout_ms",
            "max_concurrent",
            "connect_timeout",
            "contrast_timeout_ms",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        if self.retry_attempts < 0:
            raise ValueError(f"retry_attempts must not be negative, got {self.retry_attempts}")
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # CORS
    allowed_origins: list[str] = ["*"]

    # Route testing
    route_timeout_ms: int = 10000
    max_concurrent: int = 10
    # Read but not consulted: probes are attempted exactly once.
    retry_attempts: int = 3
    connect_timeout: float = 30.0
    follow_redirects: bool = True

    # Contrast Security (route source)
    contrast_api_url: str = ""
    contrast_api_key: str = ""
    contrast_username: str = ""
    contrast_service_key: str = ""
    contrast_organization_id: str = ""
    contrast_timeout_ms: int = 30000

    # OpenShift (base URL resolver)
    openshift_api_url: str = ""
    openshift_token: str = ""
    openshift_namespace: str = ""
    openshift_verify_ssl: bool = False

    @property
    def route_timeout(self) -> float:
        """Per-probe timeout in seconds."""
        return self.route_timeout_ms / 1000

    @property
    def contrast_timeout(self) -> float:
        return self.contrast_timeout_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
