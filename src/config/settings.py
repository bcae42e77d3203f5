"""Application settings using Pydantic BaseSettings."""

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
    app_name: str = "Coach Verification"
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
    def validate_verification_agent(self) -> "Settings":
        if self.verification_timeout <= 0:
            raise ValueError(
                f"verification_timeout must be positive, got {self.verification_timeout}"
            )
        if self.verification_max_tokens <= 0:
            raise ValueError(
                f"verification_max_tokens must be positive, got {self.verification_max_tokens}"
            )
        if not 0.0 <= self.verification_temperature <= 2.0:
            raise ValueError(
                f"verification_temperature must be between 0 and 2, got {self.verification_temperature}"
            )
        return self

    # OpenAI
    openai_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"

    # Verification Agent
    verification_agent_model: str = "gpt-3.5-turbo"
    verification_temperature: float = 0.3
    verification_max_tokens: int = 1000
    verification_timeout: float = 30.0

    @property
    def ai_verification_enabled(self) -> bool:
        """True when a provider credential is configured."""
        return bool(self.openai_api_key and self.openai_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
