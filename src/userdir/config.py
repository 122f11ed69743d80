"""
Configuration management for the user directory service
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="USERDIR_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("USERDIR_API_PORT", "PORT", "api_port"),
    )
    api_reload: bool = False

    # CORS (the Elm dev server runs on :8000)
    cors_origins: list[str] = ["http://localhost:8000"]
    cors_allow_methods: list[str] = ["GET", "POST", "PUT"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Static token check; disabled when unset
    auth_token: str | None = None
    auth_rejection_status: int = 500

    # GraphQL
    graphiql: bool = True
    include_error_stack: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    @property
    def auth_enabled(self) -> bool:
        return bool(self.auth_token)


# Global settings instance
settings = Settings()
