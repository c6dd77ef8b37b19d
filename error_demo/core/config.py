"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix of the demonstration endpoints.
        mount_root_aliases: Also serve the demonstration endpoints at "/".
        expose_error_messages: Include the raised error's message in
            error response bodies. When False, ``message`` is null.
        host: Bind address used by ``python -m error_demo``.
        port: Bind port used by ``python -m error_demo``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ERROR_DEMO_",
        extra="ignore",
    )

    project_name: str = "Error Handling Demo"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/app"
    mount_root_aliases: bool = True
    expose_error_messages: bool = True
    host: str = "127.0.0.1"
    port: int = 8080


settings = Settings()
