from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    Values are resolved once at startup; nothing re-reads them per request.
    """

    # Stamped into the apiVersion field of every error response
    rest_api_version: str = "1.0.0"

    log_level: str = "INFO"
    log_json: bool = True  # False switches to the human-readable console renderer

    # Used by the `movie-catalog` entry point only
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
