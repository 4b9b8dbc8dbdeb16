"""Configuration using pydantic-settings (pydantic v2).

Values come from the environment or an optional `.env` file next to the
process working directory.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Geofence API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API for managing geofences"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    # Swagger UI location; the OpenAPI document stays at /openapi.json
    DOCS_URL: str = "/api-docs"
    GREETING: str = "Hello, World! This is for Geofence."
    LOG_LEVEL: str = "INFO"
    # Optional path for a file log handler in addition to the console
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
