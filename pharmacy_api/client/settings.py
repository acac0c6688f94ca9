from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """
    Settings for API consumers (scripts, the POS controller).

    Reads PHARMACY_API_BASE_URL and PHARMACY_API_TIMEOUT from the environment or .env.
    """

    PHARMACY_API_BASE_URL: str = Field(
        default="http://localhost:8000/api/v1",
        description="Base URL of the REST API, including the /api/v1 prefix",
    )
    PHARMACY_API_TIMEOUT: float = Field(
        default=15.0, gt=0, description="Per-request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


# PUBLIC_INTERFACE
def get_client_settings() -> ClientSettings:
    """Return a new ClientSettings instance populated from environment variables."""
    return ClientSettings()
