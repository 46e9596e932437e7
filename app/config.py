"""Configuration for the species translator service.

Settings are read once from the environment (or a .env file) and passed
explicitly to the application factory and the clients.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Service
    port: int
    log_level: str = "INFO"

    # Upstream APIs
    pokemon_api_base_url: str = "https://pokeapi.co"
    # SHAKESPEARE_API_BASE_URL is still honoured for older deployments
    translation_api_base_url: str = Field(
        default="https://api.funtranslations.com",
        validation_alias=AliasChoices("translation_api_base_url", "shakespeare_api_base_url"),
    )
    request_timeout: float = 5.0

    # Optional FunTranslations credential
    api_token: str | None = None
