"""
Configuration module - centralized settings for the generation gateway.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Gateway settings.

    Environment variables win over .env values, which win over the defaults
    below. The API key is checked again on every operation (see get_client),
    never only at startup:
        export GEMINI_API_KEY=your-key
        export GEMINI_MODEL=gemini-2.5-flash
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "CreatorTune Gateway"

    # DEBUG: More verbose logging in development
    DEBUG: bool = False

    # CORS_ORIGINS: Origins allowed to call the API from a browser
    CORS_ORIGINS: List[str] = ["*"]

    # ---------------------------------------------------------------------------
    # GEMINI SETTINGS
    # ---------------------------------------------------------------------------
    # GEMINI_API_KEY: Credential for the remote model.
    # - Empty or the literal "undefined" is treated as not configured
    #   (the latter is what an unset build-time substitution leaves behind)
    GEMINI_API_KEY: str = ""

    # GEMINI_MODEL: Model used for every structured generation call
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # ---------------------------------------------------------------------------
    # GATEWAY SETTINGS
    # ---------------------------------------------------------------------------
    # DEFAULT_LANGUAGE: Prompts in this language get no localization suffix
    DEFAULT_LANGUAGE: str = "en"

    # MAX_IMAGE_BYTES: Ceiling for each decoded image attachment (4 MiB, inclusive)
    MAX_IMAGE_BYTES: int = 4 * 1024 * 1024

    # ACCEPTED_IMAGE_MIME_TYPES: Raster formats the upload forms allow
    ACCEPTED_IMAGE_MIME_TYPES: List[str] = ["image/png", "image/jpeg", "image/webp"]


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from creatortune.core.config import settings
settings = Settings()
