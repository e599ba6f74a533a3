"""Settings for the HTTP integration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class HALSettings(BaseSettings):
    """
    Rendering and error handling options.
    Reads from HAL_* environment variables and/or .env file.
    """

    model_config = SettingsConfigDict(env_prefix="HAL_", env_file=".env", extra="ignore")

    # Media types
    media_type: str = "application/hal+json"
    error_media_type: str = "application/vnd.error+json"

    # JSON text
    indent: int | None = None
    ensure_ascii: bool = False

    # Errors
    include_error_detail: bool = False

    # Pagination
    default_page_limit: int = 10
    max_page_limit: int = 100


settings = HALSettings()
