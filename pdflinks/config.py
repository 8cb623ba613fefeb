"""Settings for link writing and extraction, loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LinkSettings(BaseSettings):
    """Global link handling settings."""

    border_width: int = Field(
        default=0, ge=0, description="Border width (/BS /W) of written link annotations."
    )
    resolve_named_destinations: bool = True
    skip_unresolved_named: bool = True

    model_config = SettingsConfigDict(
        env_prefix="PDFLINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = LinkSettings()
