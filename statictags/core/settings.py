import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssetSettings(BaseSettings):
    # ------------------------------------------------------------------
    # Filesystem
    # ------------------------------------------------------------------
    # Directory holding public/; assets live under <app_root>/public
    app_root: str = Field(default_factory=os.getcwd)

    # ------------------------------------------------------------------
    # Deployment / hosting
    # ------------------------------------------------------------------
    # e.g. "https://cdn.example.com" (no trailing slash); empty serves locally
    asset_host: str = Field(
        default="",
        validation_alias=AliasChoices("STATIC_ASSETS_ASSET_HOST", "asset_host"),
    )

    # ------------------------------------------------------------------
    # Markup
    # ------------------------------------------------------------------
    xhtml: bool = False  # close void tags with "/>"

    # ------------------------------------------------------------------
    # Model configuration
    # ------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="STATIC_ASSETS_",
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",  # ignore any unrecognized vars instead of erroring
    )

    @property
    def public_dir(self) -> str:
        return f"{self.app_root}/public"


# global settings instance; builders still take their settings explicitly
settings = AssetSettings()
