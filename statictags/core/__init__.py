"""Core asset utilities: settings, path resolution and cache busting."""

from .cache_bust import AssetUrlBuilder, default_url_for_path
from .paths import resolve_path
from .settings import AssetSettings, settings

__all__ = [
    "AssetSettings",
    "AssetUrlBuilder",
    "default_url_for_path",
    "resolve_path",
    "settings",
]
