"""
Cache busting for static assets.
Appends the asset file's modification time to its URL so browsers and proxies
fetch a fresh copy whenever the file changes. The timestamp is read on every
call; nothing is cached here, so a touched file is picked up immediately.
"""
import logging
import os
from typing import Callable, Optional
from urllib.parse import urlsplit

from .settings import AssetSettings

logger = logging.getLogger("cache_bust")

UrlForPath = Callable[[str], str]


def default_url_for_path(path: str) -> str:
    """Used when no framework router is available: only ensures a leading slash."""
    if path.startswith("/") or urlsplit(path).scheme:
        return path
    return f"/{path}"


class AssetUrlBuilder:
    """Builds public asset URLs with a modification-time query suffix."""

    def __init__(self, settings: AssetSettings, url_for_path: Optional[UrlForPath] = None) -> None:
        self.settings = settings
        self.url_for_path = url_for_path or default_url_for_path

    def asset_file(self, url: str) -> str:
        return f"{self.settings.public_dir}{url}"

    def asset_timestamp(self, url: str) -> Optional[int]:
        """
        Get the cache-busting token for a request-relative asset URL.

        Args:
            url: URL as produced by url_for_path (e.g. "/images/logo.png")

        Returns:
            Modification time in whole epoch seconds, or None if no regular
            file exists under the public directory
        """
        full_path = self.asset_file(url)
        if not os.path.isfile(full_path):
            logger.debug("No asset file at %s; serving %s without timestamp", full_path, url)
            return None

        try:
            return int(os.path.getmtime(full_path))
        except FileNotFoundError:
            # Removed between the existence check and the stat
            logger.debug("Asset %s disappeared before its mtime could be read", full_path)
            return None

    def source_url_timestamp(self, url: str) -> str:
        timestamp = self.asset_timestamp(url)
        if timestamp is None:
            return url
        return f"{url}?{timestamp}"

    def build_asset_url(self, canonical_path: str) -> str:
        """
        Generate the public URL for an asset with automatic cache busting.

        Args:
            canonical_path: Path from resolve_path (e.g. "stylesheets/app.css")

        Returns:
            asset host + routed URL + "?<mtime>" when the file exists

        Example:
            build_asset_url("stylesheets/app.css") -> "/stylesheets/app.css?1700000000"
        """
        url = self.url_for_path(canonical_path)
        return f"{self.settings.asset_host}{self.source_url_timestamp(url)}"
