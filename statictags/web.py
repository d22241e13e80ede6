# statictags/web.py
"""Starlette / FastAPI wiring for the asset helpers."""
from typing import Optional

from starlette.requests import Request

from statictags.core.cache_bust import UrlForPath, default_url_for_path
from statictags.core.settings import AssetSettings, settings as default_settings
from statictags.helpers import StaticAssetHelpers


def url_for_path_from_request(request: Request) -> UrlForPath:
    """
    Map application paths to request URLs, honouring the mount point.

    An app mounted at "/shop" (root_path="/shop") turns "images/logo.png" into
    "/shop/images/logo.png". Absolute URLs with a scheme are left alone.
    """
    root_path = (request.scope.get("root_path") or "").rstrip("/")

    def url_for_path(path: str) -> str:
        url = default_url_for_path(path)
        if not url.startswith("/"):
            return url
        return f"{root_path}{url}"

    return url_for_path


def helpers_for_request(request: Request, settings: Optional[AssetSettings] = None) -> StaticAssetHelpers:
    return StaticAssetHelpers.from_settings(settings or default_settings, url_for_path_from_request(request))
