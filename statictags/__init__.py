# statictags/__init__.py
from statictags.core import AssetSettings, AssetUrlBuilder, resolve_path, settings
from statictags.helpers import StaticAssetHelpers, tag_options

__all__ = [
    "AssetSettings",
    "AssetUrlBuilder",
    "StaticAssetHelpers",
    "resolve_path",
    "settings",
    "tag_options",
]
