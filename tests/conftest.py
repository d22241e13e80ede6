import os

import pytest

from statictags.core.cache_bust import AssetUrlBuilder
from statictags.core.settings import AssetSettings
from statictags.helpers import StaticAssetHelpers


@pytest.fixture
def app_root(tmp_path):
    (tmp_path / "public").mkdir()
    return tmp_path


@pytest.fixture
def write_asset(app_root):
    """Create <app_root>/public/<relative> with a fixed mtime."""

    def _write(relative: str, mtime: int = 1700000000, body: str = ""):
        path = app_root / "public" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body)
        os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def asset_settings(app_root):
    return AssetSettings(app_root=str(app_root), asset_host="", xhtml=False)


@pytest.fixture
def url_builder(asset_settings):
    return AssetUrlBuilder(asset_settings)


@pytest.fixture
def helpers(url_builder):
    return StaticAssetHelpers(url_builder)
