import os

from statictags.core.settings import AssetSettings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("asset_host", "ASSET_HOST", "STATIC_ASSETS_ASSET_HOST", "STATIC_ASSETS_APP_ROOT", "STATIC_ASSETS_XHTML"):
        monkeypatch.delenv(name, raising=False)
    settings = AssetSettings()
    assert settings.app_root == os.getcwd()
    assert settings.asset_host == ""
    assert settings.xhtml is False
    assert settings.public_dir == f"{os.getcwd()}/public"


def test_prefixed_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATIC_ASSETS_APP_ROOT", "/srv/site")
    monkeypatch.setenv("STATIC_ASSETS_XHTML", "true")
    monkeypatch.setenv("STATIC_ASSETS_ASSET_HOST", "https://cdn.example.com")
    settings = AssetSettings()
    assert settings.app_root == "/srv/site"
    assert settings.xhtml is True
    assert settings.asset_host == "https://cdn.example.com"


def test_bare_asset_host_variable(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STATIC_ASSETS_ASSET_HOST", raising=False)
    monkeypatch.setenv("asset_host", "https://static.example.com")
    assert AssetSettings().asset_host == "https://static.example.com"


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STATIC_ASSETS_XHTML", raising=False)
    (tmp_path / ".env").write_text("STATIC_ASSETS_XHTML=1\n")
    assert AssetSettings().xhtml is True
