import pytest
from flask import Flask

from select_toggle import create_app
from select_toggle.assets import DEFAULT_ASSET_MANIFEST, Asset, AssetKind, AssetManifest
from select_toggle.extension import EXTENSION_KEY, SelectToggleExtension, get_extension
from select_toggle.settings import Settings


@pytest.mark.unit
def test_extension_is_stored_on_app(registry) -> None:
    extension = SelectToggleExtension(registry)
    app = create_app(settings=Settings.load(), extension=extension)

    assert app.extensions[EXTENSION_KEY] is extension
    assert get_extension(app) is extension
    assert extension.options_service.get_options("users", "role", "type", "admin") == [
        {"value": "full", "label": "Full Access"},
    ]


@pytest.mark.unit
def test_get_extension_requires_init_app() -> None:
    with pytest.raises(RuntimeError):
        get_extension(Flask(__name__))


@pytest.mark.unit
def test_apps_do_not_share_registries(registry) -> None:
    first = create_app(settings=Settings.load(), registry=registry)
    second = create_app(settings=Settings.load())

    assert get_extension(first).registry is registry
    assert len(get_extension(second).registry) == 0


@pytest.mark.unit
def test_default_manifest_ships_field_assets() -> None:
    assert [asset.path for asset in DEFAULT_ASSET_MANIFEST.scripts()] == ["js/field.js"]
    assert [asset.path for asset in DEFAULT_ASSET_MANIFEST.styles()] == ["css/field.css"]
    assert DEFAULT_ASSET_MANIFEST.missing() == []


@pytest.mark.unit
def test_manifest_reports_missing_files() -> None:
    manifest = AssetManifest(assets=(Asset(name="extra", kind=AssetKind.SCRIPT, path="js/missing.js"),))

    assert manifest.missing() == ["js/missing.js"]
