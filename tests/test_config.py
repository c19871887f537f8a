# tests/test_config.py
import importlib
import json
from decimal import Decimal

import pytest

from bootique.config import DEFAULT_CATALOG, DEFAULT_PORT, Settings, load_catalog
from bootique.errors import ConfigError
from bootique.main import create_app


def test_defaults():
    s = Settings.from_env({})
    assert s.port == DEFAULT_PORT
    assert s.host == "0.0.0.0"
    assert s.log_level == "INFO"
    assert s.log_json is False
    assert s.cors_origins == ["*"]
    assert s.catalog() == DEFAULT_CATALOG


def test_env_overrides():
    s = Settings.from_env({
        "BOOTIQUE_HOST": "127.0.0.1",
        "BOOTIQUE_PORT": "9000",
        "BOOTIQUE_LOG_LEVEL": "debug",
        "BOOTIQUE_LOG_JSON": "yes",
        "BOOTIQUE_CORS_ORIGINS": "http://a.test, http://b.test",
    })
    assert (s.host, s.port, s.log_level, s.log_json) == ("127.0.0.1", 9000, "DEBUG", True)
    assert s.cors_origins == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_bad_port(port):
    with pytest.raises(ConfigError):
        Settings.from_env({"BOOTIQUE_PORT": port})


def test_load_catalog_keeps_exact_prices(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text('[{"id": "a", "title": "Lamp", "brand": "Ikea", "listPrice": 0.1},'
                    ' {"id": "b", "title": "Chair", "brand": "Ikea", "listPrice": "49.90"}]')
    products = load_catalog(str(path))
    assert [p.id for p in products] == ["a", "b"]
    assert products[0].list_price == Decimal("0.1")
    assert products[1].list_price == Decimal("49.90")


def test_catalog_path_seeds_app(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"id": "z", "title": "Zeppelin", "brand": "LZ", "listPrice": "1000"}]))
    app = create_app(Settings.from_env({"BOOTIQUE_CATALOG": str(path)}))
    assert app.state.products.get_product_by_id("z").title == "Zeppelin"
    assert app.state.products.get_product_by_id("1") is None


@pytest.mark.parametrize("content", [
    "not json",
    '{"id": "a"}',
    '[{"id": "a", "title": "T", "brand": "B"}]',
    '[{"id": "a", "title": "T", "brand": "B", "listPrice": "-1"}]',
])
def test_bad_catalog(tmp_path, content):
    path = tmp_path / "catalog.json"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_catalog(str(path))


def test_missing_catalog(tmp_path):
    with pytest.raises(ConfigError):
        load_catalog(str(tmp_path / "nope.json"))


def test_module_app_reads_environment(tmp_path, monkeypatch):
    import bootique.main

    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"id": "z", "title": "Zeppelin", "brand": "LZ", "listPrice": "1000"}]))
    monkeypatch.setenv("BOOTIQUE_CATALOG", str(path))
    monkeypatch.setenv("BOOTIQUE_CORS_ORIGINS", "http://shop.test")
    try:
        importlib.reload(bootique.main)
        app = bootique.main.app
        assert [p.id for p in app.state.products.list_products()] == ["z"]
        assert app.state.settings.cors_origins == ["http://shop.test"]
    finally:
        monkeypatch.delenv("BOOTIQUE_CATALOG")
        monkeypatch.delenv("BOOTIQUE_CORS_ORIGINS")
        importlib.reload(bootique.main)
