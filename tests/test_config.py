"""Tests for configuration loading."""

import pytest

from catalog.core.config import (
    DEFAULT_API_KEY,
    DEFAULT_PORT,
    CatalogConfig,
    get_config,
    set_config,
)


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "catalog:\n"
        "  host: 127.0.0.1\n"
        "  port: 8080\n"
        "auth:\n"
        "  api_key: from-yaml\n"
        "logging:\n"
        "  level: debug\n"
    )
    return path


def test_defaults():
    config = CatalogConfig()
    assert config.port == DEFAULT_PORT == 3000
    assert config.api_key == DEFAULT_API_KEY == "my-secret-api-key"


def test_missing_yaml_gives_defaults(tmp_path):
    assert CatalogConfig.from_yaml(tmp_path / "absent.yaml") == CatalogConfig()


def test_from_yaml(yaml_config):
    config = CatalogConfig.from_yaml(yaml_config)
    assert config == CatalogConfig(host="127.0.0.1", port=8080, api_key="from-yaml", log_level="DEBUG")


def test_env_overrides_yaml(yaml_config):
    config = CatalogConfig.load(yaml_config, environ={"PORT": "9000", "API_KEY": "from-env"})
    assert config.port == 9000
    assert config.api_key == "from-env"
    assert config.host == "127.0.0.1"


def test_catalog_config_env_selects_file(yaml_config):
    config = CatalogConfig.load(environ={"CATALOG_CONFIG": str(yaml_config)})
    assert config.api_key == "from-yaml"


def test_empty_env_values_ignored(tmp_path):
    config = CatalogConfig.load(tmp_path / "absent.yaml", environ={"PORT": "", "API_KEY": ""})
    assert config.port == DEFAULT_PORT
    assert config.api_key == DEFAULT_API_KEY


def test_invalid_port_rejected(tmp_path):
    with pytest.raises(ValueError):
        CatalogConfig.load(tmp_path / "absent.yaml", environ={"PORT": "http"})


def test_global_config_roundtrip():
    custom = CatalogConfig(api_key="global")
    set_config(custom)
    try:
        assert get_config() is custom
    finally:
        set_config(None)
