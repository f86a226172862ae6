import pytest
from wsdot_client.core.config import (
    DEFAULT_BASE_URL,
    ConfigManager,
    WsdotConfig,
    load_env_config,
)


def test_load_env_config_reads_variables(monkeypatch):
    monkeypatch.setenv("WSDOT_ACCESS_TOKEN", " env-key ")
    monkeypatch.setenv("WSDOT_BASE_URL", "https://mirror.example/")
    cfg = load_env_config()
    assert cfg == WsdotConfig(api_key="env-key", base_url="https://mirror.example")


def test_load_env_config_defaults(monkeypatch):
    monkeypatch.delenv("WSDOT_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("WSDOT_BASE_URL", raising=False)
    cfg = load_env_config(use_dotenv=False)
    assert cfg.api_key == ""
    assert cfg.base_url == DEFAULT_BASE_URL


def test_manager_reads_env_lazily(monkeypatch):
    manager = ConfigManager(use_dotenv=False)
    monkeypatch.setenv("WSDOT_ACCESS_TOKEN", "late-key")
    monkeypatch.delenv("WSDOT_BASE_URL", raising=False)
    assert manager.get_api_key() == "late-key"
    assert manager.get_base_url() == DEFAULT_BASE_URL


def test_manager_overrides_win_and_reset_restores(monkeypatch):
    monkeypatch.setenv("WSDOT_ACCESS_TOKEN", "env-key")
    manager = ConfigManager(use_dotenv=False)

    manager.set_api_key("override")
    manager.set_base_url("https://other.example/")
    assert manager.snapshot() == WsdotConfig(
        api_key="override", base_url="https://other.example"
    )

    manager.reset()
    assert manager.get_api_key() == "env-key"


def test_manager_rejects_empty_base_url():
    with pytest.raises(ValueError):
        ConfigManager(use_dotenv=False).set_base_url("  ")
