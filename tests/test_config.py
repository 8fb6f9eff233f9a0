"""Tests for configuration."""

import pytest

from config import Config


def test_defaults(monkeypatch):
    for name in ("KV_URL", "KV_TOKEN", "STORAGE_BACKEND", "PORT", "LOCALE"):
        monkeypatch.delenv(name, raising=False)

    config = Config(_env_file=None)

    assert config.port == 3000
    assert config.path_prefix == "/p"
    assert config.page_id_length == 10
    assert config.locale == "cs"
    assert config.sanitize_html is True
    assert config.resolved_storage_backend() == "memory"


def test_remote_store_selected_from_environment(monkeypatch):
    monkeypatch.setenv("KV_URL", "rediss://kv.example:6379")
    monkeypatch.setenv("KV_TOKEN", "secret")
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)

    config = Config(_env_file=None)

    assert config.remote_store_configured
    assert config.resolved_storage_backend() == "redis"


def test_explicit_backend_wins(monkeypatch):
    monkeypatch.setenv("KV_URL", "rediss://kv.example:6379")
    monkeypatch.setenv("KV_TOKEN", "secret")

    config = Config(_env_file=None, storage_backend="FILE")

    assert config.storage_backend == "file"
    assert config.resolved_storage_backend() == "file"


def test_safe_dump_masks_token():
    config = Config(_env_file=None, kv_url="rediss://kv.example:6379", kv_token="secret")

    assert config.safe_dump()["kv_token"] == "***"


def test_invalid_backend():
    with pytest.raises(ValueError):
        Config(_env_file=None, storage_backend="sqlite")


def test_no_worker_process_setting(monkeypatch):
    """The server runs as one process; WORKERS is not a setting."""
    monkeypatch.setenv("WORKERS", "4")

    config = Config(_env_file=None)

    assert "workers" not in Config.model_fields
    assert not hasattr(config, "workers")
