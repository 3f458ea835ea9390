from __future__ import annotations

import pytest

from brick_chunks.errors import ChunksError
from brick_chunks.settings import Settings


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("AUTHORIZED", "WORLD_MIN_Z", "WORLD_MAX_Z", "REPORT_LIMIT"):
        monkeypatch.delenv(f"BRICK_CHUNKS_{name}", raising=False)
    settings = Settings.from_env()
    assert settings.authorized == frozenset()
    assert (settings.world_min_z, settings.world_max_z) == (0, 512)
    assert settings.report_limit == 5
    assert settings.is_authorized("anyone")


def test_from_env_parses_values(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BRICK_CHUNKS_AUTHORIZED", "Alice; bob ,")
    monkeypatch.setenv("BRICK_CHUNKS_WORLD_MIN_Z", "-1000")
    monkeypatch.setenv("BRICK_CHUNKS_WORLD_MAX_Z", "4000")
    settings = Settings.from_env()
    assert settings.authorized == frozenset({"alice", "bob"})
    assert settings.is_authorized("BOB")
    assert not settings.is_authorized("carol")
    assert settings.world_min_z == -1000


def test_from_env_rejects_bad_integers(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BRICK_CHUNKS_WORLD_MAX_Z", "tall")
    with pytest.raises(SystemExit):
        Settings.from_env()


def test_from_env_rejects_inverted_world_bounds(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BRICK_CHUNKS_WORLD_MIN_Z", "100")
    monkeypatch.setenv("BRICK_CHUNKS_WORLD_MAX_Z", "50")
    with pytest.raises(SystemExit):
        Settings.from_env()


def test_from_plugin_config():
    settings = Settings.from_plugin_config({"authorized": [{"name": " Alice ", "id": "1234"}], "report_limit": 3})
    assert settings.authorized == frozenset({"alice"})
    assert settings.report_limit == 3


def test_from_plugin_config_rejects_invalid_payload():
    with pytest.raises(ChunksError):
        Settings.from_plugin_config({"authorized": [{"id": "no-name"}]})
    with pytest.raises(ChunksError):
        Settings.from_plugin_config({"world_min_z": 10, "world_max_z": 5})
