"""
Tests pour Settings (pydantic-settings, prefixe KARS_).
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kars.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("KARS_PORT", raising=False)
        monkeypatch.delenv("KARS_HOST", raising=False)
        settings = Settings(_env_file=None)
        assert settings.host == "127.0.0.1"
        assert settings.port == 3001
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KARS_DATABASE_URL", "sqlite:///:memory:")
        monkeypatch.setenv("KARS_PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///:memory:"
        assert settings.port == 8080

    def test_port_is_validated(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, port=70000)

    def test_tmdb_enabled(self) -> None:
        assert Settings(_env_file=None, tmdb_api_key="abc").tmdb_enabled
        assert not Settings(_env_file=None, tmdb_api_key="").tmdb_enabled
        assert not Settings(_env_file=None, tmdb_api_key=None).tmdb_enabled

    def test_paths_expand_home(self) -> None:
        settings = Settings(_env_file=None, cache_dir="~/kars-cache")
        assert settings.cache_dir == Path.home() / "kars-cache"
