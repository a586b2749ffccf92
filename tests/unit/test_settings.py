"""Tests for service settings."""

from collections.abc import Iterator
from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from jobpreview.config import Settings, clear_settings_cache, env_files, get_settings
from jobpreview.config.settings import DEFAULT_ENV_FILES


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JOBPREVIEW_ENV_FILE", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestSettingsSources:
    def test_defaults_without_env_files(self) -> None:
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.cache_ttl == timedelta(hours=24)
        assert settings.cache_sweep_interval == timedelta(hours=1)
        assert settings.fetch_timeout is None

    def test_prefixed_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBPREVIEW_CACHE_TTL_HOURS", "2")
        monkeypatch.setenv("JOBPREVIEW_FETCH_TIMEOUT", "7.5")

        settings = Settings()

        assert settings.cache_ttl == timedelta(hours=2)
        assert settings.fetch_timeout == 7.5

    def test_dev_env_file_overrides_base(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / ".env").write_text(
            "JOBPREVIEW_LOG_LEVEL=WARNING\nJOBPREVIEW_ACCEPT_LANGUAGE=de-DE\n"
        )
        (config_dir / ".env.dev").write_text("JOBPREVIEW_LOG_LEVEL=DEBUG\n")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.accept_language == "de-DE"

    def test_environment_beats_env_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("JOBPREVIEW_LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("JOBPREVIEW_LOG_LEVEL", "ERROR")

        assert Settings(_env_file=env_file).log_level == "ERROR"

    def test_rejects_non_positive_ttl(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBPREVIEW_CACHE_TTL_HOURS", "0")

        with pytest.raises(ValidationError):
            Settings()


class TestEnvFileOverride:
    def test_default_files(self) -> None:
        assert env_files() == DEFAULT_ENV_FILES

    def test_override_replaces_defaults(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        env_file = tmp_path / "prod.env"
        env_file.write_text("JOBPREVIEW_USER_AGENT=TestAgent/1.0\n")
        monkeypatch.setenv("JOBPREVIEW_ENV_FILE", str(env_file))

        assert env_files() == (env_file,)
        assert get_settings().user_agent == "TestAgent/1.0"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
