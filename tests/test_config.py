"""Tests for settings and the per-user .env helpers."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, get_user_env_file, write_user_env_vars


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)

        assert settings.api_base_url == "http://localhost:8000/api/v1"
        assert settings.api_token is None
        assert settings.http_timeout_seconds == 20.0
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("CATALOG_SYNC_API_BASE_URL", "https://sync.example.com/api")
        monkeypatch.setenv("CATALOG_SYNC_API_TOKEN", "abc")
        monkeypatch.setenv("catalog_sync_http_timeout_seconds", "5")

        settings = AppSettings(_env_file=None)

        assert settings.api_base_url == "https://sync.example.com/api"
        assert settings.api_token == "abc"
        assert settings.http_timeout_seconds == 5.0

    def test_reads_project_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CATALOG_SYNC_API_BASE_URL=https://from-file.example.com\n", encoding="utf-8")

        settings = AppSettings(_env_file=str(env_file))

        assert settings.api_base_url == "https://from-file.example.com"

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)


class TestUserEnvFile:
    def test_user_config_dir_follows_xdg(self, tmp_path):
        assert get_user_config_dir() == tmp_path / "config" / "catalog-sync"
        assert get_user_env_file() == tmp_path / "config" / "catalog-sync" / ".env"

    def test_write_creates_sorted_file(self):
        path = write_user_env_vars(
            {
                "CATALOG_SYNC_API_TOKEN": "tok",
                "CATALOG_SYNC_API_BASE_URL": "https://a.example.com",
            }
        )

        lines = Path(path).read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == [
            "CATALOG_SYNC_API_BASE_URL=https://a.example.com",
            "CATALOG_SYNC_API_TOKEN=tok",
        ]

    def test_write_merges_and_skips_none(self):
        write_user_env_vars({"CATALOG_SYNC_API_TOKEN": "old", "OTHER": '"quoted"'})
        path = write_user_env_vars({"CATALOG_SYNC_API_TOKEN": None, "CATALOG_SYNC_LOG_LEVEL": "DEBUG"})

        text = path.read_text(encoding="utf-8")
        assert "CATALOG_SYNC_API_TOKEN=old" in text
        assert "CATALOG_SYNC_LOG_LEVEL=DEBUG" in text
        assert "OTHER=quoted" in text
