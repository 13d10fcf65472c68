"""Unit tests for config settings & validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import pytest

from profile_es.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    ProfileSettings,
    Settings,
)


@dataclass
class StoreSettings(Settings):
    _prefix: ClassVar[str] = "STORE"

    dsn: str


class TestProfileSettings:
    def test_defaults(self) -> None:
        settings = ProfileSettings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.snapshot_every == 0
        assert settings.redact_fields == ["email_address"]
        assert settings.log_level_number == 20

    def test_rejects_negative_snapshot_every(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ProfileSettings(snapshot_every=-1)
        assert exc_info.value.setting_name == "snapshot_every"

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ProfileSettings(log_level="CHATTY")

    def test_invalid_value_is_config_error(self) -> None:
        assert issubclass(InvalidSettingValueError, ConfigError)


class TestEnvSettingsLoader:
    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROFILE_LOG_LEVEL", "debug")
        monkeypatch.setenv("PROFILE_JSON_LOGS", "false")
        monkeypatch.setenv("PROFILE_SNAPSHOT_EVERY", "50")
        monkeypatch.setenv("PROFILE_REDACT_FIELDS", "email_address, last_name")
        settings = EnvSettingsLoader().load(ProfileSettings)
        assert settings.log_level == "debug"
        assert settings.json_logs is False
        assert settings.snapshot_every == 50
        assert settings.redact_fields == ["email_address", "last_name"]

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STORE_DSN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(StoreSettings)
        assert exc_info.value.setting_name == "STORE_DSN"

    def test_unparseable_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROFILE_SNAPSHOT_EVERY", "often")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(ProfileSettings)

    def test_validation_runs_on_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROFILE_SNAPSHOT_EVERY", "-5")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ProfileSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STORE_DSN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("STORE_DSN=memory://\n")
        try:
            settings = DotenvSettingsLoader(str(env_file)).load(StoreSettings)
        finally:
            os.environ.pop("STORE_DSN", None)
        assert settings.dsn == "memory://"
