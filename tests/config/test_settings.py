"""Tests for FnkitSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from fnkit.config.discovery import CONFIG_ENV_VAR
from fnkit.config.models import LoggingConfig, MemoConfig
from fnkit.config.settings import FnkitSettings, get_settings, reset_settings
from fnkit.errors import ConfigError


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = FnkitSettings.load()
        assert settings.config_path is None
        assert settings.memo.maxsize is None
        assert settings.logging.verbose is False
        assert settings.logging.log_json is False

    def test_frozen(self) -> None:
        settings = FnkitSettings.load()
        with pytest.raises(Exception):
            settings.memo = MemoConfig(maxsize=3)  # type: ignore[misc]

    def test_maxsize_must_be_positive(self) -> None:
        with pytest.raises(Exception):
            MemoConfig(maxsize=0)


class TestTomlSource:
    def test_explicit_config_path(self, tmp_path: Path) -> None:
        toml = tmp_path / "custom.toml"
        toml.write_text("[memo]\nmaxsize = 64\n[logging]\nverbose = true\n")
        settings = FnkitSettings.load(config_path=toml)
        assert settings.memo.maxsize == 64
        assert settings.logging.verbose is True
        assert settings.logging.log_json is False  # default preserved
        assert settings.config_path == toml

    def test_discovered_from_start(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR)
        (tmp_path / "fnkit.toml").write_text("[memo]\nmaxsize = 8\n")
        nested = tmp_path / "pkg"
        nested.mkdir()
        settings = FnkitSettings.load(start=nested)
        assert settings.memo.maxsize == 8

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = FnkitSettings.load(config_path=tmp_path / "nope.toml")
        assert settings.config_path is None
        assert settings.memo.maxsize is None

    def test_invalid_toml_raises_config_error(self, tmp_path: Path) -> None:
        toml = tmp_path / "broken.toml"
        toml.write_text("[memo\nmaxsize = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            FnkitSettings.load(config_path=toml)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        toml = tmp_path / "fnkit.toml"
        toml.write_text("[memo]\nmaxsize = 64\n")
        monkeypatch.setenv("FNKIT_MEMO__MAXSIZE", "16")
        settings = FnkitSettings.load(config_path=toml)
        assert settings.memo.maxsize == 16

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FNKIT_LOGGING__VERBOSE", "true")
        settings = FnkitSettings.load(logging=LoggingConfig(verbose=False, log_json=True))
        assert settings.logging.verbose is False
        assert settings.logging.log_json is True


class TestCachedSettings:
    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        before = get_settings()
        monkeypatch.setenv("FNKIT_MEMO__MAXSIZE", "5")
        assert get_settings().memo.maxsize is None
        reset_settings()
        after = get_settings()
        assert after is not before
        assert after.memo.maxsize == 5
