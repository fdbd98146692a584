# tests/unit/config/test_settings.py — v1
"""Tests for config/settings.py: typed Settings and validation rules."""

from __future__ import annotations

import pytest

from rebuildcheck.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_extensions(self):
        s = Settings(_env_file=None)
        assert s.fingerprint_extension == "command"
        assert s.msvc_deps_extension == "json"
        assert s.gnu_deps_extension == "dep"

    def test_default_policy(self):
        s = Settings(_env_file=None)
        assert s.default_toolchain == "gnu"
        assert s.empty_deps_is_unknown is True

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsValidation:
    def test_extension_with_dot(self):
        with pytest.raises(ValueError, match="must not contain"):
            Settings(_env_file=None, fingerprint_extension=".command")

    def test_extension_with_separator(self):
        with pytest.raises(ValueError, match="must not contain"):
            Settings(_env_file=None, gnu_deps_extension="deps/d")

    def test_empty_extension(self):
        with pytest.raises(ValueError, match="must not be empty"):
            Settings(_env_file=None, msvc_deps_extension="  ")

    def test_colliding_extensions(self):
        with pytest.raises(ConfigurationError, match="GNU_DEPS_EXTENSION collides"):
            Settings(_env_file=None, gnu_deps_extension="json")

    def test_collision_is_case_insensitive(self):
        with pytest.raises(ConfigurationError, match="collides"):
            Settings(_env_file=None, fingerprint_extension="DEP")

    def test_negative_retention(self):
        with pytest.raises(ValueError, match="log_retention"):
            Settings(_env_file=None, log_retention=-1)

    def test_invalid_toolchain(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, default_toolchain="borland")

    def test_strips_whitespace(self):
        s = Settings(_env_file=None, gnu_deps_extension=" d ")
        assert s.gnu_deps_extension == "d"


class TestEnvironment:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GNU_DEPS_EXTENSION", "d")
        monkeypatch.setenv("EMPTY_DEPS_IS_UNKNOWN", "false")
        s = Settings(_env_file=None)
        assert s.gnu_deps_extension == "d"
        assert s.empty_deps_is_unknown is False

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("FINGERPRINT_EXTENSION=cmdline\nLOG_LEVEL=DEBUG\n", encoding="utf-8")
        s = Settings(_env_file=env)
        assert s.fingerprint_extension == "cmdline"
        assert s.log_level == "DEBUG"


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, default_toolchain="msvc")
        assert s.default_toolchain == "msvc"
