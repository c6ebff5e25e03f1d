"""Tests for core.settings module.

Covers:
- ResolverSettings defaults and env var overrides
- Field validation (encoding, log level, empty strings)
- Conversion to ResolverOptions / FolderResolver
- log_level applied through configure_logging()
"""

from pathlib import Path

import pytest
import structlog.testing
from pydantic import ValidationError

from scriptfolders.core.scripts.resolver import FolderResolver
from scriptfolders.core.settings import ResolverSettings, pattern_filter


class TestResolverSettingsDefaults:
    def test_defaults(self, tmp_path: Path):
        s = ResolverSettings(root_dir=tmp_path)
        assert s.root_dir == tmp_path
        assert s.target_version is None
        assert s.encoding == "utf-8"
        assert s.include is None
        assert s.log_level == "INFO"

    def test_root_dir_required(self, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)  # no stray .env file
        with pytest.raises(ValidationError):
            ResolverSettings()


class TestResolverSettingsEnvOverride:
    def test_values_from_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SCRIPTFOLDERS_ROOT_DIR", str(tmp_path))
        monkeypatch.setenv("SCRIPTFOLDERS_TARGET_VERSION", "2.1")
        monkeypatch.setenv("SCRIPTFOLDERS_ENCODING", "latin-1")
        monkeypatch.setenv("SCRIPTFOLDERS_INCLUDE", "1.*")
        monkeypatch.setenv("SCRIPTFOLDERS_LOG_LEVEL", "debug")
        s = ResolverSettings()
        assert s.root_dir == tmp_path
        assert s.target_version == "2.1"
        assert s.encoding == "latin-1"
        assert s.include == "1.*"
        assert s.log_level == "DEBUG"

    def test_empty_target_version_is_none(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCRIPTFOLDERS_TARGET_VERSION", "")
        s = ResolverSettings(root_dir=tmp_path)
        assert s.target_version is None

    def test_env_file(self, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(
            f"SCRIPTFOLDERS_ROOT_DIR={tmp_path}\nSCRIPTFOLDERS_TARGET_VERSION=3.0\n",
            encoding="utf-8",
        )
        s = ResolverSettings()
        assert s.target_version == "3.0"


class TestResolverSettingsValidation:
    def test_unknown_encoding(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            ResolverSettings(root_dir=tmp_path, encoding="no-such-codec")

    def test_unknown_log_level(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            ResolverSettings(root_dir=tmp_path, log_level="chatty")


class TestToOptions:
    def test_no_include_means_no_filter(self, tmp_path: Path):
        opts = ResolverSettings(root_dir=tmp_path, target_version="1.0").to_options()
        assert opts.root == tmp_path
        assert opts.target_version == "1.0"
        assert opts.name_filter is None

    def test_include_becomes_filter(self, tmp_path: Path):
        opts = ResolverSettings(root_dir=tmp_path, include="1.*").to_options()
        assert opts.name_filter("1.0")
        assert opts.name_filter("1.0/a.sql")
        assert not opts.name_filter("2.0/a.sql")

    def test_explicit_filter_wins(self, tmp_path: Path):
        opts = ResolverSettings(root_dir=tmp_path, include="1.*").to_options(
            name_filter=lambda n: False
        )
        assert opts.name_filter("1.0") is False

    def test_from_settings_resolves(self, scripts_root: Path):
        settings = ResolverSettings(root_dir=scripts_root, target_version="2.0", include="1.0*")
        scripts = FolderResolver.from_settings(settings).resolve()
        assert [s.name for s in scripts] == ["1.0/001_create.sql"]


class TestLogLevel:
    def test_error_level_silences_resolver_events(self, scripts_root: Path):
        settings = ResolverSettings(root_dir=scripts_root, target_version="2.0", log_level="ERROR")
        resolver = FolderResolver.from_settings(settings)
        with structlog.testing.capture_logs() as logs:
            resolver.resolve()
        assert logs == []

    def test_debug_level_emits_folder_events(self, scripts_root: Path):
        settings = ResolverSettings(root_dir=scripts_root, target_version="2.0", log_level="debug")
        resolver = FolderResolver.from_settings(settings)
        with structlog.testing.capture_logs() as logs:
            resolver.resolve()
        events = [e["event"] for e in logs]
        assert "scripts.folder.loaded" in events
        assert "scripts.folder.skipped" in events

    def test_configure_logging_applies_level(self, tmp_path: Path, capsys):
        ResolverSettings(root_dir=tmp_path, log_level="WARNING").configure_logging(json_format=True)
        log = structlog.get_logger()
        log.info("hidden")
        log.warning("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out


def test_pattern_filter():
    accept = pattern_filter("*/0*.sql")
    assert accept("1.0/001_create.sql")
    assert not accept("1.0/readme.sql")
