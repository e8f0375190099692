"""Tests for settings loading."""

import os
from pathlib import Path

import pytest
from sass_resolver.manifest import MANIFEST_FIELDS
from sass_resolver.probe import EXTENSIONS
from sass_resolver.settings import INCLUDE_PATHS_ENV
from sass_resolver.settings import SettingsError
from sass_resolver.settings import SettingsPaths
from sass_resolver.settings import load_settings


@pytest.fixture
def settings_paths(tmp_path):
    return SettingsPaths(
        global_settings=tmp_path / "global" / "settings.yaml",
        project_settings=tmp_path / "project" / "settings.yaml",
    )


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv(INCLUDE_PATHS_ENV, raising=False)


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def test_defaults_without_files(settings_paths):
    settings = load_settings(settings_paths)
    assert settings.include_paths == []
    assert settings.extensions == list(EXTENSIONS)
    assert settings.manifest_fields == list(MANIFEST_FIELDS)


def test_project_overrides_global(settings_paths):
    _write(settings_paths.global_settings, "include_paths: [/global/modules]\nextensions: [css]\n")
    _write(settings_paths.project_settings, "include_paths: [/project/modules]\n")

    settings = load_settings(settings_paths)
    assert settings.include_paths == [Path("/project/modules")]
    assert settings.extensions == ["css"]


def test_malformed_scope_file_skipped(settings_paths, caplog):
    _write(settings_paths.global_settings, "include_paths: [/global/modules]\n")
    _write(settings_paths.project_settings, "include_paths: [unterminated\n")

    settings = load_settings(settings_paths)
    assert settings.include_paths == [Path("/global/modules")]
    assert "Skipping malformed settings file" in caplog.text


def test_explicit_config_file(tmp_path, settings_paths):
    _write(settings_paths.project_settings, "include_paths: [/ignored]\n")
    config = _write(tmp_path / "custom.yaml", "include_paths: [/custom]\nmanifest_fields: [style]\n")

    settings = load_settings(settings_paths, config_file=config)
    assert settings.include_paths == [Path("/custom")]
    assert settings.manifest_fields == ["style"]


def test_missing_explicit_config_file(tmp_path):
    with pytest.raises(SettingsError, match="not found"):
        load_settings(config_file=tmp_path / "missing.yaml")


def test_malformed_explicit_config_file(tmp_path):
    config = _write(tmp_path / "bad.yaml", "- just\n- a list\n")
    with pytest.raises(SettingsError):
        load_settings(config_file=config)


def test_invalid_values(tmp_path):
    config = _write(tmp_path / "bad.yaml", "extensions: {scss: 1}\n")
    with pytest.raises(SettingsError, match="Invalid"):
        load_settings(config_file=config)


def test_env_include_paths_come_first(settings_paths, monkeypatch):
    _write(settings_paths.project_settings, "include_paths: [/configured]\n")
    monkeypatch.setenv(INCLUDE_PATHS_ENV, os.pathsep.join(["/env/a", "", "/env/b"]))

    settings = load_settings(settings_paths)
    assert settings.include_paths == [Path("/env/a"), Path("/env/b"), Path("/configured")]


def test_create_resolver_uses_settings(fake_modules, settings_paths):
    _write(settings_paths.project_settings, f"include_paths: ['{fake_modules.as_posix()}']\nmanifest_fields: [style]\n")

    resolver = load_settings(settings_paths).create_resolver()
    assert resolver.fields == ("style",)
    result = resolver.find_file_url("my-pkg")
    assert result is not None
    assert result.pathname.endswith("my-pkg/dist/my-pkg.css")
