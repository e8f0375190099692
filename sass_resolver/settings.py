"""Settings for sass-resolver.

Scope priority (most specific wins):
1. project (.sass-resolver/settings.yaml in the working directory)
2. global (~/.sass-resolver/settings.yaml)

An explicit config file replaces scope discovery entirely. Include paths
from SASS_RESOLVER_INCLUDE_PATHS are searched before configured ones.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .manifest import MANIFEST_FIELDS
from .probe import EXTENSIONS
from .resolver import SassResolver

logger = logging.getLogger(__name__)

INCLUDE_PATHS_ENV = "SASS_RESOLVER_INCLUDE_PATHS"


class SettingsError(Exception):
    """Raised when an explicitly requested settings file cannot be used."""


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard layout."""
        return cls(
            global_settings=Path.home() / ".sass-resolver" / "settings.yaml",
            project_settings=Path.cwd() / ".sass-resolver" / "settings.yaml",
        )


class ResolverSettings(BaseModel):
    """Effective resolver configuration."""

    include_paths: list[Path] = Field(default_factory=list)
    extensions: list[str] = Field(default_factory=lambda: list(EXTENSIONS))
    manifest_fields: list[str] = Field(default_factory=lambda: list(MANIFEST_FIELDS))

    def create_resolver(self) -> SassResolver:
        """Build an importer over the configured include paths."""
        return SassResolver(self.include_paths, extensions=self.extensions, fields=self.manifest_fields)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        content = yaml.safe_load(f) or {}
    if not isinstance(content, dict):
        raise ValueError("top level must be a mapping")
    return content


def _env_include_paths() -> list[Path]:
    value = os.environ.get(INCLUDE_PATHS_ENV, "")
    return [Path(entry) for entry in value.split(os.pathsep) if entry]


def _merge(paths: SettingsPaths) -> dict[str, Any]:
    """Merge scope files, later scopes replacing earlier keys."""
    result: dict[str, Any] = {}
    for path in [paths.global_settings, paths.project_settings]:
        if not path.exists():
            continue
        try:
            result.update(_read_yaml(path))
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Skipping malformed settings file {path}: {e}")
    return result


def load_settings(paths: SettingsPaths | None = None, config_file: Path | None = None) -> ResolverSettings:
    """Load effective settings.

    Args:
        paths: Scope file locations (default: SettingsPaths.default())
        config_file: Explicit settings file, used instead of scope files

    Returns:
        ResolverSettings

    Raises:
        SettingsError: config_file is missing or malformed, or values are invalid
    """
    if config_file is not None:
        if not config_file.is_file():
            raise SettingsError(f"Settings file not found: {config_file}")
        try:
            data = _read_yaml(config_file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise SettingsError(f"Failed to read {config_file}: {e}") from e
    else:
        data = _merge(paths or SettingsPaths.default())

    try:
        settings = ResolverSettings.model_validate(data)
    except ValidationError as e:
        source = config_file or "settings"
        raise SettingsError(f"Invalid {source}: {e}") from e

    if env_paths := _env_include_paths():
        settings.include_paths = env_paths + settings.include_paths

    logger.debug(f"[settings] include_paths={[str(p) for p in settings.include_paths]}")
    return settings
