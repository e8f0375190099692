"""Package manifest (package.json) entry point reading."""

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field

from .probe import is_file

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

# Dedicated stylesheet field first, generic style field second
MANIFEST_FIELDS: tuple[str, ...] = ("sass", "style")


class PackageManifest(BaseModel):
    """Stylesheet-relevant view of a package.json.

    Attributes:
        data: Raw manifest mapping. Values stay untyped so a wrongly typed
            field only disqualifies itself, never the rest of the manifest.
    """

    data: dict[str, Any] = Field(default_factory=dict)

    def entry_point(self, fields: Sequence[str] = MANIFEST_FIELDS) -> str | None:
        """Return the first populated entry point field."""
        for field in fields:
            value = self.data.get(field)
            if isinstance(value, str) and value:
                return value
        return None


def read_manifest(directory: str | os.PathLike) -> PackageManifest | None:
    """Load the manifest of a package directory.

    Args:
        directory: Package root directory

    Returns:
        PackageManifest, or None if missing or malformed
    """
    manifest_path = Path(directory) / MANIFEST_NAME
    if not is_file(manifest_path):
        return None

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read {manifest_path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {manifest_path}: top level is not an object")
        return None

    return PackageManifest(data=data)


def extract_main_path_from_package_json(
    directory: str | os.PathLike, fields: Sequence[str] = MANIFEST_FIELDS
) -> str | None:
    """Return the stylesheet entry point declared by a package.

    Args:
        directory: Package root directory
        fields: Entry point field names, highest priority first

    Returns:
        Entry point relative to the package root, or None
    """
    manifest = read_manifest(directory)
    if manifest is None:
        return None

    entry = manifest.entry_point(fields)
    logger.debug(f"[manifest] {directory} -> {entry}", extra={"event": "manifest", "entry": entry})
    return entry
