"""File probing with stylesheet naming conventions.

A reference like ``src/button`` may point at any of:
- ``src/button.sass``, ``src/button.scss``, ``src/button.css``
- ``src/_button.sass``, ``src/_button.scss``, ``src/_button.css`` (partials)

Extensions are tried in priority order and the first existing regular
file wins.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

EXTENSIONS: tuple[str, ...] = ("sass", "scss", "css")

PARTIAL_PREFIX = "_"


def is_file(path: Path) -> bool:
    """Existence check that treats any OS error (ENAMETOOLONG, EACCES) as absent."""
    try:
        return path.is_file()
    except OSError:
        return False


def is_dir(path: Path) -> bool:
    """Directory counterpart of is_file."""
    try:
        return path.is_dir()
    except OSError:
        return False


def partial_name(candidate: Path) -> Path:
    """Return the partial form of a path (final segment prefixed with ``_``).

    Already-prefixed names are returned unchanged.
    """
    if candidate.name.startswith(PARTIAL_PREFIX):
        return candidate
    return candidate.with_name(PARTIAL_PREFIX + candidate.name)


def _known_extension(candidate: Path, extensions: Sequence[str]) -> str | None:
    suffix = candidate.suffix.lstrip(".")
    if suffix and suffix in extensions:
        return suffix
    return None


def _candidates(candidate: Path, extensions: Sequence[str]) -> list[Path]:
    """Build the ordered list of paths to check for a reference."""
    if _known_extension(candidate, extensions):
        return [candidate, partial_name(candidate)]

    partial = partial_name(candidate)
    # Full files before partials, each in extension priority order
    return [candidate.with_name(f"{candidate.name}.{ext}") for ext in extensions] + [
        partial.with_name(f"{partial.name}.{ext}") for ext in extensions
    ]


def try_to_find_file(candidate: str | os.PathLike, extensions: Sequence[str] = EXTENSIONS) -> Path | None:
    """Find an existing stylesheet file for a reference.

    Args:
        candidate: Path with or without a recognized extension
        extensions: Recognized extensions, highest priority first

    Returns:
        First existing file (same relative/absolute form as candidate), None if none exists
    """
    path = Path(candidate)
    if not path.name or path.name in (".", ".."):
        return None

    for option in _candidates(path, extensions):
        if is_file(option):
            logger.debug(f"[probe] {candidate} -> {option}", extra={"event": "probe", "candidate": str(candidate)})
            return option

    logger.debug(f"[probe] {candidate} -> not found", extra={"event": "probe", "candidate": str(candidate)})
    return None
