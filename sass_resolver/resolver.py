"""Specifier resolution against one or more search roots.

Resolution order within a root (first match wins):
1. Direct file (``base/specifier`` with extension and partial probing)
2. Directory index (``base/specifier/index``)
3. Package manifest (``sass`` or ``style`` field of ``base/<package>/package.json``)

Roots are tried in the order given. Every negative outcome is ``None``;
nothing here raises for a specifier that cannot be found.
"""

import logging
import os
import posixpath
from collections.abc import Sequence
from pathlib import Path

from .manifest import MANIFEST_FIELDS
from .manifest import extract_main_path_from_package_json
from .models import FileUrl
from .models import ResolvedFile
from .package_path import get_package_path
from .probe import EXTENSIONS
from .probe import is_dir
from .probe import try_to_find_file

logger = logging.getLogger(__name__)

INDEX_NAME = "index"

SearchRoots = str | os.PathLike | Sequence[str | os.PathLike]


def _resolved(path: Path) -> ResolvedFile:
    return ResolvedFile(path=path.resolve())


def _resolve_via_manifest(
    specifier: str, base: Path, extensions: Sequence[str], fields: Sequence[str]
) -> Path | None:
    """Resolve a specifier through its package's declared entry point."""
    normalized = specifier.replace(os.sep, "/")
    # Relative and absolute specifiers never name a package
    if normalized.startswith(("/", ".")):
        return None
    package_path = get_package_path(normalized) or normalized
    if not package_path:
        return None
    package_dir = base / package_path

    entry = extract_main_path_from_package_json(package_dir, fields)
    if entry is None:
        return None

    remainder = normalized[len(package_path) :].strip("/")
    if not remainder:
        return try_to_find_file(package_dir / entry, extensions)

    # Sub-paths are looked up under the entry point's directory
    source_root = posixpath.dirname(entry)
    return try_to_find_file(package_dir / source_root / remainder, extensions)


def resolve_path(
    specifier: str,
    base_directory: str | os.PathLike,
    *,
    extensions: Sequence[str] = EXTENSIONS,
    fields: Sequence[str] = MANIFEST_FIELDS,
) -> ResolvedFile | None:
    """Resolve a specifier against a single base directory.

    Args:
        specifier: Import specifier (``my-pkg``, ``@scope/pkg/file``, ``src/partial``)
        base_directory: Directory the specifier is looked up in
        extensions: Recognized extensions, highest priority first
        fields: Manifest entry point fields, highest priority first

    Returns:
        ResolvedFile with an absolute path, or None if nothing matches
    """
    if not specifier:
        return None

    base = Path(base_directory)
    # Absolute specifiers are still looked up inside the base directory
    target = base / specifier.replace(os.sep, "/").lstrip("/")
    log_extra = {"event": "resolve", "specifier": specifier, "root": str(base)}

    if found := try_to_find_file(target, extensions):
        logger.debug(f"[resolve] {specifier} -> direct ({found})", extra={**log_extra, "layer": "direct"})
        return _resolved(found)

    if is_dir(target):
        if found := try_to_find_file(target / INDEX_NAME, extensions):
            logger.debug(f"[resolve] {specifier} -> index ({found})", extra={**log_extra, "layer": "index"})
            return _resolved(found)

    if found := _resolve_via_manifest(specifier, base, extensions, fields):
        logger.debug(f"[resolve] {specifier} -> manifest ({found})", extra={**log_extra, "layer": "manifest"})
        return _resolved(found)

    logger.debug(f"[resolve] {specifier} not found under {base}", extra={**log_extra, "layer": None})
    return None


class SassResolver:
    """Importer over an ordered list of search roots.

    Mirrors the importer shape stylesheet compilers expect: a single
    ``find_file_url`` lookup returning a URL or None.
    """

    def __init__(
        self,
        search_roots: SearchRoots,
        extensions: Sequence[str] = EXTENSIONS,
        fields: Sequence[str] = MANIFEST_FIELDS,
    ):
        """Initialize resolver.

        Args:
            search_roots: One directory or an ordered list of directories
            extensions: Recognized extensions, highest priority first
            fields: Manifest entry point fields, highest priority first
        """
        if isinstance(search_roots, (str, os.PathLike)):
            search_roots = [search_roots]

        self.search_roots = [Path(root) for root in search_roots]
        self.extensions = tuple(extensions)
        self.fields = tuple(fields)

    def resolve(self, specifier: str) -> ResolvedFile | None:
        """Resolve a specifier against each root in order."""
        for root in self.search_roots:
            if result := resolve_path(specifier, root, extensions=self.extensions, fields=self.fields):
                return result
        return None

    def find_file_url(self, specifier: str) -> FileUrl | None:
        """Resolve a specifier to a ``file://`` URL, or None."""
        result = self.resolve(specifier)
        if result is None:
            return None
        return result.to_url()

    def __repr__(self) -> str:
        roots = ", ".join(str(root) for root in self.search_roots)
        return f"SassResolver([{roots}])"


def create_resolver(
    search_roots: SearchRoots,
    extensions: Sequence[str] = EXTENSIONS,
    fields: Sequence[str] = MANIFEST_FIELDS,
) -> SassResolver:
    """Create an importer over one directory or an ordered list of directories."""
    return SassResolver(search_roots, extensions=extensions, fields=fields)


sass_resolver = create_resolver
