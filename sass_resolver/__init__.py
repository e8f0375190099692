"""Stylesheet import resolution with package-manager conventions.

Resolves specifiers such as ``my-pkg/src/index``, ``@scoped/pkg`` or
``src/partial`` to files on disk, handling optional extensions,
underscore partials, directory index files and ``package.json``
``sass``/``style`` entry points.
"""

from .manifest import MANIFEST_FIELDS
from .manifest import PackageManifest
from .manifest import extract_main_path_from_package_json
from .models import FileUrl
from .models import ResolvedFile
from .package_path import get_package_path
from .probe import EXTENSIONS
from .probe import try_to_find_file
from .resolver import SassResolver
from .resolver import create_resolver
from .resolver import resolve_path
from .resolver import sass_resolver

__all__ = [
    "EXTENSIONS",
    "MANIFEST_FIELDS",
    "FileUrl",
    "PackageManifest",
    "ResolvedFile",
    "SassResolver",
    "create_resolver",
    "extract_main_path_from_package_json",
    "get_package_path",
    "resolve_path",
    "sass_resolver",
    "try_to_find_file",
]
