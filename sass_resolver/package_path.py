"""Package path extraction for bare and scoped specifiers."""

import os


def get_package_path(specifier: str) -> str | None:
    """Return the package portion of a specifier.

    ``my-pkg/src/index`` -> ``my-pkg``
    ``@scoped/my-pkg/src/index`` -> ``@scoped/my-pkg``
    ``my-pkg`` -> ``None`` (no directory component)

    Args:
        specifier: Import specifier as written in the stylesheet

    Returns:
        Package path using ``/`` separators, or None
    """
    normalized = specifier.replace(os.sep, "/")
    if "/" not in normalized:
        return None

    segments = normalized.split("/")
    if segments[0].startswith("@"):
        return "/".join(segments[:2])
    return segments[0]
