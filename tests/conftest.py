"""Shared fixtures: an on-disk stylesheet tree with fake packages."""

import json
from pathlib import Path

import pytest


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def fixture_root(tmp_path):
    """Create the fixture tree.

    Layout:
        src/direct-file.scss
        src/_partial.scss
        src/subdir/_item.scss
        fake_modules/my-pkg/           (sass + style fields, core/ partials)
        fake_modules/@scoped/my-pkg/   (sass field)
        fake_modules/style-field-pkg/  (style field only)
        fake_modules/no-style-pkg/     (neither field)
    """
    root = tmp_path / "fixtures"

    _write(root / "src" / "direct-file.scss", ".direct {}")
    _write(root / "src" / "_partial.scss", ".partial {}")
    _write(root / "src" / "subdir" / "_item.scss", ".item {}")

    modules = root / "fake_modules"

    my_pkg = modules / "my-pkg"
    _write(
        my_pkg / "package.json",
        json.dumps({"name": "my-pkg", "sass": "src/index.scss", "style": "dist/my-pkg.css"}),
    )
    _write(my_pkg / "src" / "index.scss", "@forward 'core';")
    _write(my_pkg / "src" / "core" / "index.scss", "@forward 'config';")
    _write(my_pkg / "src" / "core" / "_config.scss", "$config: ();")
    _write(my_pkg / "src" / "core" / "utils" / "index.scss", "@forward 'helpers';")
    _write(my_pkg / "src" / "core" / "utils" / "_helpers.scss", "@function noop() {}")
    _write(my_pkg / "dist" / "my-pkg.css", ".my-pkg {}")

    scoped = modules / "@scoped" / "my-pkg"
    _write(scoped / "package.json", json.dumps({"name": "@scoped/my-pkg", "sass": "src/index.scss"}))
    _write(scoped / "src" / "index.scss", ".scoped {}")

    style_pkg = modules / "style-field-pkg"
    _write(style_pkg / "package.json", json.dumps({"name": "style-field-pkg", "style": "dist/main.css"}))
    _write(style_pkg / "dist" / "main.css", ".main {}")

    _write(modules / "no-style-pkg" / "package.json", json.dumps({"name": "no-style-pkg", "main": "index.js"}))

    return root


@pytest.fixture
def fake_modules(fixture_root):
    return fixture_root / "fake_modules"
