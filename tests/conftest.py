"""Shared pytest fixtures for the pilet generator test suite.

Provides reusable fixtures for:
- Sample input mappings for each built-in generator
- Deterministic packaging configuration
- Small in-memory file sets
"""

from __future__ import annotations

from typing import Any

import pytest

from pilet_generators.config import PackagingConfig


# ---------------------------------------------------------------------------
# Generator inputs
# ---------------------------------------------------------------------------


@pytest.fixture
def simple_input() -> dict[str, Any]:
    """Input for ``simple-generator`` with two React pages and no features."""
    return {
        "name": "@org/foo",
        "version": "1.2.3",
        "appShell": "@org/app",
        "pages": 2,
        "useReact": True,
        "features": [],
    }


@pytest.fixture
def steps_input() -> dict[str, Any]:
    """Input for ``steps-generator`` touching every value kind."""
    return {
        "name": "@org/foo",
        "version": "1.2.3",
        "appShell": "@org/app",
        "count": 2,
        "notify": True,
        "language": "de",
        "fruits": ["orange", "apple"],
    }


@pytest.fixture
def templating_input() -> dict[str, Any]:
    """Input for ``templating-generator``."""
    return {
        "name": "@org/foo",
        "version": "1.2.3",
        "appShell": "@org/app",
    }


# ---------------------------------------------------------------------------
# Packaging
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_packaging() -> PackagingConfig:
    """Packaging configuration that yields byte-identical archives."""
    return PackagingConfig(sort_entries=True, mtime=0)


@pytest.fixture
def sample_files() -> dict[str, bytes]:
    """A small file set with a nested path and non-ASCII content."""
    return {
        "package.json": b'{\n  "name": "sample"\n}',
        "src/index.tsx": "export const greeting = 'Grüß dich';\n".encode("utf-8"),
        "README.md": b"# Sample\n",
    }
