"""Builders for the three manifests every generated pilet carries.

- ``package.json``  -- npm package manifest with pilet scripts and the
  app shell as development dependency
- ``pilet.json``    -- pilet manifest naming the app shell instance
- ``tsconfig.json`` -- TypeScript compiler configuration

Each manifest is an explicit builder. Optional sections, such as the
UI-framework dependency block, are named values passed to the builder rather
than inline branches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .files import FileSet, json_file

PILET_SCHEMA_URL = "https://docs.piral.io/schemas/pilet-v0.json"

BASE_DEV_DEPENDENCIES: tuple[tuple[str, str], ...] = (
    ("@types/node", "latest"),
    ("piral-cli", "latest"),
    ("piral-cli-esbuild", "latest"),
    ("tslib", "latest"),
    ("typescript", "latest"),
)


@dataclass(frozen=True)
class FrameworkDependencies:
    """A UI framework's development dependency set."""

    name: str
    packages: tuple[tuple[str, str], ...]

    def as_dict(self) -> dict[str, str]:
        return dict(self.packages)


REACT_DEPENDENCIES = FrameworkDependencies(
    name="react",
    packages=(
        ("@types/react", "^17"),
        ("@types/react-dom", "^17"),
        ("@types/react-router", "^5"),
        ("@types/react-router-dom", "^5"),
        ("react", "^17"),
        ("react-dom", "^17"),
        ("react-router", "^5"),
        ("react-router-dom", "^5"),
    ),
)


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackageManifest:
    """The pilet's ``package.json``."""

    name: str
    version: str
    app_shell: str
    description: str = ""
    framework: Optional[FrameworkDependencies] = None

    def dev_dependencies(self) -> dict[str, str]:
        deps = dict(BASE_DEV_DEPENDENCIES)
        deps[self.app_shell] = "latest"
        if self.framework is not None:
            deps.update(self.framework.as_dict())
        return deps

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "keywords": ["pilet"],
            "scripts": {
                "start": "pilet debug",
                "build": "pilet build",
                "upgrade": "pilet upgrade",
            },
            "source": "src/index.tsx",
            "main": "dist/index.js",
            "files": ["dist"],
            "dependencies": {},
            "devDependencies": self.dev_dependencies(),
            "importmap": {
                "imports": {},
                "inherit": [self.app_shell],
            },
        }


# ---------------------------------------------------------------------------
# pilet.json
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PiletManifest:
    """The pilet's ``pilet.json``."""

    app_shell: str
    schema_version: str = "v2"
    schema_url: str = PILET_SCHEMA_URL

    def to_dict(self) -> dict[str, Any]:
        return {
            "schemaVersion": self.schema_version,
            "$schema": self.schema_url,
            "piralInstances": {
                self.app_shell: {},
            },
        }


# ---------------------------------------------------------------------------
# tsconfig.json
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CompilerOptions:
    """The pilet's ``tsconfig.json``.

    Declarations, source maps and decorator metadata are always on.
    """

    target: str = "es6"
    module: str = "esnext"
    module_resolution: str = "node"
    jsx: str = "react"
    lib: tuple[str, ...] = ("dom", "es2018")
    out_dir: str = "./dist"
    include: tuple[str, ...] = ("src",)
    exclude: tuple[str, ...] = ("node_modules",)

    def to_dict(self) -> dict[str, Any]:
        return {
            "compilerOptions": {
                "declaration": True,
                "noImplicitAny": False,
                "removeComments": False,
                "noLib": False,
                "emitDecoratorMetadata": True,
                "experimentalDecorators": True,
                "target": self.target,
                "sourceMap": True,
                "outDir": self.out_dir,
                "skipLibCheck": True,
                "lib": list(self.lib),
                "moduleResolution": self.module_resolution,
                "module": self.module,
                "jsx": self.jsx,
                "importHelpers": True,
            },
            "include": list(self.include),
            "exclude": list(self.exclude),
        }


def standard_manifests(
    name: str,
    version: str,
    app_shell: str,
    framework: Optional[FrameworkDependencies] = None,
) -> FileSet:
    """Build ``package.json``, ``pilet.json`` and ``tsconfig.json`` as a file set."""
    return {
        "package.json": json_file(
            PackageManifest(name, version, app_shell, framework=framework).to_dict()
        ),
        "pilet.json": json_file(PiletManifest(app_shell).to_dict()),
        "tsconfig.json": json_file(CompilerOptions().to_dict()),
    }
