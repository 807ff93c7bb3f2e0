"""File synthesis -- builds the in-memory file set of a pilet.

Two strategies are supported: direct construction (``text_file``,
``json_file`` and the manifest builders) and Jinja2 template rendering
(``TemplateRenderer``).
"""

from pilet_generators.synthesizer.files import FileSet, js_literal, json_file, text_file
from pilet_generators.synthesizer.manifests import (
    REACT_DEPENDENCIES,
    CompilerOptions,
    FrameworkDependencies,
    PackageManifest,
    PiletManifest,
    standard_manifests,
)
from pilet_generators.synthesizer.templates import TemplateRenderer

__all__ = [
    "CompilerOptions",
    "FileSet",
    "FrameworkDependencies",
    "PackageManifest",
    "PiletManifest",
    "REACT_DEPENDENCIES",
    "TemplateRenderer",
    "js_literal",
    "json_file",
    "standard_manifests",
    "text_file",
]
