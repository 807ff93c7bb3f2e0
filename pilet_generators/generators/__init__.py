"""Built-in pilet generators and their discovery.

Every module in this package that exposes a module-level ``descriptor``
(a :class:`GeneratorDescriptor`) is a generator.  ``discover_generators``
imports them all and keys them by generator name.

Quick usage::

    from pilet_generators.generators import get_generator

    generator = get_generator("simple-generator")
    data = generator.example_input()
    if generator.validate(data):
        archive = await generator.generate(data)
"""

from __future__ import annotations

import importlib
import pkgutil

from pilet_generators.errors import UnknownGeneratorError
from pilet_generators.generators.base import DEFAULT_EXTENSION, GeneratorDescriptor

__all__ = [
    "DEFAULT_EXTENSION",
    "GeneratorDescriptor",
    "discover_generators",
    "get_generator",
]


def discover_generators() -> dict[str, GeneratorDescriptor]:
    """Import every generator module of this package, ordered by module name."""
    found: dict[str, GeneratorDescriptor] = {}
    for info in sorted(pkgutil.iter_modules(__path__), key=lambda m: m.name):
        if info.name.startswith("_") or info.name == "base":
            continue
        module = importlib.import_module(f"{__name__}.{info.name}")
        descriptor = getattr(module, "descriptor", None)
        if isinstance(descriptor, GeneratorDescriptor):
            found[descriptor.name] = descriptor
    return found


def get_generator(name: str) -> GeneratorDescriptor:
    """Look up a generator by its descriptor name.

    Raises:
        UnknownGeneratorError: If no generator with that name exists.
    """
    generators = discover_generators()
    if name not in generators:
        raise UnknownGeneratorError(name)
    return generators[name]
