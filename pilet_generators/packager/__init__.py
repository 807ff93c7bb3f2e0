"""Archive packaging shared by every generator."""

from pilet_generators.packager.archive import create_package, iter_package_chunks, read_package

__all__ = [
    "create_package",
    "iter_package_chunks",
    "read_package",
]
