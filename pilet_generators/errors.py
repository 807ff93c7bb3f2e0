"""Exceptions raised while synthesizing or packaging a pilet.

Validation never raises; it only answers ``True`` or ``False``. Everything
that goes wrong after validation surfaces as a ``GeneratorError`` subclass so
callers can tell a failed ``generate`` apart from a successful one by type.
"""

from __future__ import annotations

from typing import Optional


class GeneratorError(Exception):
    """Base class for every failure raised by a generator."""


class SynthesisError(GeneratorError):
    """Raised when a file of the file set cannot be produced."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot synthesize {path}: {message}")


class PackagingError(GeneratorError):
    """Raised when the tar or gzip stage of the packager fails."""

    def __init__(self, stage: str, message: str, path: Optional[str] = None) -> None:
        self.stage = stage
        self.path = path
        where = f" ({path})" if path else ""
        super().__init__(f"Packaging failed at {stage} stage{where}: {message}")


class UnknownGeneratorError(GeneratorError, KeyError):
    """Raised when a generator name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown generator: {name}")

    def __str__(self) -> str:
        return str(self.args[0])
