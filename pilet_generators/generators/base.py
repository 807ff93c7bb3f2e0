"""The generator descriptor -- the uniform public unit of composition.

A descriptor bundles a generator's metadata, its step schema, the
validation policy applied on top of the schema, and the coroutine that
synthesizes the file set.  ``generate`` synthesizes the files and hands them
to the shared archive packager.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from pilet_generators.config import PackagingConfig
from pilet_generators.packager import create_package
from pilet_generators.schema import (
    SchemaValidator,
    Step,
    ValidationPolicy,
    default_input,
    ensure_unique_names,
    example_input,
)
from pilet_generators.synthesizer import FileSet
from pilet_generators.utils import sanitize_name

DEFAULT_EXTENSION = ".tgz"

Synthesizer = Callable[[Mapping[str, Any]], Awaitable[FileSet]]


@dataclass(frozen=True)
class GeneratorDescriptor:
    """Metadata, schema and behaviour of one pilet generator.

    Descriptors are built once at import time and never mutated.  Both
    ``validate`` and ``generate`` depend only on their argument, so a
    descriptor can serve any number of concurrent calls.
    """

    name: str
    version: str
    author: str
    link: str
    icon: str
    description: str
    steps: tuple[Step, ...]
    synthesize: Synthesizer = field(repr=False, compare=False)
    policy: ValidationPolicy = field(default_factory=ValidationPolicy)
    extension: Optional[str] = None
    _validator: SchemaValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", ensure_unique_names(tuple(self.steps)))
        object.__setattr__(self, "_validator", SchemaValidator(self.steps, self.policy))

    # -- Metadata ----------------------------------------------------------

    @property
    def file_extension(self) -> str:
        """The declared archive extension, ``.tgz`` when none is declared."""
        return self.extension or DEFAULT_EXTENSION

    def archive_name(self, data: Mapping[str, Any]) -> str:
        """Suggest a file name for the archive generated from *data*."""
        stem = sanitize_name(str(data.get("name") or "")) or sanitize_name(self.name)
        version = str(data.get("version") or "").strip()
        if version:
            stem = f"{stem}-{sanitize_name(version)}"
        return f"{stem}{self.file_extension}"

    def describe(self) -> dict[str, Any]:
        """Return the JSON-ready metadata and steps consumed by prompt UIs."""
        info: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "author": self.author,
            "link": self.link,
            "icon": self.icon,
            "description": self.description,
            "steps": [step.to_wire() for step in self.steps],
        }
        if self.extension is not None:
            info["extension"] = self.extension
        return info

    def default_input(self) -> dict[str, Any]:
        return default_input(self.steps)

    def example_input(self) -> dict[str, Any]:
        return example_input(self.steps)

    # -- Behaviour ---------------------------------------------------------

    def validate(self, data: Any) -> bool:
        """Return whether *data* is an acceptable input.  Never raises."""
        return self._validator.validate(data)

    def failures(self, data: Any) -> list[str]:
        """Return the names of the steps whose value in *data* is not acceptable."""
        return self._validator.failures(data)

    async def generate(
        self,
        data: Mapping[str, Any],
        config: PackagingConfig | None = None,
    ) -> bytes:
        """Synthesize the file set for *data* and package it as an archive.

        Callers are expected to have checked *data* with :meth:`validate`.

        Raises:
            SynthesisError: If a file cannot be produced.
            PackagingError: If the tar or gzip stage fails.
        """
        files = await self.synthesize(data)
        return await create_package(files, config)
