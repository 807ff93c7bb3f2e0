"""Pilet generator configuration.

Centralised, typed configuration for packaging and the operator CLI. All
settings use Pydantic v2 models so they can be validated at construction time
and serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
import zlib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class PackagingConfig(BaseModel):
    """Tuning knobs for the tar+gzip archive packager.

    The defaults reproduce the observed archive layout: maximum gzip
    compression, entries in file-set insertion order, and the current time as
    entry modification time. Set ``sort_entries`` and a fixed ``mtime`` when
    byte-identical archives are needed (e.g. for caching by hash).
    """

    compression_level: int = Field(
        default=zlib.Z_BEST_COMPRESSION, ge=1, le=9, description="gzip compression level"
    )
    sort_entries: bool = Field(
        default=False, description="Write tar entries in lexicographic path order"
    )
    mtime: Optional[int] = Field(
        default=None, ge=0, description="Fixed entry mtime (seconds); None means now"
    )
    file_mode: int = Field(default=0o644, ge=0, le=0o7777)


class Config(BaseModel):
    """Global pilet generator configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``GeneratorDescriptor.generate``.
    """

    output_dir: Path = Field(default=Path("./output"))
    default_extension: str = Field(default=".tgz")
    packaging: PackagingConfig = Field(default_factory=PackagingConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PILET_OUTPUT_DIR, PILET_EXTENSION, PILET_COMPRESSION_LEVEL,
            PILET_SORT_ENTRIES, PILET_MTIME.
        """
        packaging_kwargs: dict[str, Any] = {}
        if os.environ.get("PILET_COMPRESSION_LEVEL"):
            packaging_kwargs["compression_level"] = int(os.environ["PILET_COMPRESSION_LEVEL"])
        if os.environ.get("PILET_SORT_ENTRIES"):
            packaging_kwargs["sort_entries"] = os.environ["PILET_SORT_ENTRIES"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )
        if os.environ.get("PILET_MTIME"):
            packaging_kwargs["mtime"] = int(os.environ["PILET_MTIME"])

        return cls(
            output_dir=Path(os.environ.get("PILET_OUTPUT_DIR", "./output")),
            default_extension=os.environ.get("PILET_EXTENSION", ".tgz"),
            packaging=PackagingConfig(**packaging_kwargs),
        )
