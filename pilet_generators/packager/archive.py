"""Tar + gzip packaging of a file set into a single archive buffer.

The packager writes one regular-file tar entry per file-set item into a
streaming tar writer whose output is fed straight into a gzip compressor.
Compressed chunks are collected as they are produced and concatenated once
the stream is finalized.  Entries are written in file-set iteration order
unless ``PackagingConfig.sort_entries`` asks for lexicographic path order.
"""

from __future__ import annotations

import asyncio
import io
import tarfile
import time
import zlib
from collections.abc import AsyncIterator, Mapping
from typing import Any

from pilet_generators.config import PackagingConfig
from pilet_generators.errors import PackagingError

# zlib window bits selecting the gzip container format.
_GZIP_WBITS = 16 + zlib.MAX_WBITS


class _GzipSink:
    """Write-only file object that gzip-compresses everything written to it.

    Compressed output accumulates in ``pending`` until drained.
    """

    def __init__(self, level: int) -> None:
        self._compressor = zlib.compressobj(level, zlib.DEFLATED, _GZIP_WBITS)
        self.pending: list[bytes] = []

    def write(self, data: bytes) -> int:
        chunk = self._compressor.compress(data)
        if chunk:
            self.pending.append(chunk)
        return len(data)

    def flush(self) -> None:
        pass

    def finish(self) -> None:
        self.pending.append(self._compressor.flush(zlib.Z_FINISH))

    def drain(self) -> list[bytes]:
        chunks, self.pending = self.pending, []
        return chunks


def _check_entries(files: Mapping[str, Any], sort_entries: bool) -> list[tuple[str, bytes]]:
    """Validate every entry up front so no partial archive is ever produced."""
    entries: list[tuple[str, bytes]] = []
    for path, content in files.items():
        if not isinstance(path, str) or not path.strip():
            raise PackagingError("entry", "entry path must be a non-empty string", path=repr(path))
        if path.startswith("/") or ".." in path.split("/"):
            raise PackagingError("entry", "entry path must be relative", path=path)
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise PackagingError(
                "entry",
                f"content must be bytes, got {type(content).__name__}",
                path=path,
            )
        entries.append((path, bytes(content)))
    if sort_entries:
        entries.sort(key=lambda entry: entry[0])
    return entries


def _tar_info(path: str, size: int, mtime: int, mode: int) -> tarfile.TarInfo:
    info = tarfile.TarInfo(name=path)
    info.size = size
    info.mtime = mtime
    info.mode = mode
    info.type = tarfile.REGTYPE
    return info


async def iter_package_chunks(
    files: Mapping[str, Any],
    config: PackagingConfig | None = None,
) -> AsyncIterator[bytes]:
    """Yield the gzip-compressed tar stream of *files* chunk by chunk.

    Each entry is written off the event loop; the chunks produced so far are
    yielded after every entry and after the stream is finalized.

    Raises:
        PackagingError: If an entry is not a ``bytes`` buffer or has an
            invalid path (``stage="entry"``), or if the tar writer
            (``stage="tar"``) or the compressor (``stage="gzip"``) fails.
    """
    config = config or PackagingConfig()
    entries = _check_entries(files, config.sort_entries)
    mtime = config.mtime if config.mtime is not None else int(time.time())

    sink = _GzipSink(config.compression_level)
    tar = tarfile.open(fileobj=sink, mode="w|", format=tarfile.PAX_FORMAT)
    for path, content in entries:
        info = _tar_info(path, len(content), mtime, config.file_mode)
        try:
            await asyncio.to_thread(tar.addfile, info, io.BytesIO(content))
        except zlib.error as exc:
            raise PackagingError("gzip", str(exc), path=path) from exc
        except (tarfile.TarError, ValueError, OSError) as exc:
            raise PackagingError("tar", str(exc), path=path) from exc
        for chunk in sink.drain():
            yield chunk

    try:
        await asyncio.to_thread(tar.close)
        sink.finish()
    except zlib.error as exc:
        raise PackagingError("gzip", str(exc)) from exc
    except (tarfile.TarError, OSError) as exc:
        raise PackagingError("tar", str(exc)) from exc
    for chunk in sink.drain():
        yield chunk


async def create_package(
    files: Mapping[str, Any],
    config: PackagingConfig | None = None,
) -> bytes:
    """Package *files* into one gzip-compressed tar buffer.

    Args:
        files: Mapping of relative POSIX path to file content.
        config: Packaging options; defaults to maximum compression and
            insertion-ordered entries.

    Returns:
        The complete archive.  Nothing is returned on failure.

    Raises:
        PackagingError: See :func:`iter_package_chunks`.
    """
    buffers = [chunk async for chunk in iter_package_chunks(files, config)]
    return b"".join(buffers)


def read_package(buffer: bytes) -> dict[str, bytes]:
    """Unpack an archive produced by :func:`create_package`.

    Only regular-file entries are returned, keyed by their path.

    Raises:
        PackagingError: If *buffer* is not a readable gzip-compressed tar.
    """
    files: dict[str, bytes] = {}
    try:
        with tarfile.open(fileobj=io.BytesIO(buffer), mode="r:gz") as tar:
            for member in tar:
                if not member.isfile():
                    continue
                extracted = tar.extractfile(member)
                if extracted is None:
                    continue
                files[member.name] = extracted.read()
    except (tarfile.TarError, zlib.error, EOFError, OSError) as exc:
        raise PackagingError("read", str(exc)) from exc
    return files
