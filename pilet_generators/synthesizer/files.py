"""Helpers for building in-memory file sets.

A file set maps a POSIX-style relative path (``src/Page1.tsx``) to the file's
raw bytes. Text is always encoded as UTF-8.
"""

from __future__ import annotations

import json
from typing import Any

FileSet = dict[str, bytes]


def text_file(source: str) -> bytes:
    """Encode *source* as a UTF-8 file body."""
    return source.encode("utf-8")


def json_file(content: Any) -> bytes:
    """Serialise *content* as 2-space indented JSON, keeping key order.

    The output has no trailing newline and leaves non-ASCII characters
    unescaped, matching what npm tooling writes for manifests.
    """
    return text_file(json.dumps(content, indent=2, ensure_ascii=False))


def js_literal(value: Any) -> str:
    """Render *value* as a compact JavaScript/JSON literal.

    Integral floats are written without a fractional part (``2`` rather than
    ``2.0``) so numbers look the same as in JavaScript source.

    Examples::

        js_literal("@org/app") -> '"@org/app"'
        js_literal(["orange", "apple"]) -> '["orange","apple"]'
    """
    return json.dumps(_normalize(value), separators=(",", ":"), ensure_ascii=False)


def _normalize(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    return value
