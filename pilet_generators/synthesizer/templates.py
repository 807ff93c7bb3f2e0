"""Jinja2 template rendering for file synthesis.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``pilet_generators/synthesizer/templates/`` directory and renders them with
a generator's input mapping.  Supports single-template rendering, rendering
of a whole template tree into a file set, and string-based rendering for
inline template content.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    Undefined,
    select_autoescape,
)

from pilet_generators.errors import SynthesisError

from .files import FileSet, text_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
_TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates into pilet source files.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined variables are errors, so a template that
    references an input the generator does not declare fails loudly instead
    of producing an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Plain JSON literals; Jinja's own tojson escapes for HTML.
        self.env.filters["tojson"] = _tojson_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: Mapping[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"templating/package.json.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- File set rendering (async) ----------------------------------------

    async def render_file(
        self,
        template_path: str,
        context: Mapping[str, Any],
        *,
        output_path: str | None = None,
    ) -> bytes:
        """Render a template into a UTF-8 file body.

        Raises:
            SynthesisError: If the template is missing, malformed, or refers
                to an undefined variable.
        """
        try:
            source = self.render(template_path, context)
        except TemplateError as exc:
            raise SynthesisError(output_path or template_path, str(exc)) from exc
        return text_file(source)

    async def render_tree(
        self,
        template_prefix: str,
        context: Mapping[str, Any],
        *,
        skip_patterns: list[str] | None = None,
    ) -> FileSet:
        """Render every ``*.j2`` file under *template_prefix* into a file set.

        The directory structure is preserved: a template at
        ``templating/src/index.tsx.j2`` rendered with
        ``template_prefix="templating"`` becomes the ``src/index.tsx`` entry.

        Args:
            template_prefix: Subdirectory inside the template root to scan.
            context: Template context variables.
            skip_patterns: Optional list of path substrings to skip.

        Returns:
            Mapping of relative output path to rendered bytes.
        """
        skip_patterns = skip_patterns or []
        files: FileSet = {}

        for template_key in self.list_templates(template_prefix):
            rel = template_key[len(template_prefix) + 1 :]
            if any(pat in rel for pat in skip_patterns):
                continue
            output_path = rel[: -len(_TEMPLATE_SUFFIX)]
            files[output_path] = await self.render_file(
                template_key, context, output_path=output_path
            )

        return files

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and use forward
        slashes.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob(f"*{_TEMPLATE_SUFFIX}")
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _tojson_filter(value: Any) -> str:
    """Render a value as a JSON literal."""
    if isinstance(value, Undefined):
        value._fail_with_undefined_error()
    return json.dumps(value, ensure_ascii=False)
