"""Command line front end for the pilet generators.

Usage::

    python -m pilet_generators.cli list
    python -m pilet_generators.cli describe simple-generator
    python -m pilet_generators.cli generate simple-generator --set name=@org/foo -o ./out
    python -m pilet_generators.cli inspect ./out/org-foo-1.0.0.tgz
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape
from rich.table import Table

from pilet_generators.config import Config
from pilet_generators.errors import GeneratorError
from pilet_generators.generators import GeneratorDescriptor, discover_generators, get_generator
from pilet_generators.packager import read_package
from pilet_generators.schema import MultiValue, Step
from pilet_generators.utils import (
    console,
    format_size,
    load_json,
    print_error,
    print_success,
    print_warning,
    print_summary_table,
    save_bytes,
)

_TRUE_WORDS = {"1", "true", "yes", "on", "y"}
_FALSE_WORDS = {"0", "false", "no", "off", "n"}


# ---------------------------------------------------------------------------
# Input assembly
# ---------------------------------------------------------------------------


def coerce_value(spec: Any, raw: str) -> Any:
    """Convert a ``--set`` string to the Python type the value spec expects.

    ``multi`` values are comma-separated; an empty string is an empty list.

    Raises:
        ValueError: If *raw* cannot be read as the expected type.
    """
    kind = spec.type
    if kind in ("string", "enum"):
        return raw
    if kind == "number":
        try:
            return int(raw)
        except ValueError:
            return float(raw)
    if kind == "boolean":
        lowered = raw.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    if kind == "multi":
        items = [item.strip() for item in raw.split(",")] if raw.strip() else []
        return [coerce_value(spec.element, item) for item in items]
    raise ValueError(f"unsupported value type: {kind}")


def build_input(
    generator: GeneratorDescriptor,
    input_file: Optional[Path] = None,
    assignments: Optional[list[str]] = None,
) -> dict[str, Any]:
    """Assemble an input mapping: step defaults, then *input_file*, then ``key=value`` pairs.

    Raises:
        ValueError: On a malformed assignment or an unknown step name.
    """
    data = generator.default_input()
    if input_file is not None:
        data.update(load_json(input_file))

    steps: dict[str, Step] = {step.name: step for step in generator.steps}
    for assignment in assignments or []:
        key, sep, raw = assignment.partition("=")
        if not sep:
            raise ValueError(f"expected key=value, got {assignment!r}")
        key = key.strip()
        if key not in steps:
            raise ValueError(f"unknown step {key!r} for {generator.name}")
        data[key] = coerce_value(steps[key].value, raw)
    return data


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_list(args: argparse.Namespace, config: Config) -> int:
    table = Table(title="Generators", show_header=True, header_style="bold cyan")
    table.add_column("Name", no_wrap=True)
    table.add_column("Version")
    table.add_column("Author")
    table.add_column("Description")
    for generator in discover_generators().values():
        table.add_row(generator.name, generator.version, generator.author, generator.description)
    console.print(table)
    return 0


def _cmd_describe(args: argparse.Namespace, config: Config) -> int:
    generator = get_generator(args.generator)
    if args.json:
        console.print_json(json.dumps(generator.describe()))
        return 0

    print_summary_table(
        {
            "Name": generator.name,
            "Version": generator.version,
            "Author": generator.author,
            "Link": generator.link,
            "Extension": generator.file_extension,
            "Description": generator.description,
        },
        title="Generator",
    )
    table = Table(title="Steps", show_header=True, header_style="bold cyan")
    table.add_column("Step", no_wrap=True)
    table.add_column("Type")
    table.add_column("Default")
    table.add_column("Example")
    table.add_column("Description")
    for step in generator.steps:
        spec = step.value
        kind = spec.type
        if isinstance(spec, MultiValue):
            kind = f"multi<{spec.element.type}> [{spec.minimum}..{spec.maximum}]"
        elif spec.type == "enum":
            kind = f"enum ({', '.join(spec.choices)})"
        wire = step.to_wire()["value"]
        table.add_row(
            step.name,
            kind,
            json.dumps(wire.get("default")),
            json.dumps(wire.get("example")),
            step.description,
        )
    console.print(table)
    return 0


async def _generate(generator: GeneratorDescriptor, data: dict[str, Any], target: Path, config: Config) -> Path:
    archive = await generator.generate(data, config.packaging)
    return await save_bytes(archive, target)


def _cmd_generate(args: argparse.Namespace, config: Config) -> int:
    generator = get_generator(args.generator)
    try:
        data = build_input(generator, args.input, args.set)
    except (ValueError, OSError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    if not generator.validate(data):
        failed = ", ".join(generator.failures(data))
        print_error(f"Invalid input for {generator.name}: {escape(failed)}")
        return 1

    if args.output and args.output.suffix:
        target = args.output
    else:
        target = (args.output or config.output_dir) / generator.archive_name(data)

    if target.exists():
        print_warning(f"Overwriting {escape(str(target))}")

    try:
        path = asyncio.run(_generate(generator, data, target, config))
    except OSError as exc:
        print_error(f"Cannot write {escape(str(target))}: {escape(str(exc))}")
        return 1
    print_success(f"Wrote {escape(str(path))} ({format_size(path.stat().st_size)})")
    return 0


def _cmd_inspect(args: argparse.Namespace, config: Config) -> int:
    try:
        buffer = args.archive.read_bytes()
    except OSError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1
    files = read_package(buffer)
    table = Table(title=str(args.archive), show_header=True, header_style="bold cyan")
    table.add_column("Path", no_wrap=True)
    table.add_column("Size", justify="right")
    for path, content in files.items():
        table.add_row(path, format_size(len(content)))
    console.print(table)
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pilet-generators",
        description="Pilet generators -- scaffold starter pilets as .tgz archives",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  pilet-generators list\n"
            "  pilet-generators describe steps-generator\n"
            "  pilet-generators generate simple-generator --set name=@org/foo --set pages=2\n"
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration JSON file (default: read PILET_* environment variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List the available generators")

    describe = sub.add_parser("describe", help="Show a generator's metadata and steps")
    describe.add_argument("generator", help="Generator name")
    describe.add_argument("--json", action="store_true", help="Print the raw step schema as JSON")

    generate = sub.add_parser("generate", help="Generate a pilet archive")
    generate.add_argument("generator", help="Generator name")
    generate.add_argument("--input", "-i", type=Path, default=None, help="JSON file with input values")
    generate.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override one input value (repeatable; lists are comma-separated)",
    )
    generate.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output archive path or directory (default: configured output dir)",
    )

    inspect = sub.add_parser("inspect", help="List the entries of a generated archive")
    inspect.add_argument("archive", type=Path, help="Archive file")

    return parser


_COMMANDS = {
    "list": _cmd_list,
    "describe": _cmd_describe,
    "generate": _cmd_generate,
    "inspect": _cmd_inspect,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``pilet-generators`` / ``python -m pilet_generators.cli``."""
    args = build_parser().parse_args(argv)
    config = Config.load(args.config) if args.config else Config.from_env()

    try:
        return _COMMANDS[args.command](args, config)
    except GeneratorError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
