"""A generator showing the different step values.

Declares one step of every value kind and echoes the chosen values from the
generated ``setup`` function.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pilet_generators.schema import (
    BooleanValue,
    EnumValue,
    MultiValue,
    NumberValue,
    Step,
    StringValue,
    ValidationPolicy,
)
from pilet_generators.synthesizer import FileSet, js_literal, standard_manifests, text_file

from .base import GeneratorDescriptor

name = "steps-generator"
version = "0.1.0"
author = "Jose Stepo"
link = "https://github.com/piral-samples/piral-cloud-sample-generators"
icon = "https://www.piral.cloud/piral-logo.8ae74175.png"
description = "A generator showing the different step values."

steps: tuple[Step, ...] = (
    Step(
        name="name",
        description="The name of the pilet.",
        value=StringValue(default="sample-pilet", example="@org/foo"),
    ),
    Step(
        name="version",
        description="The version of the pilet.",
        value=StringValue(default="1.0.0", example="1.2.3"),
    ),
    Step(
        name="appShell",
        description="The name of the (primary / main) app shell.",
        value=StringValue(default="sample-piral", example="@org/app"),
    ),
    Step(
        name="count",
        description="A number input.",
        value=NumberValue(default=0, example=2),
    ),
    Step(
        name="notify",
        description="A boolean input.",
        value=BooleanValue(default=False, example=True),
    ),
    Step(
        name="language",
        description="An enum input.",
        value=EnumValue(choices=("en", "de"), default="en", example="de"),
    ),
    Step(
        name="fruits",
        description="A multi input.",
        value=MultiValue(
            schema=StringValue(default="", example="banana"),
            default=(),
            example=("orange", "apple"),
            minimum=0,
            maximum=5,
        ),
    ),
)


def _index_source(data: Mapping[str, Any]) -> str:
    return "\n".join(
        [
            f"import {{ PiletApi }} from {js_literal(data['appShell'])};",
            "",
            "  ",
            "export function setup(api: PiletApi) {",
            f'  console.log("The chosen count was", {js_literal(data["count"])});',
            f'  console.log("Your fruits have been", {js_literal(list(data["fruits"]))});',
            f'  console.log("The selected language was", {js_literal(data["language"])});',
            f'  console.log("You selected notify", {js_literal(data["notify"])});',
            "}",
            "",
        ]
    )


async def synthesize(data: Mapping[str, Any]) -> FileSet:
    """Build the file set for a validated *data* mapping."""
    files = standard_manifests(
        name=data["name"],
        version=data["version"],
        app_shell=data["appShell"],
    )
    files["src/index.tsx"] = text_file(_index_source(data))
    return files


# Language membership is not enforced.
descriptor = GeneratorDescriptor(
    name=name,
    version=version,
    author=author,
    link=link,
    icon=icon,
    description=description,
    steps=steps,
    synthesize=synthesize,
    policy=ValidationPolicy(non_blank=frozenset({"name", "version", "appShell"})),
)

validate = descriptor.validate
generate = descriptor.generate
