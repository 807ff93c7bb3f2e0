"""A generator showing how to use Jinja2 for templating.

Every file of the pilet is rendered from the ``templating/`` template tree
shipped with the synthesizer package.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pilet_generators.schema import Step, StringValue, ValidationPolicy
from pilet_generators.synthesizer import FileSet, TemplateRenderer

from .base import GeneratorDescriptor

name = "templating-generator"
version = "0.1.0"
extension = ".tgz"
author = "Manu Temporo"
link = "https://github.com/piral-samples/piral-cloud-sample-generators"
icon = "https://www.piral.cloud/piral-logo.8ae74175.png"
description = "A generator showing how to use Jinja2 for templating."

TEMPLATE_PREFIX = "templating"

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
)

_renderer = TemplateRenderer()


async def synthesize(data: Mapping[str, Any]) -> FileSet:
    """Render the template tree with *data* as context."""
    return await _renderer.render_tree(TEMPLATE_PREFIX, dict(data))


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
    extension=extension,
)

validate = descriptor.validate
generate = descriptor.generate
