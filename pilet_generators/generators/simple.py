"""A simple generator to get started.

Produces the standard manifests plus a ``src/index.tsx`` that registers a
configurable number of sample pages.  With ``useReact`` the pages are lazily
loaded React components and React is added to the development dependencies;
without it the pages fall back to plain HTML components.  Each selected
feature adds one more registration to ``setup``.
"""

from __future__ import annotations

import math
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
from pilet_generators.synthesizer import (
    REACT_DEPENDENCIES,
    FileSet,
    js_literal,
    standard_manifests,
    text_file,
)

from .base import GeneratorDescriptor

name = "simple-generator"
version = "1.0.0"
author = "Florian Rappl"
link = "https://www.piral.cloud"
icon = "https://www.piral.cloud/piral-logo.8ae74175.png"
description = "A simple generator to get started."

FEATURES: tuple[str, ...] = ("menu", "notification", "dashboard")

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
        name="pages",
        description="The number of sample pages to include in the pilet.",
        value=NumberValue(default=1, example=15),
    ),
    Step(
        name="useReact",
        description="Indicates if React should be used. If not the pilet will fall back to HTML.",
        value=BooleanValue(default=True, example=False),
    ),
    Step(
        name="features",
        description="Indicates what features should be used.",
        value=MultiValue(
            schema=EnumValue(choices=FEATURES, default="menu", example="dashboard"),
            minimum=0,
            maximum=3,
        ),
    ),
)

_LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum."
)


# ---------------------------------------------------------------------------
# Source builders
# ---------------------------------------------------------------------------


def page_count(pages: Any) -> int:
    """Number of whole pages requested; negative counts mean none."""
    return max(0, math.floor(pages))


def _react_page(index: int) -> str:
    return f"""import * as React from 'react';

export default function() {{
  return (
    <>
      <h1>Page {index} Title</h1>
      <p>{_LOREM}</p>
    </>
  );
}}"""


def _html_component(body: str) -> str:
    return (
        "{\n"
        "  type: 'html' as const,\n"
        "  component: {\n"
        "    mount(element: HTMLElement) {\n"
        f"      {body}\n"
        "    },\n"
        "  },\n"
        "}"
    )


def _html_page(index: int) -> str:
    markup = f"<h1>Page {index} Title</h1><p>{_LOREM}</p>"
    body = f"element.innerHTML = {js_literal(markup)};"
    return f"export default {_html_component(body)};\n"


def _feature_code(features: list[str], pilet_name: str, pages: int, use_react: bool) -> list[str]:
    target = "/page1" if pages > 0 else "/"
    code: list[str] = []

    for feature in dict.fromkeys(features):
        if feature == "menu":
            if use_react:
                code.append(f"api.registerMenu(() => <a href={js_literal(target)}>{{{js_literal(pilet_name)}}}</a>);")
            else:
                body = (
                    "const link = element.appendChild(document.createElement('a')); "
                    f"link.href = {js_literal(target)}; "
                    f"link.textContent = {js_literal(pilet_name)};"
                )
                code.append(f"api.registerMenu({_html_component(body)});".replace("\n", "\n  "))
        elif feature == "notification":
            greeting = js_literal(f"Hello from {pilet_name}!")
            code.append(f"api.showNotification({greeting}, {{ autoClose: 2000 }});")
        elif feature == "dashboard":
            if use_react:
                code.append(
                    f"api.registerTile(() => <div>{{{js_literal(pilet_name)}}}</div>, "
                    "{ initialColumns: 2, initialRows: 2 });"
                )
            else:
                body = f"element.textContent = {js_literal(pilet_name)};"
                code.append(
                    f"api.registerTile({_html_component(body)}, "
                    "{ initialColumns: 2, initialRows: 2 });".replace("\n", "\n  ")
                )

    return code


def _index_source(app_shell: str, import_code: list[str], setup_code: list[str]) -> str:
    lines = [
        f"import {{ PiletApi }} from {js_literal(app_shell)};",
        "\n".join(import_code),
        "  ",
        "export function setup(api: PiletApi) {",
        "  " + "\n  ".join(setup_code),
        "}",
        "",
    ]
    return "\n".join(lines)


async def synthesize(data: Mapping[str, Any]) -> FileSet:
    """Build the file set for a validated *data* mapping."""
    app_shell = data["appShell"]
    use_react = data["useReact"]
    pages = page_count(data["pages"])
    import_code: list[str] = []
    setup_code: list[str] = []

    files = standard_manifests(
        name=data["name"],
        version=data["version"],
        app_shell=app_shell,
        framework=REACT_DEPENDENCIES if use_react else None,
    )

    if use_react:
        import_code.append('import * as React from "react"')

    for i in range(1, pages + 1):
        if use_react:
            files[f"src/Page{i}.tsx"] = text_file(_react_page(i))
            import_code.append(f'const Page{i} = React.lazy(() => import("./Page{i}"))')
        else:
            files[f"src/Page{i}.tsx"] = text_file(_html_page(i))
            import_code.append(f'import Page{i} from "./Page{i}"')
        setup_code.append(f"api.registerPage('/page{i}', Page{i});")

    setup_code.extend(_feature_code(list(data["features"]), data["name"], pages, use_react))

    files["src/index.tsx"] = text_file(_index_source(app_shell, import_code, setup_code))
    return files


descriptor = GeneratorDescriptor(
    name=name,
    version=version,
    author=author,
    link=link,
    icon=icon,
    description=description,
    steps=steps,
    synthesize=synthesize,
    policy=ValidationPolicy(
        non_blank=frozenset({"name", "version", "appShell"}),
        enforce_choices=True,
    ),
)

validate = descriptor.validate
generate = descriptor.generate
