"""Tests for steps-generator.

Covers:
- One step of every value kind
- Relaxed enum membership
- The echoed setup() source
"""

from __future__ import annotations

import json

import pytest

from pilet_generators.generators import steps as steps_generator
from pilet_generators.schema import (
    BooleanValue,
    EnumValue,
    MultiValue,
    NumberValue,
    StringValue,
    contract_violations,
)

pytestmark = pytest.mark.unit


class TestSchema:
    def test_every_value_kind(self):
        kinds = {type(step.value) for step in steps_generator.steps}
        assert kinds == {StringValue, NumberValue, BooleanValue, EnumValue, MultiValue}

    def test_schema_contract(self):
        assert contract_violations(steps_generator.steps) == []

    def test_fruits_wire_shape(self):
        fruits = steps_generator.descriptor.describe()["steps"][-1]
        assert fruits["value"] == {
            "type": "multi",
            "schema": {"type": "string", "default": "", "example": "banana"},
            "minimum": 0,
            "maximum": 5,
            "default": [],
            "example": ["orange", "apple"],
        }


class TestValidate:
    def test_valid(self, steps_input):
        assert steps_generator.validate(steps_input) is True

    def test_language_membership_not_enforced(self, steps_input):
        steps_input["language"] = "fr"
        assert steps_generator.validate(steps_input) is True

    @pytest.mark.parametrize(
        "key, value",
        [
            ("name", "\t"),
            ("count", None),
            ("notify", 1),
            ("language", 0),
            ("fruits", ["orange", 2]),
            ("fruits", None),
        ],
    )
    def test_single_field_mutation(self, steps_input, key, value):
        steps_input[key] = value
        assert steps_generator.validate(steps_input) is False


class TestSynthesize:
    async def test_file_set(self, steps_input):
        files = await steps_generator.synthesize(steps_input)
        assert list(files) == ["package.json", "pilet.json", "tsconfig.json", "src/index.tsx"]

    async def test_no_framework_dependencies(self, steps_input):
        files = await steps_generator.synthesize(steps_input)
        assert "react" not in json.loads(files["package.json"])["devDependencies"]

    async def test_index_echoes_values(self, steps_input):
        files = await steps_generator.synthesize(steps_input)
        assert files["src/index.tsx"].decode("utf-8") == (
            'import { PiletApi } from "@org/app";\n'
            "\n"
            "  \n"
            "export function setup(api: PiletApi) {\n"
            '  console.log("The chosen count was", 2);\n'
            '  console.log("Your fruits have been", ["orange","apple"]);\n'
            '  console.log("The selected language was", "de");\n'
            '  console.log("You selected notify", true);\n'
            "}\n"
        )

    async def test_integral_float_count(self, steps_input):
        steps_input["count"] = 3.0
        files = await steps_generator.synthesize(steps_input)
        assert '"The chosen count was", 3);' in files["src/index.tsx"].decode("utf-8")
