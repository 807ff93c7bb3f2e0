"""Tests for the step schema models.

Covers:
- Construction of every ValueSpec variant
- Discriminated parsing from the wire (JSON) shape
- Enum and multi constraint errors
- Immutability
- default_input / example_input helpers
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pilet_generators.schema import (
    BooleanValue,
    EnumValue,
    MultiValue,
    NumberValue,
    Step,
    StringValue,
    default_input,
    ensure_unique_names,
    example_input,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def wire_multi_step() -> dict:
    """A multi step in the JSON shape a prompt UI sends and receives."""
    return {
        "name": "features",
        "description": "Indicates what features should be used.",
        "value": {
            "type": "multi",
            "schema": {
                "type": "enum",
                "choices": ["menu", "notification", "dashboard"],
                "default": "menu",
                "example": "dashboard",
            },
            "minimum": 0,
            "maximum": 3,
        },
    }


# ---------------------------------------------------------------------------
# ValueSpec variants
# ---------------------------------------------------------------------------


class TestValueSpecs:
    def test_string_value(self):
        spec = StringValue(default="sample-pilet", example="@org/foo")
        assert spec.type == "string"
        assert spec.default == "sample-pilet"

    def test_number_accepts_int_and_float(self):
        assert NumberValue(default=1, example=2.5).example == 2.5

    def test_number_rejects_bool(self):
        with pytest.raises(ValidationError):
            NumberValue(default=True, example=1)

    def test_string_rejects_number(self):
        with pytest.raises(ValidationError):
            StringValue(default=1, example="x")

    def test_boolean_value(self):
        spec = BooleanValue(default=True, example=False)
        assert spec.default is True

    def test_enum_default_must_be_a_choice(self):
        with pytest.raises(ValidationError):
            EnumValue(choices=("en", "de"), default="fr", example="de")

    def test_enum_example_must_be_a_choice(self):
        with pytest.raises(ValidationError):
            EnumValue(choices=("en", "de"), default="en", example="fr")

    def test_enum_choices_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            EnumValue(choices=(), default="en", example="en")

    def test_multi_maximum_below_minimum(self):
        with pytest.raises(ValidationError):
            MultiValue(schema=StringValue(default="", example="x"), minimum=3, maximum=1)

    def test_multi_negative_minimum(self):
        with pytest.raises(ValidationError):
            MultiValue(schema=StringValue(default="", example="x"), minimum=-1, maximum=1)

    def test_multi_element_by_alias(self):
        spec = MultiValue(schema=StringValue(default="", example="x"), maximum=2)
        assert isinstance(spec.element, StringValue)
        assert spec.minimum == 0

    def test_specs_are_frozen(self):
        spec = StringValue(default="a", example="b")
        with pytest.raises(ValidationError):
            spec.default = "c"


# ---------------------------------------------------------------------------
# Step parsing and serialisation
# ---------------------------------------------------------------------------


class TestStep:
    def test_parses_wire_shape(self, wire_multi_step):
        step = Step.model_validate(wire_multi_step)
        assert isinstance(step.value, MultiValue)
        assert isinstance(step.value.element, EnumValue)
        assert step.value.element.choices == ("menu", "notification", "dashboard")

    def test_to_wire_round_trips(self, wire_multi_step):
        step = Step.model_validate(wire_multi_step)
        assert step.to_wire() == wire_multi_step

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Step.model_validate({"name": "x", "value": {"type": "date", "default": "", "example": ""}})

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Step(name="", value=StringValue(default="a", example="b"))

    def test_nested_multi(self):
        step = Step.model_validate(
            {
                "name": "matrix",
                "value": {
                    "type": "multi",
                    "schema": {
                        "type": "multi",
                        "schema": {"type": "number", "default": 0, "example": 1},
                        "maximum": 2,
                    },
                    "maximum": 2,
                },
            }
        )
        assert isinstance(step.value.element, MultiValue)
        assert isinstance(step.value.element.element, NumberValue)

    def test_unique_names(self):
        a = Step(name="a", value=StringValue(default="", example=""))
        with pytest.raises(ValueError, match="duplicate"):
            ensure_unique_names((a, a))


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------


class TestInputHelpers:
    @pytest.fixture
    def steps(self) -> tuple[Step, ...]:
        return (
            Step(name="name", value=StringValue(default="sample-pilet", example="@org/foo")),
            Step(name="pages", value=NumberValue(default=1, example=15)),
            Step(
                name="fruits",
                value=MultiValue(
                    schema=StringValue(default="", example="banana"),
                    default=(),
                    example=("orange", "apple"),
                    maximum=5,
                ),
            ),
            Step(
                name="features",
                value=MultiValue(
                    schema=EnumValue(choices=("menu", "dashboard"), default="menu", example="dashboard"),
                    maximum=3,
                ),
            ),
        )

    def test_default_input(self, steps):
        assert default_input(steps) == {
            "name": "sample-pilet",
            "pages": 1,
            "fruits": [],
            "features": [],
        }

    def test_example_input(self, steps):
        assert example_input(steps) == {
            "name": "@org/foo",
            "pages": 15,
            "fruits": ["orange", "apple"],
            "features": [],
        }

    def test_multi_without_default_fills_minimum(self):
        step = Step(
            name="tags",
            value=MultiValue(schema=StringValue(default="tag", example="x"), minimum=2, maximum=3),
        )
        assert default_input((step,)) == {"tags": ["tag", "tag"]}
