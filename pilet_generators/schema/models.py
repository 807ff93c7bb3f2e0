"""Pydantic v2 models for generator step schemas.

A generator declares its inputs as an ordered sequence of ``Step`` objects.
Each step carries a ``ValueSpec``: a closed union of value kinds tagged by
``type`` (``string``, ``number``, ``boolean``, ``enum``, ``multi``). The same
models serialise back to the JSON shape consumed by prompt UIs.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)


# ---------------------------------------------------------------------------
# Value specifications
# ---------------------------------------------------------------------------


class _SpecBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class StringValue(_SpecBase):
    """Free-form text input."""

    type: Literal["string"] = "string"
    default: StrictStr
    example: StrictStr


class NumberValue(_SpecBase):
    """Numeric input (integer or float, never boolean)."""

    type: Literal["number"] = "number"
    default: Union[StrictInt, StrictFloat]
    example: Union[StrictInt, StrictFloat]


class BooleanValue(_SpecBase):
    """Yes/no toggle."""

    type: Literal["boolean"] = "boolean"
    default: StrictBool
    example: StrictBool


class EnumValue(_SpecBase):
    """Single choice out of an ordered, non-empty list of strings."""

    type: Literal["enum"] = "enum"
    choices: tuple[StrictStr, ...] = Field(..., min_length=1)
    default: StrictStr
    example: StrictStr

    @model_validator(mode="after")
    def _check_choices(self) -> "EnumValue":
        if self.default not in self.choices:
            raise ValueError(f"default {self.default!r} is not one of {list(self.choices)}")
        if self.example not in self.choices:
            raise ValueError(f"example {self.example!r} is not one of {list(self.choices)}")
        return self


class MultiValue(_SpecBase):
    """A list of values, each described by the nested ``schema`` spec.

    The nested spec is stored as ``element`` and serialised under its wire
    name ``schema``.
    """

    type: Literal["multi"] = "multi"
    element: ValueSpec = Field(..., alias="schema")
    minimum: int = Field(default=0, ge=0)
    maximum: int = Field(..., ge=0)
    default: Optional[tuple[Any, ...]] = None
    example: Optional[tuple[Any, ...]] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "MultiValue":
        if self.maximum < self.minimum:
            raise ValueError(f"maximum ({self.maximum}) is below minimum ({self.minimum})")
        return self


ValueSpec = Annotated[
    Union[StringValue, NumberValue, BooleanValue, EnumValue, MultiValue],
    Field(discriminator="type"),
]

MultiValue.model_rebuild()


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


class Step(BaseModel):
    """One declared input parameter of a generator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Key of the value in the input mapping")
    description: str = Field(default="")
    value: ValueSpec

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready representation used by prompt UIs."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def ensure_unique_names(steps: tuple[Step, ...]) -> tuple[Step, ...]:
    """Raise ``ValueError`` if two steps share the same name."""
    seen: set[str] = set()
    for step in steps:
        if step.name in seen:
            raise ValueError(f"duplicate step name: {step.name!r}")
        seen.add(step.name)
    return steps


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------


def _fallback_list(spec: MultiValue, attr: str) -> list[Any]:
    element_value = getattr(spec.element, attr)
    if isinstance(spec.element, MultiValue):
        element_value = _fallback_list(spec.element, attr)
    return [element_value for _ in range(spec.minimum)]


def _sample(spec: Any, attr: str) -> Any:
    value = getattr(spec, attr)
    if isinstance(spec, MultiValue):
        if value is None:
            return _fallback_list(spec, attr)
        return list(value)
    return value


def default_input(steps: tuple[Step, ...]) -> dict[str, Any]:
    """Build an input mapping from every step's ``default``.

    ``multi`` steps without a declared default yield ``minimum`` copies of
    the element default (an empty list when ``minimum`` is 0).
    """
    return {step.name: _sample(step.value, "default") for step in steps}


def example_input(steps: tuple[Step, ...]) -> dict[str, Any]:
    """Build an input mapping from every step's ``example``."""
    return {step.name: _sample(step.value, "example") for step in steps}
