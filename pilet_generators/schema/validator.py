"""Input validation derived from step schemas.

Instead of hand-writing one type check per generator, ``SchemaValidator``
walks the generator's ``Step`` list and checks each input value against the
step's ``ValueSpec``. The per-generator freedom that remains (which strings
must be non-blank, whether enum membership and list cardinality are
enforced) is captured in a ``ValidationPolicy``.

Validation never raises for malformed input: it answers ``True`` or
``False``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from .models import (
    BooleanValue,
    EnumValue,
    MultiValue,
    NumberValue,
    Step,
    StringValue,
)


class ValidationPolicy(BaseModel):
    """Per-generator knobs layered on top of the schema-derived type checks."""

    model_config = ConfigDict(frozen=True)

    non_blank: frozenset[str] = frozenset()
    enforce_choices: bool = False
    enforce_cardinality: bool = False


STRICT_POLICY = ValidationPolicy(enforce_choices=True, enforce_cardinality=True)


# ---------------------------------------------------------------------------
# Value checks
# ---------------------------------------------------------------------------


def _check_string(spec: StringValue, value: Any, policy: ValidationPolicy, non_blank: bool) -> bool:
    if not isinstance(value, str):
        return False
    return not non_blank or len(value.strip()) > 0


def _check_number(spec: NumberValue, value: Any, policy: ValidationPolicy, non_blank: bool) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _check_boolean(spec: BooleanValue, value: Any, policy: ValidationPolicy, non_blank: bool) -> bool:
    return isinstance(value, bool)


def _check_enum(spec: EnumValue, value: Any, policy: ValidationPolicy, non_blank: bool) -> bool:
    if not isinstance(value, str):
        return False
    return not policy.enforce_choices or value in spec.choices


def _check_multi(spec: MultiValue, value: Any, policy: ValidationPolicy, non_blank: bool) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    if policy.enforce_cardinality and not spec.minimum <= len(value) <= spec.maximum:
        return False
    return all(check_value(spec.element, item, policy) for item in value)


_CHECKS: dict[str, Callable[[Any, Any, ValidationPolicy, bool], bool]] = {
    "string": _check_string,
    "number": _check_number,
    "boolean": _check_boolean,
    "enum": _check_enum,
    "multi": _check_multi,
}


def check_value(
    spec: Any,
    value: Any,
    policy: ValidationPolicy = STRICT_POLICY,
    non_blank: bool = False,
) -> bool:
    """Return whether *value* conforms to the value spec *spec*.

    Args:
        spec: One of the ``ValueSpec`` variants.
        value: Candidate value from an input mapping.
        policy: Enforcement knobs for enum membership and list cardinality.
        non_blank: Require a string value to contain non-whitespace text.

    Raises:
        TypeError: If *spec* is not a known ``ValueSpec`` variant.
    """
    check = _CHECKS.get(getattr(spec, "type", None))
    if check is None:
        raise TypeError(f"Unsupported value spec: {type(spec).__name__}")
    return check(spec, value, policy, non_blank)


# ---------------------------------------------------------------------------
# Schema validator
# ---------------------------------------------------------------------------


class SchemaValidator:
    """Checks a candidate input mapping against a generator's steps."""

    def __init__(self, steps: tuple[Step, ...], policy: ValidationPolicy | None = None) -> None:
        self.steps = tuple(steps)
        self.policy = policy or ValidationPolicy()

    def __call__(self, data: Any) -> bool:
        return self.validate(data)

    def validate(self, data: Any) -> bool:
        """Return ``True`` when every step has a conforming value in *data*."""
        return not self.failures(data)

    def failures(self, data: Any) -> list[str]:
        """Return the names of the steps whose value is missing or invalid.

        A non-mapping *data* fails every step.
        """
        if not isinstance(data, Mapping):
            return [step.name for step in self.steps]

        failed: list[str] = []
        for step in self.steps:
            if step.name not in data:
                failed.append(step.name)
                continue
            non_blank = step.name in self.policy.non_blank
            if not check_value(step.value, data[step.name], self.policy, non_blank):
                failed.append(step.name)
        return failed


def contract_violations(steps: tuple[Step, ...]) -> list[str]:
    """List every ``<step>.default`` / ``<step>.example`` that breaks its own spec.

    Checks run with enum membership and cardinality enforced. Undeclared
    ``multi`` defaults and examples are skipped.
    """
    violations: list[str] = []
    for step in steps:
        for attr in ("default", "example"):
            value = getattr(step.value, attr)
            if value is None and isinstance(step.value, MultiValue):
                continue
            if isinstance(value, tuple):
                value = list(value)
            if not check_value(step.value, value, STRICT_POLICY):
                violations.append(f"{step.name}.{attr}")
    return violations
