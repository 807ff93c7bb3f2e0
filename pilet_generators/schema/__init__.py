"""Step schemas and the validator derived from them.

Quick usage::

    from pilet_generators.schema import Step, StringValue, SchemaValidator

    steps = (Step(name="name", value=StringValue(default="a", example="b")),)
    validator = SchemaValidator(steps)
    validator({"name": "my-pilet"})  # True
"""

from pilet_generators.schema.models import (
    BooleanValue,
    EnumValue,
    MultiValue,
    NumberValue,
    Step,
    StringValue,
    ValueSpec,
    default_input,
    ensure_unique_names,
    example_input,
)
from pilet_generators.schema.validator import (
    STRICT_POLICY,
    SchemaValidator,
    ValidationPolicy,
    check_value,
    contract_violations,
)

__all__ = [
    "BooleanValue",
    "EnumValue",
    "MultiValue",
    "NumberValue",
    "STRICT_POLICY",
    "SchemaValidator",
    "Step",
    "StringValue",
    "ValidationPolicy",
    "ValueSpec",
    "check_value",
    "contract_violations",
    "default_input",
    "ensure_unique_names",
    "example_input",
]
