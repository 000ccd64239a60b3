"""Number Array Validation: decides whether a decoded JSON value is an array of finite numbers.

Invariants:
    - validate_number_array is PURE: returns Accepted | Rejected, never raises, never mutates
    - Fails fast: the first offending element rejects the whole input
    - bool is not a number here, even though bool subclasses int
    - No coercion: numeric strings are rejected
    - Accepted.values is a tuple copy, so the caller's list is never shared

Design Decisions:
    - Tagged result over raise/catch: the handler branches on the result type
    - Rejected carries a NumberArrayError so diagnostics reuse the error hierarchy
"""

import math
from dataclasses import dataclass
from typing import Any, Union

from sort_service.core.decode_body import Missing
from sort_service.core.errors import (
    ElementTypeError,
    MissingBodyError,
    NumberArrayError,
    ShapeError,
)

Number = Union[int, float]


@dataclass(frozen=True)
class Accepted:
    """Validation passed."""
    values: tuple[Number, ...]


@dataclass(frozen=True)
class Rejected:
    """Validation failed: error is for logging only."""
    error: NumberArrayError


ValidationResult = Union[Accepted, Rejected]


def json_type_name(value: Any) -> str:
    """Name of the JSON type a decoded value came from."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def validate_number_array(value: Any) -> ValidationResult:
    """Validate a decoded request body as an array of finite numbers."""
    if isinstance(value, Missing):
        return Rejected(MissingBodyError(value.reason))
    if not isinstance(value, list):
        return Rejected(ShapeError(json_type_name(value)))

    for index, element in enumerate(value):
        if not is_finite_number(element):
            found = json_type_name(element)
            if found == "number":
                found = f"non-finite number ({element})"
            return Rejected(ElementTypeError(index, found))

    return Accepted(tuple(value))
