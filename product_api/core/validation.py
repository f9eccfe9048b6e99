"""Field Rule Chains — ordered, eagerly evaluated request validation.

Invariants:
    - A chain is a static tuple of FieldRule; order of rules == order of errors
    - Every rule runs, even after an earlier rule on the same field failed
    - Values are judged in their string form: absent/None -> "", bools -> "true"/"false"
    - check_rules() is pure: no IO, never raises for bad input (huge numbers included)

Design Decisions:
    - Plain tuples of (location, field, check, message) instead of fluent builders:
      the whole rule set for a route is readable in one place
    - Three independent price rules: a missing price reports not-numeric,
      empty and not-positive together; callers rely on that count
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Literal

Location = Literal["params", "body"]

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


def as_string(value: Any) -> str:
    """String form used by every check."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_number(value: Any) -> float:
    """Loose numeric coercion; NaN when the value is not a number."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if value is None:
        return math.nan
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


# ─── Checks ─────────────────────────────────────────────────────

def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(as_string(value)))


def not_empty(value: Any) -> bool:
    return as_string(value) != ""


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.match(as_string(value)))


def is_positive(value: Any) -> bool:
    # NaN compares False, so non-numbers fail here too; infinity is not a price
    number = as_number(value)
    return number > 0 and math.isfinite(number)


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, str)):
        return as_string(value) in _BOOLEAN_STRINGS
    return False


def to_boolean(value: Any) -> bool:
    """Convert a value that passed is_boolean()."""
    if isinstance(value, bool):
        return value
    return as_string(value) in ("true", "1")


@dataclass(frozen=True)
class FieldRule:
    """One check on one field; fails with one message."""
    location: Location
    field: str
    check: Callable[[Any], bool]
    message: str


def check_rules(
    rules: tuple[FieldRule, ...],
    params: dict[str, Any],
    body: dict[str, Any],
) -> list[dict[str, Any]]:
    """Run every rule and collect one error entry per failure."""
    sources = {"params": params, "body": body}
    errors = []
    for rule in rules:
        value = sources[rule.location].get(rule.field)
        if rule.check(value):
            continue
        errors.append({
            "type": "field",
            "value": value,
            "msg": rule.message,
            "path": rule.field,
            "location": rule.location,
        })
    return errors


# ─── Route chains ───────────────────────────────────────────────

ID_RULES: tuple[FieldRule, ...] = (
    FieldRule("params", "id", is_int, "invalid ID"),
)

PRODUCT_CREATE_RULES: tuple[FieldRule, ...] = (
    FieldRule("body", "name", not_empty, "Product name cannot be empty"),
    FieldRule("body", "price", is_numeric, "Invalid value"),
    FieldRule("body", "price", not_empty, "Product price cannot be empty"),
    FieldRule("body", "price", is_positive, "Invalid price"),
)

PRODUCT_UPDATE_RULES: tuple[FieldRule, ...] = (
    *ID_RULES,
    *PRODUCT_CREATE_RULES,
    FieldRule("body", "availability", is_boolean, "Invalid availability value"),
)
