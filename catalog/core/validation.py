"""
Validation rules for product payloads.

Two entry points share the same per-field rules:
- validate_product: create path, every field is mandatory
- validate_product_update: update path, only fields present in the payload are checked

All violations are collected (not just the first) and reported as a single
ValidationError message joined with "; ".
"""
import math
from typing import Any, Callable, List, Mapping, Tuple

from catalog.core.errors import validation_failed

VIOLATION_SEPARATOR = "; "


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_non_negative_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # Huge JSON integers stay exact ints but cannot be rendered as a float price
    try:
        as_float = float(value)
    except OverflowError:
        return False
    return math.isfinite(as_float) and value >= 0


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


# (field, rule, message when required, message when optional)
FIELD_RULES: List[Tuple[str, Callable[[Any], bool], str, str]] = [
    (
        "name",
        _is_non_empty_string,
        "Name is required and must be a non-empty string",
        "Name must be a non-empty string",
    ),
    (
        "description",
        _is_non_empty_string,
        "Description is required and must be a non-empty string",
        "Description must be a non-empty string",
    ),
    (
        "price",
        _is_non_negative_number,
        "Price is required and must be a non-negative number",
        "Price must be a non-negative number",
    ),
    (
        "category",
        _is_non_empty_string,
        "Category is required and must be a non-empty string",
        "Category must be a non-empty string",
    ),
    (
        "inStock",
        _is_boolean,
        "inStock is required and must be a boolean",
        "inStock must be a boolean",
    ),
]

PRODUCT_FIELDS = tuple(rule[0] for rule in FIELD_RULES)


def product_violations(data: Mapping[str, Any]) -> List[str]:
    """Return every violation of the full product schema, in field order."""
    violations = []
    for field_name, rule, required_message, _ in FIELD_RULES:
        if field_name not in data or not rule(data[field_name]):
            violations.append(required_message)
    return violations


def product_update_violations(data: Mapping[str, Any]) -> List[str]:
    """Return violations for the fields present in a partial update."""
    violations = []
    for field_name, rule, _, optional_message in FIELD_RULES:
        # A present null is still checked
        if field_name in data and not rule(data[field_name]):
            violations.append(optional_message)
    return violations


def _raise_if_any(violations: List[str]) -> None:
    if violations:
        raise validation_failed(VIOLATION_SEPARATOR.join(violations))


def validate_product(data: Mapping[str, Any]) -> None:
    """Validate a full product payload. Raises a validation DomainError."""
    _raise_if_any(product_violations(data))


def validate_product_update(data: Mapping[str, Any]) -> None:
    """Validate a partial product payload. Raises a validation DomainError."""
    _raise_if_any(product_update_violations(data))
