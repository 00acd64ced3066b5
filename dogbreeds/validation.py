"""
Argument validators shared by every query operation.

Each validator raises on bad input and returns nothing (or the resolved
value for the lookup-style helpers), so callers can validate everything
before touching the catalog.
"""
from __future__ import annotations

from typing import Any

from .errors import BreedValidationError, NonEmptyStringError

UNIT_ALIASES: dict[str, frozenset[str]] = {
    "kgs": frozenset({"kg", "kgs", "kilogram", "kilograms", "kilo", "kilos"}),
    "lbs": frozenset({"lb", "lbs", "pound", "pounds"}),
}

# Public compatibility key -> Compatibility attribute
COMPATIBILITY_KEYS: dict[str, str] = {
    "children": "children",
    "otherDogs": "other_dogs",
    "other_dogs": "other_dogs",
    "cats": "cats",
}


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_non_empty_string(value: Any, field_name: str) -> None:
    if not isinstance(value, str) or value.strip() == "":
        raise NonEmptyStringError(field_name)


def validate_string(value: Any, field_name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string")


def validate_number(value: Any, field_name: str) -> None:
    if not is_number(value):
        raise TypeError(f"{field_name} must be a number")


def validate_non_negative_number(value: Any, field_name: str) -> None:
    validate_number(value, field_name)
    if value < 0:
        raise TypeError(f"{field_name} must be a non-negative number")


def validate_boolean(value: Any, field_name: str) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"{field_name} must be a boolean")


def validate_number_range(min_value: Any, max_value: Any) -> None:
    validate_number(min_value, "Min weight")
    validate_number(max_value, "Max weight")


def resolve_unit(unit: Any = "lbs") -> str:
    """Map a weight unit alias onto the canonical ``"lbs"`` or ``"kgs"`` key."""
    validate_string(unit, "Unit")
    normalized = unit.strip().lower()
    for canonical, aliases in UNIT_ALIASES.items():
        if normalized in aliases:
            return canonical
    raise BreedValidationError(
        'Unit must be "lbs"/"lb"/"pounds"/"pound" or "kgs"/"kg"/"kilograms"/"kilos"'
    )


def resolve_compatibility_key(key: Any) -> str:
    """Return the Compatibility attribute name for a public compatibility key."""
    if not isinstance(key, str) or key not in COMPATIBILITY_KEYS:
        raise BreedValidationError("Compatibility key must be one of: children, otherDogs, cats")
    return COMPATIBILITY_KEYS[key]
