from __future__ import annotations

from typing import Any


def normalize(value: Any) -> str:
    """Trimmed, lower-cased form used for every text comparison."""
    if not isinstance(value, str):
        raise TypeError("Value to normalize must be a string")
    return value.strip().lower()


def contains_either(a: str, b: str) -> bool:
    """Bidirectional containment of two already-normalized strings."""
    return a in b or b in a
