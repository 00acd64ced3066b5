"""
Dog breed catalog query engine.

Responsibilities:
- Resolve breed names exactly, by partial match, or by alternate name.
- Filter the catalog by origin, size, temperament, weight and compatibility.
- Typo-tolerant search ranked by containment first, edit distance second.
- Conjunctive recommendation matching and side-by-side breed comparison.
"""
from __future__ import annotations

from .engine import BreedEngine, get_default_engine
from .errors import (
    BreedNotFoundError,
    BreedValidationError,
    CatalogError,
    DogBreedsError,
    NonEmptyStringError,
)

__all__ = [
    "BreedEngine",
    "BreedNotFoundError",
    "BreedValidationError",
    "CatalogError",
    "DogBreedsError",
    "NonEmptyStringError",
    "get_default_engine",
]
