from __future__ import annotations

from typing import Sequence

from ..catalog.models import Breed
from ..errors import BreedNotFoundError
from ..matching.matcher import find_breed
from ..validation import validate_non_empty_string
from .models import BreedComparison, FieldComparison, WeightComparison

# Public field name -> Breed attribute
COMPARED_FIELDS: dict[str, str] = {
    "size": "size",
    "energyLevel": "energy_level",
    "trainability": "trainability",
    "shedding": "shedding",
    "lifespan": "lifespan",
    "groomingNeeds": "grooming_needs",
    "origin": "origin",
}

COMPARED_COMPATIBILITY: dict[str, str] = {
    "children": "children",
    "otherDogs": "other_dogs",
    "cats": "cats",
}


def _resolve(breeds: Sequence[Breed], query: str) -> Breed:
    breed = find_breed(breeds, query, fuzzy=True)
    if breed is None:
        raise BreedNotFoundError(query)
    return breed


def _field(value1: object, value2: object) -> FieldComparison:
    return FieldComparison(breed1=value1, breed2=value2, equal=value1 == value2)


def compare_breeds(breeds: Sequence[Breed], query1: str, query2: str) -> BreedComparison:
    validate_non_empty_string(query1, "Breed 1")
    validate_non_empty_string(query2, "Breed 2")

    breed1 = _resolve(breeds, query1)
    breed2 = _resolve(breeds, query2)

    comparison = {
        public: _field(getattr(breed1, attribute), getattr(breed2, attribute))
        for public, attribute in COMPARED_FIELDS.items()
    }
    compatibility = {
        public: _field(
            getattr(breed1.compatibility, attribute, None),
            getattr(breed2.compatibility, attribute, None),
        )
        for public, attribute in COMPARED_COMPATIBILITY.items()
    }
    return BreedComparison(
        breed1=breed1,
        breed2=breed2,
        comparison=comparison,
        compatibility=compatibility,
        weight=WeightComparison(breed1=breed1.weight, breed2=breed2.weight),
    )
