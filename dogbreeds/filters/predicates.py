from __future__ import annotations

from typing import Sequence

from ..catalog.models import Breed
from ..matching.normalizer import contains_either, normalize
from ..validation import (
    resolve_compatibility_key,
    validate_boolean,
    validate_non_empty_string,
)


def _filter_exact(
    breeds: Sequence[Breed], attribute: str, value: str, label: str
) -> list[Breed]:
    validate_non_empty_string(value, label)
    target = normalize(value)
    results: list[Breed] = []
    for breed in breeds:
        stored = getattr(breed, attribute)
        if isinstance(stored, str) and normalize(stored) == target:
            results.append(breed)
    return results


def filter_by_country(breeds: Sequence[Breed], country: str) -> list[Breed]:
    """Breeds whose origin contains ``country`` or is contained in it."""
    validate_non_empty_string(country, "Country")
    target = normalize(country)
    return [
        breed
        for breed in breeds
        if isinstance(breed.origin, str) and contains_either(normalize(breed.origin), target)
    ]


def filter_by_size(breeds: Sequence[Breed], size: str) -> list[Breed]:
    return _filter_exact(breeds, "size", size, "Size")


def filter_by_energy_level(breeds: Sequence[Breed], level: str) -> list[Breed]:
    return _filter_exact(breeds, "energy_level", level, "Energy level")


def filter_by_trainability(breeds: Sequence[Breed], level: str) -> list[Breed]:
    return _filter_exact(breeds, "trainability", level, "Trainability level")


def filter_by_shedding(breeds: Sequence[Breed], level: str) -> list[Breed]:
    return _filter_exact(breeds, "shedding", level, "Shedding level")


def filter_by_grooming_needs(breeds: Sequence[Breed], level: str) -> list[Breed]:
    return _filter_exact(breeds, "grooming_needs", level, "Grooming needs level")


def filter_by_temperament(breeds: Sequence[Breed], trait: str) -> list[Breed]:
    validate_non_empty_string(trait, "Temperament trait")
    target = normalize(trait)
    return [
        breed
        for breed in breeds
        if any(normalize(t) == target for t in breed.temperament)
    ]


def filter_by_compatibility(breeds: Sequence[Breed], key: str, value: bool) -> list[Breed]:
    """Breeds whose ``key`` compatibility flag is exactly ``value``."""
    attribute = resolve_compatibility_key(key)
    validate_boolean(value, "Compatibility value")
    return [
        breed
        for breed in breeds
        if breed.compatibility is not None
        and getattr(breed.compatibility, attribute) is value
    ]
