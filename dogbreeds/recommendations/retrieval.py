from __future__ import annotations

import logging
from typing import Any, Sequence

from pydantic import ValidationError

from ..catalog.lifespan import parse_lifespan_average
from ..catalog.models import Breed
from ..errors import BreedValidationError
from ..filters.weight import overlaps
from .models import CompatibilityCriteria, RecommendationCriteria, WeightRangeCriteria

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = ("size", "energy_level", "trainability", "shedding", "grooming_needs", "origin")
_COMPATIBILITY_FIELDS = ("children", "other_dogs", "cats")


def _coerce_criteria(
    criteria: RecommendationCriteria | dict[str, Any] | None,
) -> RecommendationCriteria:
    if criteria is None:
        return RecommendationCriteria()
    if isinstance(criteria, RecommendationCriteria):
        return criteria
    if not isinstance(criteria, dict):
        raise TypeError("Preferences must be an object")
    try:
        return RecommendationCriteria.model_validate(criteria)
    except ValidationError as exc:
        # string_type, bool_type, model_type, number_type, ...
        if all(error["type"].endswith("_type") for error in exc.errors()):
            raise TypeError(f"Invalid preference types: {exc}") from exc
        raise BreedValidationError(f"Invalid preferences: {exc}") from exc


def _matches_compatibility(breed: Breed, wanted: CompatibilityCriteria) -> bool:
    constraints = {
        key: getattr(wanted, key)
        for key in _COMPATIBILITY_FIELDS
        if getattr(wanted, key) is not None
    }
    if not constraints:
        return True
    if breed.compatibility is None:
        return False
    return all(getattr(breed.compatibility, key) is value for key, value in constraints.items())


def _matches_weight(breed: Breed, wanted: WeightRangeCriteria) -> bool:
    # No auto-sorting here: the caller supplies min <= max
    if breed.weight is None:
        return False
    stored = breed.weight.for_unit(wanted.unit)
    return stored is not None and overlaps(stored, wanted.min, wanted.max)


def _matches_lifespan(breed: Breed, min_lifespan: float) -> bool:
    average = parse_lifespan_average(breed.lifespan)
    if average is None:
        logger.debug("Excluding %s: unparsable lifespan %r", breed.name, breed.lifespan)
        return False
    return average >= min_lifespan


def _matches(breed: Breed, criteria: RecommendationCriteria) -> bool:
    for field in _SCALAR_FIELDS:
        wanted = getattr(criteria, field)
        if wanted and getattr(breed, field) != wanted:
            return False
    if criteria.compatibility is not None and not _matches_compatibility(breed, criteria.compatibility):
        return False
    if criteria.weight_range is not None and not _matches_weight(breed, criteria.weight_range):
        return False
    if criteria.min_lifespan is not None and criteria.min_lifespan > 0:
        if not _matches_lifespan(breed, criteria.min_lifespan):
            return False
    return True


def get_recommendations(
    breeds: Sequence[Breed],
    criteria: RecommendationCriteria | dict[str, Any] | None = None,
) -> list[Breed]:
    """
    Breeds satisfying every supplied preference, in catalog order.

    Scalar preferences compare against the stored value verbatim, so callers
    pass the catalog's own vocabulary ("small", "high", ...). Weight ranges
    use the exact unit keys ``"lbs"`` or ``"kgs"``.
    """
    resolved = _coerce_criteria(criteria)
    results = [breed for breed in breeds if _matches(breed, resolved)]
    logger.debug("Recommendation matched %d of %d breeds", len(results), len(breeds))
    return results
