from __future__ import annotations

import logging
from typing import Sequence

from ..catalog.models import Breed
from ..matching.distance import levenshtein_distance
from ..matching.normalizer import contains_either, normalize
from ..validation import validate_non_empty_string, validate_non_negative_number
from .models import MatchKind, SearchHit

logger = logging.getLogger(__name__)


def rank_breeds(
    breeds: Sequence[Breed], term: str, max_distance: float = 2
) -> list[SearchHit]:
    """
    Rank breeds by how well their name matches ``term``.

    Containment matches come first, in catalog order. Remaining breeds within
    ``max_distance`` edits follow, closest first; equal distances keep catalog
    order. Only ``Breed.name`` is searched, never alternate names.
    """
    validate_non_empty_string(term, "Search term")
    validate_non_negative_number(max_distance, "maxDistance")
    target = normalize(term)

    substring_hits: list[SearchHit] = []
    fuzzy_hits: list[SearchHit] = []
    for breed in breeds:
        name = normalize(breed.name)
        if contains_either(name, target):
            substring_hits.append(SearchHit(breed=breed, kind=MatchKind.substring))
            continue
        # Edit distance is at least the length difference
        if abs(len(name) - len(target)) > max_distance:
            continue
        distance = levenshtein_distance(target, name)
        if distance <= max_distance:
            fuzzy_hits.append(SearchHit(breed=breed, kind=MatchKind.fuzzy, distance=distance))

    fuzzy_hits.sort(key=lambda hit: hit.distance)
    logger.debug(
        "Search %r: %d substring, %d fuzzy matches",
        term,
        len(substring_hits),
        len(fuzzy_hits),
    )
    return substring_hits + fuzzy_hits


def fuzzy_search(
    breeds: Sequence[Breed], term: str, max_distance: float = 2
) -> list[Breed]:
    return [hit.breed for hit in rank_breeds(breeds, term, max_distance)]
