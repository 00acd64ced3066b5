from __future__ import annotations

from typing import Any, Sequence

from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .catalog.data_store import get_catalog
from .catalog.models import Breed, CatalogMetadata
from .comparison.comparator import compare_breeds
from .comparison.models import BreedComparison
from .errors import CatalogError
from .filters.predicates import (
    filter_by_compatibility,
    filter_by_country,
    filter_by_energy_level,
    filter_by_grooming_needs,
    filter_by_shedding,
    filter_by_size,
    filter_by_temperament,
    filter_by_trainability,
)
from .filters.weight import filter_by_weight_range
from .matching.matcher import find_breed
from .recommendations.models import RecommendationCriteria
from .recommendations.retrieval import get_recommendations
from .search.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .search.fuzzy import fuzzy_search, rank_breeds
from .search.models import SearchHit


def _distinct(values: list[str | None]) -> list[str]:
    return sorted({v for v in values if v})


class BreedEngine:
    """
    Query engine over one immutable breed catalog.

    The engine owns the tuple it is built from; every operation is a pure
    read over it, so one engine can serve concurrent callers.
    """

    def __init__(
        self,
        breeds: Sequence[Breed],
        search_config: SearchConfig = DEFAULT_SEARCH_CONFIG,
    ) -> None:
        if not isinstance(breeds, (list, tuple)):
            raise CatalogError("Breed data must be an array")
        if not breeds:
            raise CatalogError("Breed catalog must not be empty")
        self._breeds: tuple[Breed, ...] = tuple(breeds)
        self._search_config = search_config

    @property
    def breeds(self) -> tuple[Breed, ...]:
        return self._breeds

    def __len__(self) -> int:
        return len(self._breeds)

    # ── Single-breed lookups ─────────────────────────────────────────────

    def get_breed(self, query: str, fuzzy: bool = True, lang: str = "en") -> Breed | None:
        return find_breed(self._breeds, query, fuzzy=fuzzy, lang=lang)

    def is_valid_breed(self, query: str, fuzzy: bool = True, lang: str = "en") -> bool:
        return self.get_breed(query, fuzzy=fuzzy, lang=lang) is not None

    def get_origin(self, query: str, fuzzy: bool = True, lang: str = "en") -> str | None:
        breed = self.get_breed(query, fuzzy=fuzzy, lang=lang)
        return breed.origin if breed is not None else None

    # ── Filters ──────────────────────────────────────────────────────────

    def by_country(self, country: str) -> list[Breed]:
        return filter_by_country(self._breeds, country)

    def by_size(self, size: str) -> list[Breed]:
        return filter_by_size(self._breeds, size)

    def by_temperament(self, trait: str) -> list[Breed]:
        return filter_by_temperament(self._breeds, trait)

    def by_energy_level(self, level: str) -> list[Breed]:
        return filter_by_energy_level(self._breeds, level)

    def by_trainability(self, level: str) -> list[Breed]:
        return filter_by_trainability(self._breeds, level)

    def by_shedding(self, level: str) -> list[Breed]:
        return filter_by_shedding(self._breeds, level)

    def by_grooming_needs(self, level: str) -> list[Breed]:
        return filter_by_grooming_needs(self._breeds, level)

    def by_compatibility(self, key: str, value: bool) -> list[Breed]:
        return filter_by_compatibility(self._breeds, key, value)

    def by_weight_range(self, min_weight: float, max_weight: float, unit: str = "lbs") -> list[Breed]:
        return filter_by_weight_range(self._breeds, min_weight, max_weight, unit)

    # ── Search, recommendation, comparison ───────────────────────────────

    def search(self, term: str, max_distance: float | None = None) -> list[Breed]:
        if max_distance is None:
            max_distance = self._search_config.max_distance
        return fuzzy_search(self._breeds, term, max_distance)

    def search_hits(self, term: str, max_distance: float | None = None) -> list[SearchHit]:
        if max_distance is None:
            max_distance = self._search_config.max_distance
        return rank_breeds(self._breeds, term, max_distance)

    def recommend(
        self, criteria: RecommendationCriteria | dict[str, Any] | None = None
    ) -> list[Breed]:
        return get_recommendations(self._breeds, criteria)

    def compare(self, query1: str, query2: str) -> BreedComparison:
        return compare_breeds(self._breeds, query1, query2)

    def metadata(self) -> CatalogMetadata:
        breeds = self._breeds
        return CatalogMetadata(
            breed_count=len(breeds),
            origins=_distinct([b.origin for b in breeds]),
            sizes=_distinct([b.size for b in breeds]),
            energy_levels=_distinct([b.energy_level for b in breeds]),
            trainability_levels=_distinct([b.trainability for b in breeds]),
            shedding_levels=_distinct([b.shedding for b in breeds]),
            grooming_needs_levels=_distinct([b.grooming_needs for b in breeds]),
            temperaments=_distinct([t for b in breeds for t in b.temperament]),
        )


_default_engine: BreedEngine | None = None


def get_default_engine(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> BreedEngine:
    """Return an engine over the configured catalog, building it on first call."""
    global _default_engine
    if _default_engine is None:
        _default_engine = BreedEngine(get_catalog(config))
    return _default_engine
