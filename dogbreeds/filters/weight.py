from __future__ import annotations

from typing import Sequence

from ..catalog.models import Breed, WeightRange
from ..validation import resolve_unit, validate_number_range


def overlaps(stored: WeightRange, low: float, high: float) -> bool:
    """Inclusive interval overlap between a stored range and ``[low, high]``."""
    return not (stored.max < low or stored.min > high)


def breeds_overlapping(
    breeds: Sequence[Breed], low: float, high: float, unit: str
) -> list[Breed]:
    """Breeds with a ``unit`` weight range overlapping ``[low, high]``.

    ``unit`` must already be a canonical key (``lbs``/``kgs``).
    """
    results: list[Breed] = []
    for breed in breeds:
        if breed.weight is None:
            continue
        stored = breed.weight.for_unit(unit)
        if stored is not None and overlaps(stored, low, high):
            results.append(breed)
    return results


def filter_by_weight_range(
    breeds: Sequence[Breed],
    min_weight: float,
    max_weight: float,
    unit: str = "lbs",
) -> list[Breed]:
    """
    Breeds whose weight range overlaps the query range.

    The bounds may be given in either order. ``unit`` accepts any alias of
    pounds or kilograms ("lb", "pounds", "kg", "kilos", ...).
    """
    validate_number_range(min_weight, max_weight)
    canonical_unit = resolve_unit(unit)
    low, high = sorted((min_weight, max_weight))
    return breeds_overlapping(breeds, low, high, canonical_unit)
