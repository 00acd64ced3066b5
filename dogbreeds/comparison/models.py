from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ..catalog.models import Breed, WeightInfo


class FieldComparison(BaseModel):
    breed1: Any = None
    breed2: Any = None
    equal: bool


class WeightComparison(BaseModel):
    breed1: WeightInfo | None = None
    breed2: WeightInfo | None = None


class BreedComparison(BaseModel):
    breed1: Breed
    breed2: Breed
    comparison: dict[str, FieldComparison]
    compatibility: dict[str, FieldComparison]
    weight: WeightComparison
