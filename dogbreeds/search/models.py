from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from ..catalog.models import Breed


class MatchKind(str, Enum):
    substring = "substring"
    fuzzy = "fuzzy"


class SearchHit(BaseModel):
    model_config = ConfigDict(frozen=True)

    breed: Breed
    kind: MatchKind
    distance: int | None = None
