from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from ..errors import BreedValidationError

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

MAX_DISTANCE_ENV = "DOGBREEDS_MAX_DISTANCE"


def _max_distance_from_env() -> float:
    raw = os.getenv(MAX_DISTANCE_ENV, "2")
    message = f"{MAX_DISTANCE_ENV} must be a non-negative number, got {raw!r}"
    try:
        value = float(raw)
    except ValueError as exc:
        raise BreedValidationError(message) from exc
    # also rejects nan
    if not value >= 0:
        raise BreedValidationError(message)
    return value


@dataclass(frozen=True)
class SearchConfig:
    max_distance: float = field(default_factory=_max_distance_from_env)


DEFAULT_SEARCH_CONFIG = SearchConfig()
