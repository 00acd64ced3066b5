from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import CatalogError
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Breed

logger = logging.getLogger(__name__)

_catalog: tuple[Breed, ...] | None = None


def _coerce_entry(index: int, entry: Any) -> Breed:
    # Raw catalogs may list a breed by name only
    if isinstance(entry, str):
        entry = {"name": entry}
    if not isinstance(entry, dict):
        raise CatalogError(f"Breed entry {index} must be a string or an object")
    try:
        return Breed.model_validate(entry)
    except ValidationError as exc:
        raise CatalogError(f"Breed entry {index} is invalid: {exc}") from exc


def build_catalog(raw: Any) -> tuple[Breed, ...]:
    """Turn decoded catalog JSON into an immutable tuple of breeds."""
    if not isinstance(raw, list):
        raise CatalogError("Breed data must be an array")
    return tuple(_coerce_entry(i, entry) for i, entry in enumerate(raw))


def load_catalog(path: Path) -> tuple[Breed, ...]:
    with Path(path).open(encoding="utf-8") as fh:
        raw = json.load(fh)
    breeds = build_catalog(raw)
    logger.info("Loaded %d breeds from %s", len(breeds), path)
    return breeds


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Breed, ...]:
    """Return the default breed catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.data_path)
    return _catalog


def clear_catalog_cache() -> None:
    global _catalog
    _catalog = None
