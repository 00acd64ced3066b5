from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd
from pydantic import ValidationError

from ..catalog.models import Breed
from ..errors import CatalogError
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

# Canonical field -> accepted raw column names, first present wins
COLUMN_CANDIDATES: Dict[str, List[str]] = {
    "name": ["name", "breed", "breed_name"],
    "origin": ["origin", "country", "country_of_origin"],
    "size": ["size"],
    "energyLevel": ["energy_level", "energyLevel", "energy"],
    "trainability": ["trainability"],
    "shedding": ["shedding"],
    "groomingNeeds": ["grooming_needs", "groomingNeeds", "grooming"],
    "temperament": ["temperament", "traits"],
    "lifespan": ["lifespan", "life_span", "life_expectancy"],
    "children": ["good_with_children", "children"],
    "otherDogs": ["good_with_other_dogs", "other_dogs", "otherDogs"],
    "cats": ["good_with_cats", "cats"],
}

# Categorical fields are stored lower-case so exact recommendation matching works
CATEGORY_FIELDS: List[str] = ["size", "energyLevel", "trainability", "shedding", "groomingNeeds"]

WEIGHT_COLUMNS: Dict[str, Tuple[str, str]] = {
    "lbs": ("weight_lbs_min", "weight_lbs_max"),
    "kgs": ("weight_kg_min", "weight_kg_max"),
}

_ALT_NAME_PREFIX = "name_"
_TRUE_FLAGS = {"yes", "y", "true", "1"}
_FALSE_FLAGS = {"no", "n", "false", "0"}


def _clean_text(value: Any) -> str | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    text = str(value).strip()
    return text or None


def _parse_flag(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = _clean_text(value)
    if text is None:
        return None
    lowered = text.lower()
    # Numeric columns read as floats ("1.0")
    if lowered.endswith(".0"):
        lowered = lowered[:-2]
    if lowered in _TRUE_FLAGS:
        return True
    if lowered in _FALSE_FLAGS:
        return False
    return None


def _parse_number(value: Any) -> float | None:
    if value is None:
        return None
    number = pd.to_numeric(value, errors="coerce")
    if pd.isna(number):
        return None
    return float(number)


def _split_traits(value: Any) -> List[str]:
    text = _clean_text(value)
    if text is None:
        return []
    return [t.strip() for t in text.split(",") if t.strip()]


def _build_record(row: Dict[str, Any], columns: Dict[str, str]) -> Dict[str, Any]:
    def raw(field: str) -> Any:
        col = columns.get(field)
        return row.get(col) if col else None

    record: Dict[str, Any] = {"name": _clean_text(raw("name"))}

    alternate_names = {
        col[len(_ALT_NAME_PREFIX):]: text
        for col in row
        if col.startswith(_ALT_NAME_PREFIX) and (text := _clean_text(row[col]))
    }
    if alternate_names:
        record["names"] = alternate_names

    for field in ["origin", "lifespan", *CATEGORY_FIELDS]:
        text = _clean_text(raw(field))
        if text is not None:
            record[field] = text.lower() if field in CATEGORY_FIELDS else text

    traits = _split_traits(raw("temperament"))
    if traits:
        record["temperament"] = traits

    compatibility = {
        key: flag
        for key in ("children", "otherDogs", "cats")
        if (flag := _parse_flag(raw(key))) is not None
    }
    if compatibility:
        record["compatibility"] = compatibility

    weight: Dict[str, Dict[str, float]] = {}
    for unit, (min_col, max_col) in WEIGHT_COLUMNS.items():
        low = _parse_number(row.get(min_col))
        high = _parse_number(row.get(max_col))
        if low is not None and high is not None:
            weight[unit] = {"min": low, "max": high}
    if weight:
        record["weight"] = weight

    return record


def normalize_frame(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Map a raw breed DataFrame onto canonical catalog records."""

    def _first_present(candidates: List[str]) -> str | None:
        for col in candidates:
            if col in df.columns:
                return col
        return None

    columns = {
        field: col
        for field, candidates in COLUMN_CANDIDATES.items()
        if (col := _first_present(candidates)) is not None
    }
    if "name" not in columns:
        raise CatalogError("Raw breed data has no name column")

    records: List[Dict[str, Any]] = []
    for index, row in enumerate(df.to_dict(orient="records")):
        record = _build_record(row, columns)
        if record["name"] is None:
            logger.warning("Skipping row %d: missing breed name", index)
            continue
        try:
            breed = Breed.model_validate(record)
        except ValidationError as exc:
            raise CatalogError(f"Row {index} is not a valid breed: {exc}") from exc
        records.append(breed.model_dump(mode="json", by_alias=True, exclude_none=True))
    return records


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Execute the catalog ingestion.

    Steps:
    - Read the raw CSV export.
    - Map raw columns into the canonical Breed schema.
    - Persist the catalog as JSON for the engine to load.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(config.raw_csv_path)
    records = normalize_frame(df)

    output_path = config.processed_path
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(records, fh, ensure_ascii=False, indent=2)
    logger.info("Wrote %d breeds to %s", len(records), output_path)
    return output_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = run_ingestion()
    print(f"Ingestion complete. Catalog saved to: {path}")
