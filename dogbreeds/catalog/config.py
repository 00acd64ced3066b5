from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "dogs.json"


@dataclass(frozen=True)
class CatalogConfig:
    data_path: Path = Path(os.getenv("DOGBREEDS_DATA_PATH", str(BUNDLED_CATALOG_PATH)))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
