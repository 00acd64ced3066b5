from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the CSV -> JSON catalog ingestion.
    """

    raw_csv_path: Path = Path("data/raw/breeds.csv")
    processed_data_dir: Path = Path("dogbreeds/catalog/data")
    processed_filename: str = "dogs.json"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
