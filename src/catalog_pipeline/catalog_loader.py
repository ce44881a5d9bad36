"""Catalog loading - reads a cached region catalog into entities."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from src.catalog_pipeline.config import CATALOG_COLUMNS, CATALOG_DIR
from src.catalog_pipeline.run_update import catalog_filename
from src.catalog_pipeline.transformation import CatalogTransformer
from src.party_manager.entity import Entity

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads cached catalogs produced by ``run_update``."""

    def __init__(self, catalog_dir: Optional[Path] = None):
        self.catalog_dir = catalog_dir or CATALOG_DIR

    def load_frame(self, region: str) -> pd.DataFrame:
        """Load one region's catalog table.

        Raises:
            FileNotFoundError: If the region has not been fetched yet.
            ValueError: If the file is malformed.
        """
        filepath = self.catalog_dir / catalog_filename(region)
        if not filepath.exists():
            raise FileNotFoundError(
                f"No catalog found for {region}. "
                f"Run catalog update first: python -m src.catalog_pipeline.run_update {region}"
            )

        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        try:
            entries = data["entries"]
        except KeyError as e:
            raise ValueError(
                f"Malformed catalog file for {region}: missing key {e}. "
                "Re-run catalog update to regenerate."
            ) from e

        df = pd.DataFrame(entries, columns=CATALOG_COLUMNS)
        logger.info("Loaded %d catalog entries for %s", len(df), region)
        return df

    def load_entities(self, region: str) -> List[Entity]:
        """Entities for *region*, ordered by id."""
        df = self.load_frame(region).sort_values("id").reset_index(drop=True)
        return CatalogTransformer.frame_to_entities(df)

    def load_index(self, region: str) -> Dict[int, Entity]:
        """Entities for *region* keyed by id."""
        return {entity.id: entity for entity in self.load_entities(region)}
