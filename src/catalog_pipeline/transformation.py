"""Catalog transformation.

Turns raw API payloads into flat catalog records, tabulates them, and
converts table rows into Entity objects:
- Picks the front sprite and slot-ordered type tags
- Maps API stat names onto catalog columns
- Derives the stat total
- De-duplicates and orders rows by national id
"""

import logging
import math
from typing import Dict, List, Optional

import pandas as pd

from src.catalog_pipeline.config import API_STAT_COLUMNS, CATALOG_COLUMNS
from src.party_manager.entity import STAT_NAMES, Entity

logger = logging.getLogger(__name__)


def _safe_int(val) -> Optional[int]:
    """Convert *val* to int, returning None for None/NaN/non-numeric values."""
    if val is None or val is pd.NA:
        return None
    if isinstance(val, float) and math.isnan(val):
        return None
    try:
        return int(val)
    except (ValueError, TypeError):
        return None


class CatalogTransformer:
    """Flattens and tabulates catalog payloads."""

    # ------------------------------------------------------------------
    # Payload -> record
    # ------------------------------------------------------------------
    def payload_to_record(self, payload: Dict) -> Dict:
        """Flatten one API payload into a catalog record."""
        entity_id = payload["id"]

        sprites = payload.get("sprites") or {}
        type_slots = sorted(payload.get("types") or [], key=lambda t: t.get("slot", 0))

        record = {
            "id": entity_id,
            "name": payload.get("name") or "",
            "sprite": sprites.get("front_default") or "",
            "types": [t["type"]["name"] for t in type_slots if t.get("type")],
        }

        for column in API_STAT_COLUMNS.values():
            record[column] = None
        for stat in payload.get("stats") or []:
            column = API_STAT_COLUMNS.get(stat.get("stat", {}).get("name"))
            if column is not None:
                record[column] = _safe_int(stat.get("base_stat"))

        missing = [name for name in STAT_NAMES if record[name] is None]
        if missing:
            logger.warning("Payload #%s missing stats: %s", entity_id, missing)

        record["total"] = sum(record[name] or 0 for name in STAT_NAMES)
        return record

    # ------------------------------------------------------------------
    # Records -> table
    # ------------------------------------------------------------------
    def to_frame(self, records: List[Dict]) -> pd.DataFrame:
        """Tabulate records, one row per unique id, ordered by id."""
        df = pd.DataFrame(records, columns=CATALOG_COLUMNS)
        before = len(df)
        df = df.drop_duplicates(subset=["id"], keep="first")
        if len(df) < before:
            logger.warning("Dropped %d duplicate catalog ids", before - len(df))
        df = df.sort_values("id").reset_index(drop=True)
        logger.info("Catalog table: %d entries", len(df))
        return df

    def transform(self, payloads: List[Dict]) -> pd.DataFrame:
        return self.to_frame([self.payload_to_record(p) for p in payloads])

    # ------------------------------------------------------------------
    # Table -> entities
    # ------------------------------------------------------------------
    @staticmethod
    def frame_to_entities(df: pd.DataFrame) -> List[Entity]:
        """Build Entity objects from catalog rows, in row order."""
        entities = []
        for _, row in df.iterrows():
            record = row.to_dict()
            for name in STAT_NAMES:
                record[name] = _safe_int(record.get(name))
            entities.append(Entity.from_catalog_record(record))
        return entities
