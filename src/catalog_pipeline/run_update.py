"""Fetch a region's catalog and cache it as JSON.

Usage:
    python -m src.catalog_pipeline.run_update [region] [output_dir]

Examples:
    python -m src.catalog_pipeline.run_update Kanto
    python -m src.catalog_pipeline.run_update Johto /path/to/catalog
"""

import json
import logging
import math
import sys
from datetime import datetime, timezone
from pathlib import Path

from src.catalog_pipeline.config import CATALOG_DIR, DEFAULT_REGION, REGIONS
from src.catalog_pipeline.ingestion import PokeApiIngester
from src.catalog_pipeline.transformation import CatalogTransformer
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def catalog_filename(region: str) -> str:
    return f"catalog_{region.lower()}.json"


def run_pipeline(
    region: str = DEFAULT_REGION,
    output_dir: Path | None = None,
    ingester: PokeApiIngester | None = None,
) -> Path:
    """Fetch, tabulate and cache one region.

    Args:
        region: Region name (see ``REGIONS``).
        output_dir: Directory for JSON output. Defaults to ``data/catalog/``.
        ingester: Source of raw payloads. Defaults to the live API.

    Returns:
        Path to the generated JSON file.

    Raises:
        ValueError: If the region is unknown.
        IngestionError: If fetching fails.
    """
    if region not in REGIONS:
        raise ValueError(f"Unknown region '{region}'. Must be one of: {list(REGIONS)}")
    if output_dir is None:
        output_dir = CATALOG_DIR
    if ingester is None:
        ingester = PokeApiIngester()

    logger.info("Starting catalog update for %s", region)

    logger.info("Step 1/3: Fetching payloads...")
    payloads = ingester.fetch_region(region)

    logger.info("Step 2/3: Transforming payloads...")
    df = CatalogTransformer().transform(payloads)

    logger.info("Step 3/3: Writing JSON output...")
    entries = df.to_dict(orient="records")
    for entry in entries:
        for key, value in entry.items():
            if hasattr(value, "item"):
                value = value.item()
            if isinstance(value, float) and math.isnan(value):
                value = None
            entry[key] = value

    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "source": "PokeAPI",
            "region": region,
            "total_entries": len(entries),
        },
        "entries": entries,
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / catalog_filename(region)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    latest_link = output_dir / "catalog_latest.json"
    if latest_link.exists() or latest_link.is_symlink():
        latest_link.unlink()
    latest_link.symlink_to(output_file.name)

    logger.info("Catalog update complete! Output: %s (%d entries)", output_file, len(entries))
    return output_file


if __name__ == "__main__":
    setup_logging()

    region = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_REGION
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_pipeline(region, output_dir)
        print(f"Catalog update complete: {output}")
    except Exception:
        logger.exception("Catalog update failed")
        sys.exit(1)
