"""Catalog ingestion from the public Pokémon API.

Fetches one JSON payload per national id, a region at a time, in small
batches so a single region load never floods the API.
"""

import logging
from typing import Dict, Iterator, List, Optional

import requests

from src.catalog_pipeline.config import (
    BATCH_SIZE,
    MAX_NATIONAL_ID,
    POKEAPI_URL,
    REGIONS,
    REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when catalog data cannot be fetched."""


def region_ids(region: str) -> range:
    """National ids belonging to *region*, capped at MAX_NATIONAL_ID."""
    if region not in REGIONS:
        raise ValueError(
            f"Unknown region '{region}'. Must be one of: {list(REGIONS)}"
        )
    start, end = REGIONS[region]
    return range(start, min(end, MAX_NATIONAL_ID) + 1)


def batched(ids: range, batch_size: int = BATCH_SIZE) -> Iterator[List[int]]:
    """Split *ids* into consecutive chunks of at most *batch_size*."""
    ids = list(ids)
    for i in range(0, len(ids), batch_size):
        yield ids[i:i + batch_size]


class PokeApiIngester:
    """Reads raw entity payloads from the catalog API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url_template: str = POKEAPI_URL,
        batch_size: int = BATCH_SIZE,
    ):
        self.session = session or requests.Session()
        self.url_template = url_template
        self.batch_size = batch_size

    def fetch_entity(self, entity_id: int) -> Dict:
        """Fetch the raw payload for one national id.

        Raises:
            requests.RequestException: If the request fails.
        """
        url = self.url_template.format(id=entity_id)
        response = self.session.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()

    def fetch_region(self, region: str) -> List[Dict]:
        """Fetch every payload for *region*, in id order.

        Raises:
            IngestionError: if any request in the region fails.
        """
        ids = region_ids(region)
        logger.info("Fetching %s (#%d-#%d)", region, ids.start, ids.stop - 1)

        payloads: List[Dict] = []
        try:
            for batch in batched(ids, self.batch_size):
                payloads.extend(self.fetch_entity(entity_id) for entity_id in batch)
                logger.debug("Fetched batch #%d-#%d", batch[0], batch[-1])
        except requests.RequestException as e:
            raise IngestionError(f"Failed to fetch {region} catalog: {e}") from e

        logger.info("Fetched %d entries for %s", len(payloads), region)
        return payloads
