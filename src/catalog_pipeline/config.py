from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
CATALOG_DIR = DATA_DIR / "catalog"

# Catalog API
POKEAPI_URL = "https://pokeapi.co/api/v2/pokemon/{id}"
REQUEST_TIMEOUT = 30  # seconds
BATCH_SIZE = 20  # ids fetched per batch
MAX_NATIONAL_ID = 1025

# Region name -> inclusive national id range
REGIONS = {
    "Kanto": (1, 151),
    "Johto": (152, 251),
    "Hoenn": (252, 386),
    "Sinnoh": (387, 493),
    "Unova": (494, 649),
    "Kalos": (650, 721),
    "Alola": (722, 809),
    "Galar": (810, 905),
    "Paldea": (906, 1025),
}

DEFAULT_REGION = "Kanto"

# API stat names, in catalog column order
API_STAT_COLUMNS = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special-attack": "sp_attack",
    "special-defense": "sp_defense",
    "speed": "speed",
}

# Flat catalog columns
CATALOG_COLUMNS = [
    "id", "name", "sprite", "types",
    "hp", "attack", "defense", "sp_attack", "sp_defense", "speed",
    "total",
]
