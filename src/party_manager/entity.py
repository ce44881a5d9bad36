"""Entity data models - immutable catalog creatures and their base stats."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

STAT_NAMES = ("hp", "attack", "defense", "sp_attack", "sp_defense", "speed")

DEFAULT_TYPE_COLOR = "#A8A878"


class PokemonType(str, Enum):
    """The 18 elemental type tags, each with its chart colour."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    @property
    def color(self) -> str:
        return TYPE_COLORS.get(self, DEFAULT_TYPE_COLOR)


TYPE_COLORS: Dict[PokemonType, str] = {
    PokemonType.NORMAL: "#A8A878",
    PokemonType.FIRE: "#F08030",
    PokemonType.WATER: "#6890F0",
    PokemonType.ELECTRIC: "#F8D030",
    PokemonType.GRASS: "#78C850",
    PokemonType.ICE: "#98D8D8",
    PokemonType.FIGHTING: "#C03028",
    PokemonType.POISON: "#A040A0",
    PokemonType.GROUND: "#E0C068",
    PokemonType.FLYING: "#A890F0",
    PokemonType.PSYCHIC: "#F85888",
    PokemonType.BUG: "#A8B820",
    PokemonType.ROCK: "#B8A038",
    PokemonType.GHOST: "#705898",
    PokemonType.DRAGON: "#7038F8",
    PokemonType.DARK: "#705848",
    PokemonType.STEEL: "#B8B8D0",
    PokemonType.FAIRY: "#EE99AC",
}


@dataclass(frozen=True)
class BaseStats:
    """The six base battle stats."""

    hp: int = 0
    attack: int = 0
    defense: int = 0
    sp_attack: int = 0
    sp_defense: int = 0
    speed: int = 0

    @property
    def total(self) -> int:
        return (
            self.hp + self.attack + self.defense
            + self.sp_attack + self.sp_defense + self.speed
        )

    def as_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in STAT_NAMES}


@dataclass(frozen=True)
class Entity:
    """A single roster-eligible creature as loaded from the catalog."""

    id: int
    name: str
    sprite: str = ""
    types: Tuple[PokemonType, ...] = ()
    stats: BaseStats = field(default_factory=BaseStats)

    @property
    def total_stats(self) -> int:
        return self.stats.total

    def to_record(self) -> Dict:
        """Flatten to a plain dict (one row of a catalog table)."""
        record = {
            "id": self.id,
            "name": self.name,
            "sprite": self.sprite,
            "types": [t.value for t in self.types],
        }
        record.update(self.stats.as_dict())
        record["total"] = self.total_stats
        return record

    @classmethod
    def from_catalog_record(cls, record: Dict) -> "Entity":
        """Build an Entity from a flat catalog record.

        Missing stats fall back to 0 and unknown type tags are dropped;
        both are logged rather than raised.
        """
        entity_id = int(record["id"])

        stat_values = {}
        for name in STAT_NAMES:
            value = record.get(name)
            if value is None:
                logger.warning("Entity %d missing stat %r, using 0", entity_id, name)
                value = 0
            stat_values[name] = int(value)

        return cls(
            id=entity_id,
            name=format_display_name(record.get("name") or ""),
            sprite=record.get("sprite") or "",
            types=parse_types(record.get("types") or [], entity_id),
            stats=BaseStats(**stat_values),
        )


def format_display_name(raw_name: str) -> str:
    """Capitalise the first letter only ("mr-mime" -> "Mr-mime")."""
    if not raw_name:
        return ""
    return raw_name[0].upper() + raw_name[1:]


def parse_types(raw_types: List[str], entity_id: int) -> Tuple[PokemonType, ...]:
    """Convert raw type tags to PokemonType members, keeping order."""
    parsed: List[PokemonType] = []
    for tag in raw_types:
        try:
            parsed.append(PokemonType(str(tag).lower()))
        except ValueError:
            logger.warning("Entity %d has unknown type tag %r, dropped", entity_id, tag)
    return tuple(parsed)
