from src.party_manager.entity import BaseStats, Entity, PokemonType
from src.party_manager.roster import Roster

__all__ = [
    "BaseStats",
    "Entity",
    "PokemonType",
    "Roster",
]
