"""Roster store - the single source of truth for which entities are on the team."""

import logging
from typing import Callable, List, Optional

from src.party_manager.config import ROSTER_SIZE
from src.party_manager.entity import Entity

logger = logging.getLogger(__name__)

CompletionListener = Callable[["Roster"], None]


class Roster:
    """Fixed-capacity ordered collection of optional entity slots.

    Mutations are limited to placing into the first empty slot and
    clearing a slot by index. Completion listeners fire once on each
    incomplete -> complete transition.
    """

    def __init__(self, size: int = ROSTER_SIZE):
        if size < 1:
            raise ValueError(f"Roster size must be positive, got {size}")
        self.size = size
        self.slots: List[Optional[Entity]] = [None] * size
        self._listeners: List[CompletionListener] = []

    def add_completion_listener(self, listener: CompletionListener):
        """Register a callback invoked when the roster becomes complete."""
        self._listeners.append(listener)

    def place(self, entity: Entity) -> Optional[int]:
        """Put *entity* into the first empty slot.

        Returns:
            The slot index used, or None if the roster was already full.
        """
        try:
            index = self.slots.index(None)
        except ValueError:
            logger.debug("Roster full, ignoring %s (#%d)", entity.name, entity.id)
            return None

        if self.contains(entity.id):
            logger.warning(
                "Entity #%d (%s) already occupies another slot", entity.id, entity.name
            )

        was_complete = self.is_complete
        self.slots[index] = entity
        logger.info("Slot %d <- %s (#%d)", index, entity.name, entity.id)

        if not was_complete and self.is_complete:
            logger.info("Roster complete")
            for listener in list(self._listeners):
                listener(self)

        return index

    def clear(self, index: int):
        """Empty the slot at *index* (no-op if it was already empty)."""
        if not 0 <= index < self.size:
            raise IndexError(f"Slot index {index} out of range [0, {self.size})")
        removed = self.slots[index]
        self.slots[index] = None
        if removed is not None:
            logger.info("Slot %d cleared (%s)", index, removed.name)

    @property
    def is_complete(self) -> bool:
        return all(slot is not None for slot in self.slots)

    @property
    def filled_count(self) -> int:
        return sum(1 for slot in self.slots if slot is not None)

    def members(self) -> List[Entity]:
        """Occupied slots, in slot order."""
        return [slot for slot in self.slots if slot is not None]

    def contains(self, entity_id: int) -> bool:
        return any(slot is not None and slot.id == entity_id for slot in self.slots)

    def __len__(self) -> int:
        return self.size
