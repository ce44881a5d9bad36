"""Drag session state for direct-manipulation moves."""

from dataclasses import dataclass
from enum import Enum

from src.layout_engine.geometry import Point


class Gesture(str, Enum):
    """How a press/release pair was interpreted."""

    CLICK = "click"
    DRAG = "drag"


@dataclass
class DragSession:
    """The single in-progress press on a party member.

    ``dragging`` stays False until the first pointer move after the
    press; it is what separates a click from a drag on release.
    """

    entity_id: int
    grab_offset: Point
    dragging: bool = False

    def target_for(self, pointer: Point) -> Point:
        """Top-left corner that keeps the grab point under *pointer*."""
        return pointer - self.grab_offset
