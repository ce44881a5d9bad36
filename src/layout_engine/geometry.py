"""Canvas geometry - initial party grid and the live position map."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from src.layout_engine.config import (
    FALLBACK_GRID_TOP,
    GRID_COLUMNS,
    GRID_ROWS,
    SPACING_MAX,
    SPACING_MIN,
    SPACING_RATIO,
    SPRITE_WIDTH,
    TITLE_GAP,
)
from src.party_manager.roster import Roster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class ViewportSize:
    width: float
    height: float


PositionMap = Dict[int, Point]


def compute_spacing(viewport_width: float) -> float:
    """Grid spacing for a viewport width, clamped to [150, 200] px."""
    return max(SPACING_MIN, min(SPACING_MAX, viewport_width * SPACING_RATIO))


def compute_initial_positions(
    roster: Roster,
    viewport: ViewportSize,
    anchor_bottom_y: Optional[float] = None,
) -> PositionMap:
    """Lay out occupied slots on a 3x2 grid, row-major by slot index.

    The grid is centred horizontally. Its top edge sits TITLE_GAP below
    *anchor_bottom_y* (the title region's bottom edge), or at a fixed
    offset when that region has not been measured yet.
    """
    spacing_x = compute_spacing(viewport.width)
    spacing_y = compute_spacing(viewport.width)

    grid_width = (GRID_COLUMNS - 1) * spacing_x + SPRITE_WIDTH

    if anchor_bottom_y is None:
        logger.debug("Title region unavailable, using fallback top %d", FALLBACK_GRID_TOP)
        start_y = float(FALLBACK_GRID_TOP)
    else:
        start_y = anchor_bottom_y + TITLE_GAP

    start_x = viewport.width / 2 - grid_width / 2

    positions: PositionMap = {}
    for index, entity in enumerate(roster.slots):
        if entity is None:
            continue
        row = index // GRID_COLUMNS
        col = index % GRID_COLUMNS
        if row >= GRID_ROWS:
            logger.warning("Slot %d falls outside the %dx%d grid", index, GRID_COLUMNS, GRID_ROWS)
        positions[entity.id] = Point(start_x + col * spacing_x, start_y + row * spacing_y)

    return positions


class LayoutEngine:
    """Owns the live PositionMap for the party canvas."""

    def __init__(self):
        self._positions: PositionMap = {}

    def recompute(
        self,
        roster: Roster,
        viewport: ViewportSize,
        anchor_bottom_y: Optional[float] = None,
    ) -> PositionMap:
        """Replace every position with a fresh grid layout."""
        self._positions = compute_initial_positions(roster, viewport, anchor_bottom_y)
        logger.info(
            "Laid out %d members for %.0fx%.0f viewport",
            len(self._positions),
            viewport.width,
            viewport.height,
        )
        return self.positions

    def reset(self):
        self._positions = {}

    def get_position(self, entity_id: int) -> Optional[Point]:
        return self._positions.get(entity_id)

    def has_position(self, entity_id: int) -> bool:
        return entity_id in self._positions

    def move_to(self, entity_id: int, point: Point) -> bool:
        """Set an entity's top-left corner; ignored for unknown ids."""
        if entity_id not in self._positions:
            logger.warning("No position entry for entity #%d, move ignored", entity_id)
            return False
        self._positions[entity_id] = point
        return True

    @property
    def positions(self) -> PositionMap:
        """Snapshot copy of the current map."""
        return dict(self._positions)


class StaticViewport:
    """Viewport geometry provider backed by plain values.

    The controller pulls from a provider on demand; windowing layers
    update it and then signal a resize.
    """

    def __init__(self, width: float, height: float, title_bottom: Optional[float] = None):
        self.size = ViewportSize(width, height)
        self.title_bottom_y = title_bottom

    def viewport_size(self) -> ViewportSize:
        return self.size

    def title_bottom(self) -> Optional[float]:
        return self.title_bottom_y

    def resize(self, width: float, height: float):
        self.size = ViewportSize(width, height)
