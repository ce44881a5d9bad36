"""Interaction controller - pointer state machine for the party canvas.

Feeds pointer events into the LayoutEngine, tells clicks from drags, and
drives the transient jump highlights.
"""

import logging
from functools import partial
from typing import Dict, FrozenSet, Optional

from src.layout_engine.config import (
    CELEBRATION_JUMP_MS,
    CELEBRATION_STAGGER_MS,
    CLICK_JUMP_MS,
)
from src.layout_engine.drag_session import DragSession, Gesture
from src.layout_engine.geometry import LayoutEngine, Point
from src.layout_engine.scheduler import FrameScheduler
from src.party_manager.roster import Roster

logger = logging.getLogger(__name__)


class InteractionController:
    """Owns the DragSession and the jump highlight state.

    Pointer moves are coalesced: at most one position commit happens per
    frame, using the latest pointer position seen since the last frame.
    """

    def __init__(self, layout: LayoutEngine, scheduler: FrameScheduler):
        self.layout = layout
        self.scheduler = scheduler
        self.session: Optional[DragSession] = None
        self._pending_target: Optional[Point] = None
        self._frame_requested = False
        self._jump_expiry: Dict[int, float] = {}
        # Bumped by reset(); celebration timers from an older epoch are dropped
        self._epoch = 0

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def pointer_down(self, entity_id: int, pointer: Point) -> bool:
        """Start a session on *entity_id*.

        Returns:
            True if a session started. A press on an entity without a
            position, or while another session is active, is ignored.
        """
        if self.session is not None:
            logger.debug(
                "Press on #%d ignored, session on #%d still active",
                entity_id,
                self.session.entity_id,
            )
            return False

        position = self.layout.get_position(entity_id)
        if position is None:
            logger.warning("Press on #%d ignored, no position entry", entity_id)
            return False

        self.session = DragSession(entity_id=entity_id, grab_offset=pointer - position)
        logger.debug("Pressed #%d at (%.1f, %.1f)", entity_id, pointer.x, pointer.y)
        return True

    def pointer_move(self, pointer: Point) -> bool:
        """Queue a position update for the pressed entity.

        Returns:
            True if a session is active and the move was accepted.
        """
        if self.session is None:
            return False

        self.session.dragging = True
        self._pending_target = self.session.target_for(pointer)

        if not self._frame_requested:
            self._frame_requested = True
            self.scheduler.request_frame(self._commit_pending_move)
        return True

    def pointer_up(self) -> Optional[Gesture]:
        """End the session and classify it.

        A release with no move in between counts as a click and starts a
        short jump on the pressed entity; otherwise it was a drag.

        Returns:
            The gesture, or None if no session was active.
        """
        session = self.session
        if session is None:
            return None

        pending, self._pending_target = self._pending_target, None
        self.session = None

        if session.dragging:
            # Release position wins over a move still waiting for its frame
            if pending is not None:
                self.layout.move_to(session.entity_id, pending)
            logger.debug("Released #%d after drag", session.entity_id)
            return Gesture.DRAG

        self._handle_click(session.entity_id)
        return Gesture.CLICK

    def _handle_click(self, entity_id: int):
        if not self.jump(entity_id, CLICK_JUMP_MS):
            logger.warning("Click on #%d ignored, no position entry", entity_id)

    def _commit_pending_move(self):
        self._frame_requested = False
        if self.session is None or self._pending_target is None:
            return
        self.layout.move_to(self.session.entity_id, self._pending_target)
        self._pending_target = None

    # ------------------------------------------------------------------
    # Jump highlights
    # ------------------------------------------------------------------

    def jump(self, entity_id: int, duration_ms: float) -> bool:
        """Highlight *entity_id* for *duration_ms*; a newer jump extends it.

        Returns:
            False if the entity has no position entry (nothing to animate).
        """
        if not self.layout.has_position(entity_id):
            logger.debug("Jump on #%d skipped, no position entry", entity_id)
            return False
        expiry = self.scheduler.now_ms + duration_ms
        self._jump_expiry[entity_id] = expiry
        self.scheduler.call_later(duration_ms, partial(self._end_jump, entity_id, expiry))
        return True

    def _end_jump(self, entity_id: int, expiry: float):
        if self._jump_expiry.get(entity_id) == expiry:
            del self._jump_expiry[entity_id]

    def celebrate(self, roster: Roster):
        """Jump each occupied slot in turn, staggered by slot index."""
        for index, entity in enumerate(roster.slots):
            if entity is None:
                continue
            self.scheduler.call_later(
                index * CELEBRATION_STAGGER_MS,
                partial(self._celebration_jump, entity.id, self._epoch),
            )

    def _celebration_jump(self, entity_id: int, epoch: int):
        if epoch != self._epoch:
            return
        self.jump(entity_id, CELEBRATION_JUMP_MS)

    def is_jumping(self, entity_id: int) -> bool:
        return entity_id in self._jump_expiry

    @property
    def jumping_ids(self) -> FrozenSet[int]:
        return frozenset(self._jump_expiry)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_dragging(self) -> bool:
        return self.session is not None and self.session.dragging

    def is_moving(self, entity_id: int) -> bool:
        """Whether *entity_id* is under an active drag (no eased transition)."""
        return self.is_dragging and self.session.entity_id == entity_id

    def cancel_drag(self):
        """Drop the session and any queued move; highlights keep running."""
        if self.session is not None:
            logger.debug("Session on #%d cancelled", self.session.entity_id)
        self.session = None
        self._pending_target = None

    def reset(self):
        """Drop the session, any queued move, all highlights and pending celebrations."""
        self.cancel_drag()
        self._frame_requested = False
        self._jump_expiry.clear()
        self._epoch += 1
