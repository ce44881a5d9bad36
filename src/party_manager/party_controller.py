"""Party controller - single owner of roster, canvas and assessment flow."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from src.layout_engine.drag_session import Gesture
from src.layout_engine.geometry import LayoutEngine, Point, PositionMap
from src.layout_engine.interaction_controller import InteractionController
from src.layout_engine.scheduler import FrameScheduler
from src.party_manager.config import (
    ASSESSMENT_DELAY_MS,
    CELEBRATION_ORIGIN_Y,
    CELEBRATION_PARTICLE_COUNT,
    CELEBRATION_SPREAD,
    PARTY_VIEW_DELAY_MS,
)
from src.party_manager.entity import Entity
from src.party_manager.roster import Roster
from src.scoring_engine.models import TeamAssessment
from src.scoring_engine.personality import PersonalityInputs
from src.scoring_engine.scoring_rules import ValidationError
from src.scoring_engine.team_scorer import TeamScorer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CelebrationBurst:
    """Parameters handed to the external particle effect."""

    particle_count: int = CELEBRATION_PARTICLE_COUNT
    spread: float = CELEBRATION_SPREAD
    origin_y: float = CELEBRATION_ORIGIN_Y


CelebrationEffect = Callable[[CelebrationBurst], None]
AssessmentCallback = Callable[[TeamAssessment], None]


def _no_effect(burst: CelebrationBurst):
    logger.debug("No celebration effect attached (%d particles)", burst.particle_count)


class PartyController:
    """Top-level owner of all mutable party state.

    Coordinates the Roster (which entities are on the team), the
    LayoutEngine and InteractionController (the party canvas) and the
    TeamScorer (assessments). Everything runs on the scheduler's single
    thread of control.
    """

    def __init__(
        self,
        viewport,
        scheduler: Optional[FrameScheduler] = None,
        celebration_effect: Optional[CelebrationEffect] = None,
        scorer: Optional[TeamScorer] = None,
        roster: Optional[Roster] = None,
    ):
        self.viewport = viewport
        self.scheduler = scheduler or FrameScheduler()
        self.celebration_effect = celebration_effect or _no_effect
        self.scorer = scorer or TeamScorer()
        self.roster = roster or Roster()
        self.layout = LayoutEngine()
        self.interaction = InteractionController(self.layout, self.scheduler)

        self.show_party_view = False
        self.is_generating = False
        self.last_assessment: Optional[TeamAssessment] = None

        self.roster.add_completion_listener(self._on_roster_complete)

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_entity(self, entity: Entity) -> Optional[int]:
        """Place *entity* in the first free slot (ignored when full)."""
        return self.roster.place(entity)

    def remove_entity(self, index: int):
        self.roster.clear(index)
        if self.show_party_view and not self.roster.is_complete:
            self.edit_party()

    def _on_roster_complete(self, roster: Roster):
        if self.show_party_view:
            return
        logger.info("Opening party view in %d ms", PARTY_VIEW_DELAY_MS)
        self.scheduler.call_later(PARTY_VIEW_DELAY_MS, self._auto_open_party_view)

    def _auto_open_party_view(self):
        if self.roster.is_complete and not self.show_party_view:
            self.open_party_view()

    # ------------------------------------------------------------------
    # Party canvas
    # ------------------------------------------------------------------

    def open_party_view(self) -> bool:
        """Enter the canvas; requires a complete roster."""
        if not self.roster.is_complete:
            logger.info("Party view needs a complete roster (%d/%d)",
                        self.roster.filled_count, self.roster.size)
            return False
        self.show_party_view = True
        self._layout_party()
        return True

    def edit_party(self):
        """Leave the canvas; positions and drag state are discarded."""
        self.show_party_view = False
        self.interaction.reset()
        self.layout.reset()

    def handle_resize(self):
        """Re-pull viewport geometry and lay the grid out again.

        Any drag in progress is cancelled so a queued move cannot land on
        the fresh grid.
        """
        if self.show_party_view:
            self.interaction.cancel_drag()
            self._layout_party()

    def _layout_party(self):
        self.layout.recompute(
            self.roster,
            self.viewport.viewport_size(),
            self.viewport.title_bottom(),
        )

    @property
    def positions(self) -> PositionMap:
        return self.layout.positions

    def pointer_down(self, entity_id: int, pointer: Point) -> bool:
        if not self.show_party_view:
            return False
        return self.interaction.pointer_down(entity_id, pointer)

    def pointer_move(self, pointer: Point) -> bool:
        return self.interaction.pointer_move(pointer)

    def pointer_up(self) -> Optional[Gesture]:
        return self.interaction.pointer_up()

    def celebrate(self):
        """Fire the particle burst once and jump every member in turn."""
        self.celebration_effect(CelebrationBurst())
        self.interaction.celebrate(self.roster)

    # ------------------------------------------------------------------
    # Assessment
    # ------------------------------------------------------------------

    def request_assessment(
        self,
        personality: PersonalityInputs,
        on_ready: Optional[AssessmentCallback] = None,
    ) -> TeamAssessment:
        """Score the team and surface the result after a pacing delay.

        The assessment itself is computed immediately and returned; the
        delay only controls when *on_ready* fires and ``last_assessment``
        is published.

        Raises:
            ValidationError: If the roster is incomplete or a personality
                field is missing. Nothing is scheduled in that case.
        """
        if self.is_generating:
            raise ValidationError("An assessment is already being generated")

        assessment = self.scorer.assess(self.roster, personality)
        self.is_generating = True

        def publish():
            self.is_generating = False
            self.last_assessment = assessment
            if on_ready is not None:
                on_ready(assessment)

        self.scheduler.call_later(ASSESSMENT_DELAY_MS, publish)
        return assessment

    def member_names(self) -> List[str]:
        return [member.name for member in self.roster.members()]
