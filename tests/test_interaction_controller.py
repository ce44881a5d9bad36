"""Tests for the pointer state machine, move coalescing and jump highlights."""

from src.layout_engine.config import (
    CELEBRATION_JUMP_MS,
    CELEBRATION_STAGGER_MS,
    CLICK_JUMP_MS,
)
from src.layout_engine.drag_session import DragSession, Gesture
from src.layout_engine.geometry import LayoutEngine, Point, ViewportSize
from src.layout_engine.interaction_controller import InteractionController
from src.layout_engine.scheduler import FrameScheduler
from src.party_manager.entity import Entity
from src.party_manager.roster import Roster


# ── Helpers ──────────────────────────────────────────────────────────

def _make_roster():
    roster = Roster()
    for i in range(1, 7):
        roster.place(Entity(id=i, name=f"Mon{i}"))
    return roster


def _make_controller():
    """Controller over a 1000px-wide layout; entity 1 sits at (286, 212)."""
    roster = _make_roster()
    layout = LayoutEngine()
    layout.recompute(roster, ViewportSize(1000, 800))
    scheduler = FrameScheduler()
    return InteractionController(layout, scheduler), layout, scheduler, roster


# ── DragSession ──────────────────────────────────────────────────────

class TestDragSession:
    def test_target_keeps_grab_point(self):
        session = DragSession(entity_id=1, grab_offset=Point(10, 20))
        assert session.target_for(Point(110, 220)) == Point(100, 200)
        assert session.dragging is False


# ── Press ────────────────────────────────────────────────────────────

class TestPointerDown:
    def test_starts_session_with_grab_offset(self):
        ctrl, _, _, _ = _make_controller()
        assert ctrl.pointer_down(1, Point(300, 220)) is True
        assert ctrl.session.entity_id == 1
        assert ctrl.session.grab_offset == Point(14, 8)
        assert ctrl.is_dragging is False

    def test_unknown_entity_ignored(self):
        ctrl, _, _, _ = _make_controller()
        assert ctrl.pointer_down(99, Point(0, 0)) is False
        assert ctrl.session is None

    def test_second_press_ignored(self):
        ctrl, _, _, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        assert ctrl.pointer_down(2, Point(450, 220)) is False
        assert ctrl.session.entity_id == 1


# ── Click vs drag ────────────────────────────────────────────────────

class TestClickVersusDrag:
    def test_press_release_is_click(self):
        ctrl, layout, _, _ = _make_controller()
        before = layout.positions
        ctrl.pointer_down(1, Point(300, 220))
        assert ctrl.pointer_up() == Gesture.CLICK
        assert layout.positions == before
        assert ctrl.is_jumping(1) is True

    def test_press_move_release_is_drag(self):
        ctrl, layout, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(400, 300))
        scheduler.run_frame()
        assert ctrl.pointer_up() == Gesture.DRAG
        assert layout.get_position(1) == Point(386, 292)
        assert ctrl.is_jumping(1) is False

    def test_release_before_frame_keeps_final_position(self):
        ctrl, layout, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(400, 300))
        assert ctrl.pointer_up() == Gesture.DRAG
        assert layout.get_position(1) == Point(386, 292)
        scheduler.run_frame()
        assert layout.get_position(1) == Point(386, 292)

    def test_first_move_sets_dragging(self):
        ctrl, _, _, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(301, 220))
        assert ctrl.is_dragging is True
        assert ctrl.is_moving(1) is True
        assert ctrl.is_moving(2) is False

    def test_release_clears_session(self):
        ctrl, _, _, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(320, 230))
        ctrl.pointer_up()
        assert ctrl.session is None
        assert ctrl.is_dragging is False

    def test_release_without_session(self):
        ctrl, _, _, _ = _make_controller()
        assert ctrl.pointer_up() is None

    def test_move_without_session(self):
        ctrl, layout, scheduler, _ = _make_controller()
        before = layout.positions
        assert ctrl.pointer_move(Point(10, 10)) is False
        scheduler.run_frame()
        assert layout.positions == before

    def test_click_after_recompute_dropped_entry(self):
        ctrl, layout, _, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        layout.reset()
        assert ctrl.pointer_up() == Gesture.CLICK
        assert ctrl.is_jumping(1) is False


# ── Frame coalescing ─────────────────────────────────────────────────

class TestMoveCoalescing:
    def test_one_frame_request_per_frame(self):
        ctrl, _, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        for x in range(310, 360, 10):
            ctrl.pointer_move(Point(x, 220))
        assert scheduler.pending_frames == 1

    def test_latest_move_wins(self):
        ctrl, layout, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(310, 220))
        ctrl.pointer_move(Point(500, 500))
        scheduler.run_frame()
        assert layout.get_position(1) == Point(486, 492)

    def test_no_commit_before_frame(self):
        ctrl, layout, _, _ = _make_controller()
        before = layout.get_position(1)
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(500, 500))
        assert layout.get_position(1) == before

    def test_new_frame_requested_after_commit(self):
        ctrl, layout, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(310, 220))
        scheduler.run_frame()
        ctrl.pointer_move(Point(320, 220))
        assert scheduler.pending_frames == 1
        scheduler.run_frame()
        assert layout.get_position(1) == Point(306, 212)


# ── Jumps ────────────────────────────────────────────────────────────

class TestJumps:
    def test_click_jump_expires(self):
        ctrl, _, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_up()
        scheduler.advance(CLICK_JUMP_MS - 1)
        assert ctrl.is_jumping(1) is True
        scheduler.advance(1)
        assert ctrl.is_jumping(1) is False

    def test_repeat_jump_extends(self):
        ctrl, _, scheduler, _ = _make_controller()
        ctrl.jump(1, 250)
        scheduler.advance(200)
        ctrl.jump(1, 250)
        scheduler.advance(60)
        assert ctrl.is_jumping(1) is True
        scheduler.advance(200)
        assert ctrl.is_jumping(1) is False

    def test_celebration_staggered_by_slot(self):
        ctrl, _, scheduler, roster = _make_controller()
        ctrl.celebrate(roster)
        scheduler.advance(0)
        assert ctrl.jumping_ids == {1}
        scheduler.advance(CELEBRATION_STAGGER_MS)
        assert ctrl.jumping_ids == {1, 2}
        scheduler.advance(CELEBRATION_STAGGER_MS * 4)
        assert ctrl.jumping_ids == {1, 2, 3, 4, 5, 6}

    def test_celebration_ends(self):
        ctrl, _, scheduler, roster = _make_controller()
        ctrl.celebrate(roster)
        scheduler.advance(CELEBRATION_STAGGER_MS * 5 + CELEBRATION_JUMP_MS)
        assert ctrl.jumping_ids == frozenset()

    def test_celebration_skips_empty_slots(self):
        ctrl, _, scheduler, roster = _make_controller()
        roster.clear(0)
        ctrl.celebrate(roster)
        scheduler.advance(CELEBRATION_STAGGER_MS)
        assert ctrl.jumping_ids == {2}

    def test_celebration_does_not_cancel_drag(self):
        ctrl, layout, scheduler, roster = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(400, 300))
        ctrl.celebrate(roster)
        scheduler.tick(CELEBRATION_STAGGER_MS)
        assert ctrl.is_dragging is True
        assert layout.get_position(1) == Point(386, 292)


    def test_jump_without_position_skipped(self):
        ctrl, layout, _, _ = _make_controller()
        layout.reset()
        assert ctrl.jump(1, CLICK_JUMP_MS) is False
        assert ctrl.is_jumping(1) is False


class TestReset:
    def test_reset_clears_everything(self):
        ctrl, _, _, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.jump(2, 600)
        ctrl.reset()
        assert ctrl.session is None
        assert ctrl.jumping_ids == frozenset()

    def test_reset_drops_pending_celebration(self):
        ctrl, _, scheduler, roster = _make_controller()
        ctrl.celebrate(roster)
        scheduler.advance(CELEBRATION_STAGGER_MS)
        ctrl.reset()
        scheduler.advance(CELEBRATION_STAGGER_MS * 5)
        assert ctrl.jumping_ids == frozenset()

    def test_celebration_after_reset_still_runs(self):
        ctrl, _, scheduler, roster = _make_controller()
        ctrl.reset()
        ctrl.celebrate(roster)
        scheduler.advance(0)
        assert ctrl.jumping_ids == {1}

    def test_reset_rearms_frame_request(self):
        ctrl, layout, scheduler, _ = _make_controller()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(310, 220))
        ctrl.reset()
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(400, 300))
        assert scheduler.pending_frames == 2
        scheduler.run_frame()
        assert layout.get_position(1) == Point(386, 292)

    def test_cancel_drag_keeps_highlights(self):
        ctrl, layout, scheduler, _ = _make_controller()
        before = layout.get_position(1)
        ctrl.jump(2, CLICK_JUMP_MS)
        ctrl.pointer_down(1, Point(300, 220))
        ctrl.pointer_move(Point(500, 500))
        ctrl.cancel_drag()
        scheduler.run_frame()
        assert ctrl.session is None
        assert layout.get_position(1) == before
        assert ctrl.is_jumping(2) is True
