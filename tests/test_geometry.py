"""Tests for party grid layout and the live position map."""

import pytest

from src.layout_engine.config import FALLBACK_GRID_TOP
from src.layout_engine.geometry import (
    LayoutEngine,
    Point,
    StaticViewport,
    ViewportSize,
    compute_initial_positions,
    compute_spacing,
)
from src.party_manager.entity import Entity
from src.party_manager.roster import Roster


# ── Helpers ──────────────────────────────────────────────────────────

def _make_roster(count=6):
    roster = Roster()
    for i in range(1, count + 1):
        roster.place(Entity(id=i * 10, name=f"Mon{i}"))
    return roster


# ── Spacing ──────────────────────────────────────────────────────────

class TestComputeSpacing:
    def test_lower_clamp(self):
        assert compute_spacing(1000) == 150

    def test_upper_clamp(self):
        assert compute_spacing(2000) == 200

    def test_proportional_between(self):
        assert compute_spacing(1200) == pytest.approx(180)

    def test_tiny_viewport(self):
        assert compute_spacing(320) == 150


# ── Initial positions ────────────────────────────────────────────────

class TestComputeInitialPositions:
    def test_one_entry_per_member(self):
        positions = compute_initial_positions(_make_roster(), ViewportSize(1000, 800))
        assert set(positions) == {10, 20, 30, 40, 50, 60}

    def test_fallback_top_when_title_unmeasured(self):
        positions = compute_initial_positions(_make_roster(), ViewportSize(1000, 800))
        # grid width = 2 * 150 + 128 = 428, centred in 1000
        assert positions[10] == Point(286, FALLBACK_GRID_TOP)

    def test_row_major_grid(self):
        positions = compute_initial_positions(_make_roster(), ViewportSize(1000, 800))
        assert positions[30] == Point(586, 212)   # slot 2: row 0, col 2
        assert positions[40] == Point(286, 362)   # slot 3: row 1, col 0
        assert positions[50] == Point(436, 362)   # slot 4: row 1, col 1

    def test_anchored_below_title(self):
        positions = compute_initial_positions(
            _make_roster(), ViewportSize(1000, 800), anchor_bottom_y=100
        )
        assert positions[10].y == 140
        assert positions[40].y == 290

    def test_wide_viewport_uses_max_spacing(self):
        positions = compute_initial_positions(_make_roster(), ViewportSize(2000, 800))
        assert positions[20].x - positions[10].x == 200
        assert positions[40].y - positions[10].y == 200

    def test_empty_slots_skipped(self):
        roster = _make_roster()
        roster.clear(1)
        positions = compute_initial_positions(roster, ViewportSize(1000, 800))
        assert 20 not in positions
        assert positions[30] == Point(586, 212)


# ── LayoutEngine ─────────────────────────────────────────────────────

class TestLayoutEngine:
    def test_recompute_populates(self):
        engine = LayoutEngine()
        engine.recompute(_make_roster(), ViewportSize(1000, 800))
        assert engine.get_position(10) == Point(286, 212)

    def test_move_to(self):
        engine = LayoutEngine()
        engine.recompute(_make_roster(), ViewportSize(1000, 800))
        assert engine.move_to(10, Point(5, 5)) is True
        assert engine.get_position(10) == Point(5, 5)

    def test_move_unknown_id_is_noop(self):
        engine = LayoutEngine()
        engine.recompute(_make_roster(), ViewportSize(1000, 800))
        before = engine.positions
        assert engine.move_to(999, Point(5, 5)) is False
        assert engine.positions == before

    def test_recompute_discards_manual_moves(self):
        engine = LayoutEngine()
        roster = _make_roster()
        engine.recompute(roster, ViewportSize(1000, 800))
        engine.move_to(10, Point(5, 5))
        engine.recompute(roster, ViewportSize(2000, 800))
        expected = compute_initial_positions(roster, ViewportSize(2000, 800))
        assert engine.positions == expected

    def test_positions_is_a_copy(self):
        engine = LayoutEngine()
        engine.recompute(_make_roster(), ViewportSize(1000, 800))
        snapshot = engine.positions
        snapshot[10] = Point(0, 0)
        assert engine.get_position(10) != Point(0, 0)

    def test_reset(self):
        engine = LayoutEngine()
        engine.recompute(_make_roster(), ViewportSize(1000, 800))
        engine.reset()
        assert engine.positions == {}


class TestStaticViewport:
    def test_resize(self):
        viewport = StaticViewport(1000, 800, title_bottom=120)
        viewport.resize(1400, 900)
        assert viewport.viewport_size() == ViewportSize(1400, 900)
        assert viewport.title_bottom() == 120
