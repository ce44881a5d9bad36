from src.layout_engine.drag_session import DragSession, Gesture
from src.layout_engine.geometry import (
    LayoutEngine,
    Point,
    StaticViewport,
    ViewportSize,
    compute_initial_positions,
    compute_spacing,
)
from src.layout_engine.interaction_controller import InteractionController
from src.layout_engine.scheduler import FrameScheduler

__all__ = [
    "DragSession",
    "FrameScheduler",
    "Gesture",
    "InteractionController",
    "LayoutEngine",
    "Point",
    "StaticViewport",
    "ViewportSize",
    "compute_initial_positions",
    "compute_spacing",
]
