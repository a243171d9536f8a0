"""Explorer state and the draggable viewport state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from citybars import CityRecord
from citybars.window import clamp_viewport, window_bounds

logger = logging.getLogger(__name__)


@dataclass
class ExplorerState:
    """Everything that changes while the user pans and filters."""

    cities: List[CityRecord]
    bars_on_screen: int
    context_bar_height: float
    viewport_height: float
    active_low: int = 0
    active_high: int = 0
    viewport_y: float = 0.0
    filter_pattern: str = ""

    def __post_init__(self):
        # the first screenful is active at load
        self.active_low = 0
        self.active_high = min(self.bars_on_screen, len(self.cities))

    @classmethod
    def from_spec(cls, cities: List[CityRecord], spec) -> "ExplorerState":
        return cls(
            cities=cities,
            bars_on_screen=spec.bars_on_screen,
            context_bar_height=spec.context_bar_height,
            viewport_height=spec.viewport_height,
        )

    @property
    def context_view_height(self) -> float:
        return len(self.cities) * self.context_bar_height

    @property
    def max_viewport_y(self) -> float:
        return max(0.0, self.context_view_height - self.viewport_height)

    @property
    def active_cities(self) -> List[CityRecord]:
        return self.cities[self.active_low:self.active_high]

    def scroll_to(self, y: float) -> float:
        """Move the viewport to ``y`` (clamped) and re-slice the active window."""
        y = clamp_viewport(y, self.context_view_height, self.viewport_height)
        self.viewport_y = y
        self.active_low, self.active_high = window_bounds(
            y, self.viewport_height, self.context_bar_height, len(self.cities)
        )
        return y


class ViewportController:
    IDLE = "idle"
    DRAGGING = "dragging"

    def __init__(self, state: ExplorerState):
        self.state = state
        self.status = self.IDLE
        self._offset = 0.0
        self._listeners: List[Callable[[], None]] = []

    def on_window_change(self, fn: Callable[[], None]) -> None:
        """Register ``fn`` to run after every drag step; called in registration order."""
        self._listeners.append(fn)

    @property
    def dragging(self) -> bool:
        return self.status == self.DRAGGING

    def hit(self, pointer_y: float) -> bool:
        top = self.state.viewport_y
        return top <= pointer_y <= top + self.state.viewport_height

    def press(self, pointer_y: float) -> bool:
        if not self.hit(pointer_y):
            return False
        # drag by pointer delta, not to the pointer's absolute position
        self._offset = self.state.viewport_y - pointer_y
        self.status = self.DRAGGING
        logger.debug(f"Drag start at y={self.state.viewport_y:.1f}")
        return True

    def move(self, pointer_y: float) -> bool:
        if not self.dragging:
            return False
        self.state.scroll_to(pointer_y + self._offset)
        for fn in self._listeners:
            fn()
        return True

    def release(self) -> None:
        if self.dragging:
            logger.debug(
                f"Drag end: window [{self.state.active_low}, {self.state.active_high})"
            )
        self.status = self.IDLE
