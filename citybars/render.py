"""Matplotlib renderers for the main (windowed) and context (overview) charts."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from matplotlib.patches import Rectangle
from matplotlib.text import Text

from citybars import CityRecord
from citybars.chartspec import ExplorerSpec
from citybars.scales import LinearScale
from citybars.style import set_pixel_extent
from citybars.window import Reconciliation, reconcile

logger = logging.getLogger(__name__)


class MainChartRenderer:
    """Bars and labels for the active window, keyed by city name."""

    def __init__(self, ax, spec: ExplorerSpec, scale: LinearScale):
        self.ax = ax
        self.spec = spec
        self.scale = scale
        self.bars: Dict[str, Rectangle] = {}
        self.labels: Dict[str, Text] = {}
        self.keys: List[str] = []
        set_pixel_extent(ax, spec.main_view_width, spec.main_view_height)

    def _place(self, key: str, index: int, value: int):
        y = index * self.spec.bar_height
        width = self.scale(value)
        bar = self.bars[key]
        bar.set_y(y)
        bar.set_width(width)
        label = self.labels[key]
        label.set_position((width + self.spec.label_offset, y + self.spec.label_baseline))
        label.set_text(key)

    def _enter(self, key: str):
        self.bars[key] = self.ax.add_patch(Rectangle(
            (0, 0), 0, self.spec.bar_height,
            facecolor=self.spec.colors.bar, edgecolor='none',
        ))
        self.labels[key] = self.ax.text(
            0, 0, key, ha='left', va='baseline',
            color=self.spec.colors.fg, fontsize=self.spec.label_size, clip_on=False,
        )

    def _exit(self, key: str):
        self.bars.pop(key).remove()
        self.labels.pop(key).remove()

    def update(self, records: Sequence[CityRecord]) -> Reconciliation:
        """Bring the drawn bars in line with ``records``."""
        new_keys = [r.key for r in records]
        diff = reconcile(self.keys, new_keys)
        for key in diff.exit:
            self._exit(key)
        for key in diff.enter:
            self._enter(key)
        for i, record in enumerate(records):
            self._place(record.key, i, record.value)
        self.keys = new_keys
        if diff.changed:
            logger.debug(f"Main chart: +{len(diff.enter)} -{len(diff.exit)} ={len(diff.update)}")
        return diff

    def restyle(self, records: Sequence[CityRecord]):
        colors = self.spec.colors
        for record in records:
            bar = self.bars.get(record.key)
            if bar is not None:
                bar.set_facecolor(colors.selected if record.selected else colors.bar)


class ContextChartRenderer:
    """Miniature bar per city across the whole list, plus the viewport."""

    def __init__(self, ax, spec: ExplorerSpec, scale: LinearScale):
        self.ax = ax
        self.spec = spec
        self.scale = scale
        self.bars = None
        self.viewport = None

    def draw(self, cities: Sequence[CityRecord]):
        spec = self.spec
        cbh = spec.context_bar_height
        context_height = len(cities) * cbh
        # The whole list is squeezed into the axes; drag math stays in context units
        set_pixel_extent(self.ax, spec.context_view_width, max(context_height, spec.viewport_height))

        self.bars = self.ax.barh(
            [i * cbh for i in range(len(cities))],
            self.scale([c.value for c in cities]) if cities else [],
            height=cbh, align='edge', color=spec.colors.context_bar, linewidth=0,
        )
        self.viewport = self.ax.add_patch(Rectangle(
            (0, 0), spec.context_view_width, spec.viewport_height,
            facecolor=spec.colors.viewport, alpha=spec.colors.viewport_alpha,
            edgecolor=spec.colors.fg, linewidth=0.8, zorder=3,
        ))
        logger.debug(f"Context chart: {len(cities)} bars, height {context_height}")
        return self.bars

    def move_viewport(self, y: float):
        self.viewport.set_y(y)
