#!/usr/bin/env python3
"""
Interactive City Frequency Explorer
Scrollable bar chart of city counts with a draggable overview and a live filter
"""

import logging

import matplotlib.pyplot as plt
from matplotlib.widgets import TextBox

from citybars.chartspec import ExplorerSpec, get_default_spec
from citybars.filtering import FilterController
from citybars.render import ContextChartRenderer, MainChartRenderer
from citybars.scales import width_scale
from citybars.state import ExplorerState, ViewportController
from citybars.style import apply_style, export_with_svg

logger = logging.getLogger(__name__)


class CityFrequencyExplorer:
    def __init__(self, cities, spec: ExplorerSpec = None):
        self.spec = spec or get_default_spec()
        self.state = ExplorerState.from_spec(cities, self.spec)
        self.viewport = ViewportController(self.state)
        self.filter = FilterController(self.state)

        self.fig, self.ax_main, self.ax_context, self.ax_filter = apply_style(self.spec)
        self.main = MainChartRenderer(
            self.ax_main, self.spec, width_scale(cities, self.spec.main_view_width))
        self.context = ContextChartRenderer(
            self.ax_context, self.spec, width_scale(cities, self.spec.context_view_width))

        self.context.draw(cities)
        self.main.update(self.state.active_cities)
        self.filter.apply()
        self.main.restyle(self.state.active_cities)

        self.text_box = TextBox(self.ax_filter, self.spec.filter_label + " ", initial="")
        self.text_box.on_text_change(self.set_filter)

        # Window changes must rebind bars before the filter runs
        self.viewport.on_window_change(self.refresh)

        canvas = self.fig.canvas
        self._cids = [
            canvas.mpl_connect('button_press_event', self.on_press),
            canvas.mpl_connect('motion_notify_event', self.on_motion),
            canvas.mpl_connect('button_release_event', self.on_release),
        ]
        logger.info(
            f"Explorer ready: {len(cities)} cities, {self.spec.bars_on_screen} bars on screen"
        )

    # ---------- state -> screen ----------

    def refresh(self):
        """Redraw after the active window moved"""
        self.context.move_viewport(self.state.viewport_y)
        self.main.update(self.state.active_cities)
        self.filter.apply()
        self.main.restyle(self.state.active_cities)
        self.fig.canvas.draw_idle()

    def set_filter(self, text: str):
        selected = self.filter.apply(text)
        self.main.restyle(self.state.active_cities)
        self.fig.canvas.draw_idle()
        return selected

    def scroll_to(self, y: float):
        """Pan programmatically, as if the viewport had been dragged to ``y``"""
        self.state.scroll_to(y)
        self.refresh()

    # ---------- pointer events ----------

    def _context_y(self, event):
        if event.inaxes is self.ax_context:
            return event.ydata
        # keep tracking once the pointer leaves the context axes mid-drag
        x, y = getattr(event, 'x', None), getattr(event, 'y', None)
        if x is None or y is None:
            return None
        return self.ax_context.transData.inverted().transform((x, y))[1]

    def on_press(self, event):
        if event.inaxes is not self.ax_context or event.button != 1 or event.ydata is None:
            return
        self.viewport.press(event.ydata)

    def on_motion(self, event):
        if not self.viewport.dragging:
            return
        y = self._context_y(event)
        if y is not None:
            self.viewport.move(y)

    def on_release(self, event):
        self.viewport.release()

    # ---------- output ----------

    def show(self):
        plt.show()

    def save(self, base_filename: str):
        paths = export_with_svg(self.fig, base_filename, self.spec)
        logger.info(f"Saved {paths[0]} and {paths[1]}")
        return paths

    def close(self):
        for cid in self._cids:
            self.fig.canvas.mpl_disconnect(cid)
        plt.close(self.fig)
