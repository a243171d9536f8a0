"""citybars configuration — layout constants, defaults, palette."""

from __future__ import annotations
import os

# ── Main view ────────────────────────────────────────────────────────────────
BAR_HEIGHT = int(os.environ.get("CITYBARS_BAR_HEIGHT", "20"))
LABEL_OFFSET = 5  # gap between bar end and label
LABEL_BASELINE = 13  # vertical centring of a label inside its bar

# ── Context view ─────────────────────────────────────────────────────────────
CONTEXT_BAR_HEIGHT = int(os.environ.get("CITYBARS_CONTEXT_BAR_HEIGHT", "2"))
CONTEXT_VIEW_WIDTH = int(os.environ.get("CITYBARS_CONTEXT_VIEW_WIDTH", "150"))

# ── Padding around the views (px) ────────────────────────────────────────────
PADDING_RIGHT = 100  # between main view and context view
PADDING_BOTTOM = 150

# ── Window ───────────────────────────────────────────────────────────────────
# Stands in for the host window size; fixed for the lifetime of a figure.
WINDOW_WIDTH = int(os.environ.get("CITYBARS_WINDOW_WIDTH", "1280"))
WINDOW_HEIGHT = int(os.environ.get("CITYBARS_WINDOW_HEIGHT", "800"))
DPI = 100

# ── Dataset ──────────────────────────────────────────────────────────────────
CITY_GROUP = os.environ.get("CITYBARS_GROUP", "City")

# Brand palette
COLORS = {
    "blue": "#0BB4FF",
    "yellow": "#FEC439",
    "background": "#F6F7F3",
    "red": "#F4743B",
    "light_red": "#FBCAB5",
    "black": "#3D3733",
    "gray": "#808080",
    "green": "#67A275",
    "light_green": "#C6DCCB",
}
