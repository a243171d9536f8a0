#!/usr/bin/env python3
"""
Declarative layout specification for the city frequency explorer
"""
from dataclasses import dataclass, field
import json

from citybars import config


@dataclass
class ExplorerColors:
    bg: str = config.COLORS["background"]
    fg: str = config.COLORS["black"]
    bar: str = config.COLORS["blue"]
    selected: str = config.COLORS["red"]
    context_bar: str = config.COLORS["gray"]
    viewport: str = config.COLORS["yellow"]
    viewport_alpha: float = 0.35


@dataclass
class ExplorerSpec:
    # Window (px)
    window_width: int = config.WINDOW_WIDTH
    window_height: int = config.WINDOW_HEIGHT
    dpi: int = config.DPI

    # Bars (px)
    bar_height: int = config.BAR_HEIGHT
    context_bar_height: int = config.CONTEXT_BAR_HEIGHT
    context_view_width: int = config.CONTEXT_VIEW_WIDTH

    # Padding (px)
    padding_right: int = config.PADDING_RIGHT
    padding_bottom: int = config.PADDING_BOTTOM

    # Labels
    label_offset: float = config.LABEL_OFFSET
    label_baseline: float = config.LABEL_BASELINE
    font: str = "DejaVu Sans"
    label_size: float = 9
    filter_label: str = "Filter"

    colors: ExplorerColors = field(default_factory=ExplorerColors)

    def __post_init__(self):
        if self.bar_height <= 0 or self.context_bar_height <= 0:
            raise ValueError("bar heights must be positive")
        if self.main_view_width <= 0 or self.main_view_height < self.bar_height:
            raise ValueError(
                f"window {self.window_width}x{self.window_height} is too small for the main view"
            )

    # Derived layout
    @property
    def main_view_width(self) -> int:
        return self.window_width - self.context_view_width - self.padding_right

    @property
    def main_view_height(self) -> int:
        return self.window_height - self.padding_bottom

    @property
    def bars_on_screen(self) -> int:
        """How many main-view bars fit vertically"""
        return self.main_view_height // self.bar_height

    @property
    def viewport_height(self) -> int:
        """Height of the draggable viewport in context units"""
        return self.context_bar_height * self.bars_on_screen

    @property
    def figsize(self):
        return (self.window_width / self.dpi, self.window_height / self.dpi)

    def to_json(self, filepath: str = None) -> str:
        """Export spec to JSON"""
        def serialize(obj):
            if hasattr(obj, '__dict__'):
                return obj.__dict__
            return obj

        json_str = json.dumps(self.__dict__, default=serialize, indent=2)
        if filepath:
            with open(filepath, 'w') as f:
                f.write(json_str)
        return json_str

    @classmethod
    def from_json(cls, filepath: str = None, json_str: str = None) -> 'ExplorerSpec':
        """Load spec from JSON"""
        if filepath:
            with open(filepath, 'r') as f:
                data = json.load(f)
        else:
            data = json.loads(json_str)

        # Reconstruct nested dataclasses
        if 'colors' in data and isinstance(data['colors'], dict):
            data['colors'] = ExplorerColors(**data['colors'])

        return cls(**data)


# Preset configurations
def get_default_spec(window_width: int = None, window_height: int = None) -> ExplorerSpec:
    """Spec sized to the given window, falling back to the configured size"""
    return ExplorerSpec(
        window_width=window_width or config.WINDOW_WIDTH,
        window_height=window_height or config.WINDOW_HEIGHT,
    )


def get_compact_spec() -> ExplorerSpec:
    """Small window with thinner bars, for laptops and snapshots"""
    return ExplorerSpec(
        window_width=900,
        window_height=600,
        bar_height=16,
        label_baseline=11,
        label_size=8,
    )
