#!/usr/bin/env python3
"""
Figure layout and styling for the explorer views
"""
import matplotlib.pyplot as plt

from citybars.chartspec import ExplorerSpec


def apply_style(spec: ExplorerSpec):
    """Create a window-sized figure with main, context and filter axes.

    Axes are placed in figure fractions computed from the pixel layout, so the
    main view is exactly ``main_view_width`` x ``main_view_height`` pixels.
    """
    plt.rcParams['svg.fonttype'] = 'none'
    plt.rcParams['font.sans-serif'] = [spec.font, 'Arial', 'DejaVu Sans']
    plt.rcParams['font.size'] = spec.label_size

    W, H = float(spec.window_width), float(spec.window_height)
    fig = plt.figure(figsize=spec.figsize, dpi=spec.dpi, facecolor=spec.colors.bg)

    bottom = spec.padding_bottom / H
    height = spec.main_view_height / H
    ax_main = fig.add_axes([0, bottom, spec.main_view_width / W, height])
    ax_context = fig.add_axes([
        (spec.main_view_width + spec.padding_right) / W, bottom,
        spec.context_view_width / W, height,
    ])
    # Filter box sits in the bottom padding, leaving room for its label
    ax_filter = fig.add_axes([60 / W, (spec.padding_bottom / 2 - 15) / H, 240 / W, 30 / H])

    for ax in (ax_main, ax_context):
        style_axis(ax, spec)

    return fig, ax_main, ax_context, ax_filter


def style_axis(ax, spec: ExplorerSpec):
    """Strip an axis down to a bare drawing surface"""
    ax.set_facecolor(spec.colors.bg)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_navigate(False)


def set_pixel_extent(ax, width: float, height: float):
    """Data coordinates in pixels with y growing downwards"""
    ax.set_xlim(0, width)
    ax.set_ylim(max(height, 1), 0)


def export_with_svg(fig, base_filename: str, spec: ExplorerSpec = None):
    """Export both PNG and SVG versions"""
    # PNG export
    fig.savefig(f"{base_filename}.png",
                dpi=spec.dpi if spec else 100,
                facecolor=spec.colors.bg if spec else 'white')

    # SVG export for inspection
    fig.savefig(f"{base_filename}.svg",
                format='svg',
                facecolor=spec.colors.bg if spec else 'white')

    return f"{base_filename}.png", f"{base_filename}.svg"
