"""
canvas.py — SVG Bar-Chart Renderer
====================================
Pure rendering function: Step → SVG string.

The renderer consumes:
  • step       – the frame to draw (array snapshot + highlighted indices)
  • config     – visual config (canvas size, colors, …)
  • max_value  – value that maps to a full-height bar

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - One bar per index.  Colour is picked by priority:
      swapping > comparing > sorted > pivot > unsorted
    so a bar being written stands out even inside the sorted region.
  - Heights are scaled against `max_value`; pass the input's max so
    the chart does not rescale between frames.
"""

from typing import Dict, Optional

from algorithms.step import Step


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:   int = 900
    height:  int = 360
    padding: int = 16
    bg:      str = "#0d1117"

    # bar colors (role → fill)
    bar_colors: Dict[str, str] = {
        "unsorted":  "#a855f7",   # purple
        "comparing": "#facc15",   # yellow
        "swapping":  "#ef4444",   # red
        "sorted":    "#22c55e",   # green
        "pivot":     "#6b21a8",   # dark purple
    }

    # bar
    bar_gap:        float = 2.0
    bar_min_width:  float = 2.0
    bar_max_width:  float = 30.0
    bar_radius:     int   = 2

    # value labels (only drawn when bars are wide enough)
    label_color:      str   = "#e6edf3"
    label_size:       int   = 11
    label_min_width:  float = 18.0


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    step: Step,
    config: CanvasConfig = CONFIG,
    max_value: Optional[int] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        step      : Frame to render.
        config    : Visual config.
        max_value : Value drawn at full height (defaults to the frame's max).
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    n = len(step.array)
    if n:
        top = max_value if max_value else max(step.array)
        top = max(top, 1)

        usable_w = config.width - 2 * config.padding
        usable_h = config.height - 2 * config.padding
        slot     = usable_w / n
        bar_w    = min(config.bar_max_width, max(config.bar_min_width, slot - config.bar_gap))
        # centre the chart when bars hit their max width
        x0 = config.padding + (usable_w - slot * n) / 2 + (slot - bar_w) / 2

        for idx, value in enumerate(step.array):
            h = usable_h * max(value, 0) / top
            x = x0 + idx * slot
            y = config.padding + usable_h - h
            svg_parts.append(_render_bar(idx, value, x, y, bar_w, h, bar_role(step, idx), config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def bar_role(step: Step, index: int) -> str:
    """Which colour role the bar at `index` takes in this frame."""
    if index in step.swapping:
        return "swapping"
    if index in step.comparing:
        return "comparing"
    if index in step.sorted:
        return "sorted"
    if step.pivot == index:
        return "pivot"
    return "unsorted"


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    idx: int,
    value: int,
    x: float,
    y: float,
    w: float,
    h: float,
    role: str,
    config: CanvasConfig,
) -> str:
    fill = config.bar_colors.get(role, config.bar_colors["unsorted"])
    parts = [
        f'<g class="bar {role}" data-index="{idx}" data-value="{value}">',
        f'  <rect x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
        f'rx="{config.bar_radius}" fill="{fill}"/>',
    ]
    if w >= config.label_min_width:
        parts.append(
            f'  <text x="{x + w / 2:.2f}" y="{y - 4:.2f}" text-anchor="middle" '
            f'font-size="{config.label_size}" font-family="\'DM Sans\', sans-serif" '
            f'fill="{config.label_color}">{value}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
