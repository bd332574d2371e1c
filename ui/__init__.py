"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, bar_role, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    array_controls,
    legend,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
    mode_toggle,
)

__all__ = [
    "render_bars",
    "bar_role",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "array_controls",
    "legend",
    "analytics_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "mode_toggle",
]
