"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – play/pause/step/rewind + step counter
  • algorithm_selector      – dropdown of registered sorts
  • array_controls          – array-size and speed sliders, new-array button
  • legend                  – colour key for the bar chart
  • analytics_panel         – steps, comparisons, swaps, build time
  • pseudocode_viewer       – with live line highlighting
  • explanation_panel       – Learning Mode "why this step happened"
  • mode_toggle             – Learning Mode on/off

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from arrays import MIN_ARRAY_SIZE, MAX_ARRAY_SIZE
from engine import RunMetrics
from engine.stepper import SLIDER_MIN, SLIDER_MAX
from ui.canvas import CONFIG


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    is_done: bool = False,
) -> str:
    play_icon  = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else ("Sorted" if is_done else "Start")
    # the counter shows the last reachable index, not the trace length
    last_idx   = f" / {total_steps - 1}" if total_steps > 0 else ""

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-rewind" title="Reset to beginning" {'disabled' if current_step == 0 else ''}>⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-play" title="{play_label}" {'disabled' if is_done else ''}>{play_icon} {play_label}</button>
        <button id="btn-next" title="Step forward" {'disabled' if is_done else ''}>▶</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span><span id="total-steps">{last_idx}</span>
        {' <span class="finished-badge">SORTED</span>' if is_done else ''}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
) -> str:
    options = []
    description = ""
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        if sel:
            description = algo.description
        options.append(f'<option value="{algo.key}" {sel}>{algo.label}</option>')

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
      <p class="hint">{escape(description)}</p>
      <button id="btn-run" class="btn-primary">▶ Build Steps</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Controls
# ---------------------------------------------------------------------------
def array_controls(array_size: int, speed_value: int) -> str:
    speed_factor = round(speed_value / 5, 1)
    return f"""
    <div class="panel array-controls">
      <h3>📊 Array</h3>
      <label>Array Size: <span id="array-size-val">{array_size} elements</span>
        <input type="range" id="array-size" min="{MIN_ARRAY_SIZE}" max="{MAX_ARRAY_SIZE}" step="1" value="{array_size}">
      </label>
      <label>Animation Speed: <span id="speed-val">{speed_factor}x</span>
        <input type="range" id="speed-slider" min="{SLIDER_MIN}" max="{SLIDER_MAX}" step="10" value="{speed_value}">
      </label>
      <button id="btn-new-array" class="btn-secondary">↻ Generate New Array</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
_LEGEND_LABELS = [
    ("unsorted",  "Unsorted"),
    ("comparing", "Comparing"),
    ("swapping",  "Swapping"),
    ("sorted",    "Sorted"),
    ("pivot",     "Pivot (QuickSort)"),
]


def legend() -> str:
    items = []
    for role, label in _LEGEND_LABELS:
        color = CONFIG.bar_colors[role]
        items.append(
            f'<span class="legend-item"><span class="swatch" style="background: {color};"></span>{label}</span>'
        )
    return f"""<div class="legend">{''.join(items)}</div>"""


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📈 Analytics</h3>
          <p class="placeholder">Build the steps to see metrics.</p>
        </div>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📈 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{metrics.array_size}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps / Writes:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Build Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Memory:</td><td><strong>{metrics.memory_bytes // 1024} KB</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel (Learning Mode)
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "", show: bool = True) -> str:
    if not show:
        return """<div class="explanation-text" style="color: #7d8590; padding: 20px;">Learning mode disabled</div>"""

    if not explanation:
        return (
            '<div class="explanation-text">▶ Press <strong>Start</strong> or step forward '
            'to see what the algorithm does at each stage.</div>'
        )

    return f"""<div class="explanation-text">{escape(explanation)}</div>"""


# ---------------------------------------------------------------------------
# Mode Toggle (Learning vs Expert)
# ---------------------------------------------------------------------------
def mode_toggle(learning_mode: bool = True) -> str:
    return f"""
    <div class="panel mode-toggle">
      <h3>🎓 Mode</h3>
      <label>
        <input type="checkbox" id="learning-mode-toggle" {'checked' if learning_mode else ''}>
        Learning Mode (step explanations)
      </label>
    </div>
    """
