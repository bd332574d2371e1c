"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                          – main UI
  POST /api/array/generate        – generate a new random array
  POST /api/config/algo           – choose the sorting algorithm
  POST /api/config/speed          – set the animation speed slider
  POST /api/config/learning_mode  – show / hide step explanations
  POST /api/run                   – build the step trace
  POST /api/step/next             – advance one step
  POST /api/step/prev             – rewind one step
  POST /api/step/goto             – jump to step N
  GET  /api/state                 – current app state (for polling)
  GET  /api/export                – the current run as JSON

State management:
  Small per-browser settings live in the Flask session cookie:
    • array            – the unsorted input
    • selected_algo
    • array_size / speed_value
    • learning_mode
  Traces can be thousands of frames, so they stay server-side in
  _RUNS, keyed by a per-session id.  A new trace is built completely
  and only then replaces the old Recorder; changing the array or the
  algorithm discards it.  At most MAX_RUNS traces are kept; the least
  recently used one is evicted first, and an evicted session simply
  rebuilds on its next request.

  Each Recorder carries its own lock.  Routes that move or read its
  Stepper hold that lock, so an autoplay tick and a button click on the
  same session are applied one after the other.

Autoplay runs in the browser: a timer calls /api/step/next every
`speed_ms` until the response says `is_done`.

Environment:
  SORTVIS_HOST, SORTVIS_PORT, SORTVIS_DEBUG, SORTVIS_SECRET_KEY,
  SORTVIS_LOG_LEVEL, SORTVIS_MAX_RUNS
"""

from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets
import sys
import os
import threading
import uuid
from collections import OrderedDict
from typing import Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import DEFAULT_ALGORITHM, REGISTRY, get_algorithm, list_algorithms
from algorithms.step import Step
from arrays import generate_random_array, DEFAULT_ARRAY_SIZE, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE
from engine import Recorder
from engine.stepper import SLIDER_MIN, SLIDER_MAX, SLIDER_OFFSET
from ui import (
    render_bars,
    playback_controls,
    algorithm_selector,
    array_controls,
    legend,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
    mode_toggle,
)


logger = logging.getLogger(__name__)

DEFAULT_SPEED_VALUE = SLIDER_OFFSET - 100     # 100 ms per step

app = Flask(__name__)
app.secret_key = os.environ.get("SORTVIS_SECRET_KEY") or secrets.token_hex(32)

# session id → finished run, least recently used first
MAX_RUNS   = int(os.environ.get("SORTVIS_MAX_RUNS", "256"))
_RUNS:      "OrderedDict[str, Recorder]" = OrderedDict()
_RUNS_LOCK = threading.Lock()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_sid() -> str:
    if "sid" not in session:
        session["sid"] = uuid.uuid4().hex
    return session["sid"]


def get_array() -> list:
    """Input array from session, or a fresh random one."""
    if "array" not in session:
        session["array"] = generate_random_array(session.get("array_size", DEFAULT_ARRAY_SIZE))
    return list(session["array"])


def get_state():
    """Return current app state as a dict."""
    run = get_run()
    stepper = run.stepper if run else None
    return {
        "selected_algo": session.get("selected_algo", DEFAULT_ALGORITHM),
        "array_size":    session.get("array_size", DEFAULT_ARRAY_SIZE),
        "speed_value":   session.get("speed_value", DEFAULT_SPEED_VALUE),
        "learning_mode": session.get("learning_mode", True),
        "current_step":  stepper.current_idx if stepper else 0,
        "total_steps":   stepper.total_steps if stepper else 0,
        "is_done":       stepper.is_finished if stepper else False,
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def get_run() -> Optional[Recorder]:
    sid = get_sid()
    with _RUNS_LOCK:
        rec = _RUNS.get(sid)
        if rec is not None:
            _RUNS.move_to_end(sid)
        return rec


def discard_run() -> None:
    with _RUNS_LOCK:
        _RUNS.pop(get_sid(), None)


def build_run() -> Recorder:
    """Build the whole trace for the current array + algorithm, then publish it."""
    state = get_state()
    rec = Recorder()
    rec.start(state["selected_algo"], get_array())
    rec.run_to_completion()
    rec.stepper.set_speed_slider(state["speed_value"])
    sid = get_sid()
    with _RUNS_LOCK:
        _RUNS[sid] = rec
        _RUNS.move_to_end(sid)
        while len(_RUNS) > MAX_RUNS:
            evicted, _ = _RUNS.popitem(last=False)
            logger.debug("Evicted run for session %s", evicted)
    return rec


def ensure_run() -> Recorder:
    return get_run() or build_run()


def speed_ms(speed_value: int) -> int:
    return SLIDER_OFFSET - speed_value


def frame_payload(rec: Optional[Recorder]) -> dict:
    """Everything the page needs to redraw the current frame."""
    state  = get_state()
    values = get_array()

    if rec is not None:
        stepper = rec.stepper
        frame   = stepper.current_frame
        line    = frame.pseudocode_line if stepper.current_idx > 0 else -1
    else:
        frame   = Step(array=values)
        line    = -1

    algo_info = get_algorithm(state["selected_algo"])
    return {
        "svg": render_bars(frame, max_value=max(values) if values else None),
        "pseudocode": pseudocode_viewer(algo_info.pseudocode, line),
        "explanation": explanation_panel(frame.explanation, show=state["learning_mode"]),
        "playback": playback_controls(
            current_step=state["current_step"],
            total_steps=state["total_steps"],
            is_done=state["is_done"],
        ),
        "current_step": state["current_step"],
        "total_steps": state["total_steps"],
        "is_done": state["is_done"],
        "speed_ms": speed_ms(state["speed_value"]),
    }


def _json_body() -> dict:
    return request.get_json(silent=True) or {}


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state   = get_state()
    run     = get_run()
    payload = frame_payload(run)

    html = render_template_string(INDEX_TEMPLATE,
        svg=payload["svg"],
        playback=payload["playback"],
        algo_selector=algorithm_selector(list_algorithms(), state["selected_algo"]),
        array_controls=array_controls(state["array_size"], state["speed_value"]),
        legend=legend(),
        analytics=analytics_panel(run.metrics if run else None),
        pseudocode=payload["pseudocode"],
        explanation=payload["explanation"],
        mode_toggle=mode_toggle(learning_mode=state["learning_mode"]),
        speed_ms=payload["speed_ms"],
    )
    return html


# ---------------------------------------------------------------------------
# API: Array Generation
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = _json_body()
    size = data.get("size", session.get("array_size", DEFAULT_ARRAY_SIZE))

    try:
        size = int(size)
        if not MIN_ARRAY_SIZE <= size <= MAX_ARRAY_SIZE:
            raise ValueError(f"Array size must be between {MIN_ARRAY_SIZE} and {MAX_ARRAY_SIZE}")
        values = generate_random_array(size)
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    set_state(array=values, array_size=size)
    discard_run()
    logger.debug("New array of %d values for session %s", size, get_sid())

    payload = frame_payload(None)
    payload["array"] = values
    payload["analytics"] = analytics_panel()
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = _json_body().get("algo_key", DEFAULT_ALGORITHM)
    if algo_key not in REGISTRY:
        algo_key = get_algorithm(algo_key).key
    set_state(selected_algo=algo_key)
    discard_run()

    payload = frame_payload(None)
    payload["algo_key"] = algo_key
    payload["algo_selector"] = algorithm_selector(list_algorithms(), algo_key)
    payload["analytics"] = analytics_panel()
    return jsonify(payload)


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    try:
        value = int(_json_body().get("value", DEFAULT_SPEED_VALUE))
    except (TypeError, ValueError):
        return jsonify({"error": "Speed must be a number"}), 400
    value = min(SLIDER_MAX, max(SLIDER_MIN, value))
    set_state(speed_value=value)

    run = get_run()
    if run:
        with run.lock:
            run.stepper.set_speed_slider(value)
    return jsonify({"speed_value": value, "speed_ms": speed_ms(value)})


@app.route("/api/config/learning_mode", methods=["POST"])
def api_config_learning_mode():
    enabled = bool(_json_body().get("enabled", True))
    set_state(learning_mode=enabled)
    payload = frame_payload(get_run())
    payload["learning_mode"] = enabled
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    rec = ensure_run()
    with rec.lock:
        rec.stepper.rewind()
        payload = frame_payload(rec)
    payload["analytics"] = analytics_panel(rec.metrics)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    run = get_run()
    rec = run or build_run()
    with rec.lock:
        rec.stepper.next_step()
        payload = frame_payload(rec)
    if run is None:
        payload["analytics"] = analytics_panel(rec.metrics)
    return jsonify(payload)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    rec = get_run()
    if rec is None:
        return jsonify({"error": "Already at first step"}), 400
    with rec.lock:
        if not rec.stepper.prev_step():
            return jsonify({"error": "Already at first step"}), 400
        payload = frame_payload(rec)
    return jsonify(payload)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    rec = ensure_run()
    try:
        idx = int(_json_body().get("index", 0))
    except (TypeError, ValueError):
        return jsonify({"error": "Invalid step index"}), 400

    with rec.lock:
        if not rec.stepper.goto_step(idx):
            return jsonify({"error": "Invalid step index"}), 400
        payload = frame_payload(rec)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: State / Export
# ---------------------------------------------------------------------------
@app.route("/api/state", methods=["GET"])
def api_state():
    state = get_state()
    state["array"] = get_array()
    state["speed_ms"] = speed_ms(state["speed_value"])
    return jsonify(state)


@app.route("/api/export", methods=["GET"])
def api_export():
    rec = get_run()
    if rec is None:
        return jsonify({"error": "Nothing to export, build the steps first"}), 400
    return jsonify(rec.export())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-purple: #a855f7;
      --accent-emerald: #10b981;
      --glow-purple: rgba(168, 85, 247, 0.35);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 16px;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 260px;
      max-height: 340px;
      overflow: hidden;
    }

    #pseudocode-container, #explanation-container {
      display: flex;
      flex-direction: column;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 20px;
      overflow: hidden;
    }

    h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      overflow-y: auto;
      flex: 1;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
    }

    .code-line { padding: 4px 12px; border-radius: 6px; white-space: pre; }

    .code-line.highlight {
      background: linear-gradient(90deg, rgba(168, 85, 247, 0.2) 0%, transparent 100%);
      border-left: 3px solid var(--accent-purple);
      padding-left: 9px;
      box-shadow: 0 0 20px var(--glow-purple);
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }

    button {
      background: linear-gradient(135deg, var(--accent-purple), #7c3aed);
      color: #fff;
      border: none;
      padding: 10px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }

    button:disabled { opacity: 0.4; cursor: not-allowed; }

    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); width: 100%; margin-top: 10px; }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); width: 100%; margin-top: 10px; }

    select, input[type="range"] {
      width: 100%;
      margin: 6px 0;
      padding: 8px;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }

    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
      letter-spacing: 0.3px;
    }

    .step-info {
      font-size: 13px;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-radius: 6px;
      border-left: 3px solid var(--accent-purple);
    }

    .finished-badge {
      background: var(--accent-emerald);
      color: #fff;
      padding: 2px 8px;
      border-radius: 6px;
      font-size: 11px;
      font-weight: 700;
    }

    .legend { display: flex; flex-wrap: wrap; gap: 16px; font-size: 13px; color: var(--text-secondary); }
    .legend-item { display: flex; align-items: center; gap: 6px; }
    .swatch { width: 14px; height: 14px; border-radius: 3px; display: inline-block; }

    table { width: 100%; font-size: 13px; }
    table td { padding: 6px 4px; }
    table td:last-child { text-align: right; font-family: 'JetBrains Mono', monospace; }

    .hint, .placeholder { font-size: 12px; color: var(--text-muted); margin-top: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="mode-toggle">{{ mode_toggle|safe }}</div>
    <div id="algo-selector-wrap">{{ algo_selector|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="array-controls">{{ array_controls|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
      {{ legend|safe }}
    </div>
    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let speedMs = {{ speed_ms }};
    let timer = null;
    let isDone = false;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function apply(data) {
      if (data.error) return;
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.algo_selector) document.getElementById('algo-selector-wrap').innerHTML = data.algo_selector;
      if (data.playback) document.getElementById('playback').innerHTML = data.playback;
      if (data.is_done !== undefined) isDone = data.is_done;
      if (data.speed_ms) speedMs = data.speed_ms;
    }

    function stop() {
      if (timer !== null) { clearTimeout(timer); timer = null; }
    }

    async function tick() {
      const data = await post('/api/step/next');
      apply(data);
      if (timer === null) return;
      if (isDone) { stop(); return; }
      setPlaying(true);
      timer = setTimeout(tick, speedMs);
    }

    function setPlaying(playing) {
      const btn = document.getElementById('btn-play');
      if (btn && !isDone) btn.textContent = playing ? '⏸ Pause' : '▶ Start';
    }

    document.addEventListener('click', async (e) => {
      const id = e.target.id;
      if (id === 'btn-play') {
        if (timer !== null) { stop(); setPlaying(false); return; }
        timer = setTimeout(tick, 0);
      } else if (id === 'btn-next') {
        stop(); apply(await post('/api/step/next'));
      } else if (id === 'btn-prev') {
        stop(); apply(await post('/api/step/prev'));
      } else if (id === 'btn-rewind') {
        stop(); apply(await post('/api/step/goto', {index: 0}));
      } else if (id === 'btn-run') {
        stop(); apply(await post('/api/run'));
      } else if (id === 'btn-new-array') {
        stop();
        const size = +document.getElementById('array-size').value;
        apply(await post('/api/array/generate', {size: size}));
      }
    });

    document.addEventListener('input', (e) => {
      if (e.target.id === 'array-size') {
        document.getElementById('array-size-val').textContent = e.target.value + ' elements';
      } else if (e.target.id === 'speed-slider') {
        document.getElementById('speed-val').textContent = (Math.round(e.target.value / 5 * 10) / 10) + 'x';
      }
    });

    document.addEventListener('change', async (e) => {
      const id = e.target.id;
      if (id === 'algo-selector') {
        stop(); apply(await post('/api/config/algo', {algo_key: e.target.value}));
      } else if (id === 'array-size') {
        stop(); apply(await post('/api/array/generate', {size: +e.target.value}));
      } else if (id === 'speed-slider') {
        apply(await post('/api/config/speed', {value: +e.target.value}));
      } else if (id === 'learning-mode-toggle') {
        apply(await post('/api/config/learning_mode', {enabled: e.target.checked}));
      }
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("SORTVIS_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host  = os.environ.get("SORTVIS_HOST", "0.0.0.0")
    port  = int(os.environ.get("SORTVIS_PORT", "5000"))
    debug = os.environ.get("SORTVIS_DEBUG", "1").lower() in ("1", "true", "yes")

    logger.info("Sorting Visualizer starting on http://%s:%d", host, port)
    app.run(debug=debug, host=host, port=port)
