import logging
import uuid

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from sorting_visualizer.arrays import (
    generate_random_array,
    parse_custom_array,
    rejected_tokens,
    validate_array_input,
)
from sorting_visualizer.config import DefaultConfig
from sorting_visualizer.dispatcher import ALGORITHM_INFO, get_sorting_steps, resolve_algorithm
from sorting_visualizer.elements import make_elements
from sorting_visualizer.playback import Playback

app = Flask(__name__)
app.config.from_object(DefaultConfig)
app.config.from_prefixed_env("SORTVIZ")

# In-memory store (OK for local demo)
RUNS = {}


# ---------------- Utilities ----------------
def _clamped(raw, cast, default, low, high):
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        value = default
    return max(low, min(value, high))


def _algorithm_from(values):
    algo = values.get("algorithm", app.config["DEFAULT_ALGORITHM"])
    if resolve_algorithm(algo) is None:
        app.logger.warning("Unknown algorithm %r, falling back to %s", algo, app.config["DEFAULT_ALGORITHM"])
        return app.config["DEFAULT_ALGORITHM"]
    return algo


def _build_elements(custom, size):
    """Elements from user text when given, else a random array. Returns (elements, error)."""
    cfg = app.config
    if custom:
        ok, error = validate_array_input(custom, cfg["CUSTOM_MAX_VALUE"], cfg["CUSTOM_MAX_COUNT"])
        if not ok:
            return None, error
        values = parse_custom_array(custom, cfg["CUSTOM_MAX_VALUE"], cfg["CUSTOM_MAX_COUNT"])
        return make_elements(values), None
    return generate_random_array(size, cfg["MIN_VALUE"], cfg["MAX_VALUE"]), None


def _current_run():
    run_id = session.get("run_id")
    if not run_id or run_id not in RUNS:
        return None
    return RUNS[run_id]


# ---------------- Routes ----------------
@app.route("/", methods=["GET"])
def index():
    return render_template("index.html", algos=ALGORITHM_INFO)


@app.route("/start", methods=["POST"])
def start():
    cfg = app.config
    # a new run replaces the session's previous trace
    RUNS.pop(session.get("run_id"), None)
    algo = _algorithm_from(request.form)
    size = _clamped(request.form.get("size"), int, cfg["DEFAULT_SIZE"], cfg["MIN_SIZE"], cfg["MAX_SIZE"])
    # speed from form is in SECONDS
    speed = _clamped(request.form.get("speed"), float, cfg["DEFAULT_SPEED"], cfg["MIN_SPEED"], cfg["MAX_SPEED"])
    autoplay = request.form.get("autoplay") == "on"

    elements, error = _build_elements(request.form.get("custom", "").strip(), size)
    if error:
        flash(error)
        return redirect(url_for("index"))

    steps = get_sorting_steps(algo, elements)
    run_id = str(uuid.uuid4())
    RUNS[run_id] = {
        "algo": algo,
        "playback": Playback(steps, autoplay=autoplay, speed=speed),
        "size": len(elements),
    }
    session["run_id"] = run_id
    app.logger.info("Run %s: %s over %d elements, %d steps", run_id, algo, len(elements), len(steps))
    return redirect(url_for("view"))


@app.route("/view", methods=["GET"])
def view():
    run = _current_run()
    if run is None:
        return redirect(url_for("index"))

    playback = run["playback"]
    frame = playback.current
    max_value = max((e.value for e in frame.array), default=1) if frame else 1
    return render_template(
        "view.html",
        info=ALGORITHM_INFO[resolve_algorithm(run["algo"])],
        playback=playback,
        frame=frame,
        max_value=max_value or 1,
        size=run["size"],
    )


@app.route("/advance", methods=["POST", "GET"])
def advance():
    # GET is used by meta refresh; POST by buttons (Prev/Next)
    run = _current_run()
    if run is None:
        return redirect(url_for("index"))
    direction = request.values.get("dir", "next")
    try:
        run["playback"].apply(direction)
    except ValueError:
        app.logger.warning("Ignoring playback direction %r", direction)
    return redirect(url_for("view"))


@app.route("/reset", methods=["POST"])
def reset():
    run_id = session.pop("run_id", None)
    RUNS.pop(run_id, None)
    return redirect(url_for("index"))


@app.route("/api/trace", methods=["GET"])
def api_trace():
    """Whole trace as JSON, for players that animate in the browser."""
    cfg = app.config
    algo = request.args.get("algorithm", cfg["DEFAULT_ALGORITHM"])
    size = _clamped(request.args.get("size"), int, cfg["DEFAULT_SIZE"], cfg["MIN_SIZE"], cfg["MAX_SIZE"])
    values = request.args.get("values", "").strip()
    # the form forgives bad tokens, the API must sort exactly what it was sent
    rejected = rejected_tokens(values, cfg["CUSTOM_MAX_VALUE"])
    if rejected:
        return jsonify({
            "error": f"Values must be integers from 1 to {cfg['CUSTOM_MAX_VALUE']}",
            "rejected": rejected,
        }), 400
    elements, error = _build_elements(values, size)
    if error:
        return jsonify({"error": error}), 400
    steps = get_sorting_steps(algo, elements)
    return jsonify({
        "algorithm": algo,
        "total": len(steps),
        "steps": [s.to_dict() for s in steps],
    })


if __name__ == "__main__":
    logging.basicConfig(level=app.config["LOG_LEVEL"])
    # Host locally; debug=True for development
    app.run(debug=True)
