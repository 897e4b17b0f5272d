"""
main.py — Graph Trace Visualizer Flask App
===========================================
JSON service in front of the trace engine.  Rendering lives in the
browser; this server only computes traces and tracks playback.

Routes:
  GET  /api/algorithms         – registry metadata
  POST /api/run                – compute a trace and load it for playback
  GET  /api/state              – current playback state
  POST /api/step/next          – advance one event
  POST /api/step/prev          – rewind one event
  POST /api/step/goto          – jump to event N (-1 = before the first)
  POST /api/stop               – unload the trace
  POST /api/speed              – set playback speed (ms or preset name)
  POST /api/graph/adjacency    – adjacency list + matrix of a posted graph
  POST /api/graph/acyclic      – posted edges with cycle edges removed

State management:
  Each browser session gets a run id.  The playback state for that id is
  kept server-side in `_PLAYERS` (in-memory; traces outgrow a cookie fast).
  The store holds at most `config.MAX_PLAYERS` runs, least recently used
  evicted first; /api/stop frees the entry.
"""

import logging
import math
import uuid
from collections import OrderedDict

from flask import Flask, request, jsonify, session

import config
from graph import Graph, GraphSnapshot, Edge, make_acyclic
from algorithms import get_algorithm, list_algorithms
from engine import Stepper, Recorder, SPEED_PRESETS

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

_PLAYERS: "OrderedDict[str, dict]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def _run_id() -> str:
    if "run_id" not in session:
        session["run_id"] = uuid.uuid4().hex
    return session["run_id"]


def get_stepper() -> Stepper:
    """Rebuild this session's Stepper, or an idle one."""
    return Stepper.from_dict(_PLAYERS.get(_run_id(), {}))


def save_stepper(stepper: Stepper) -> None:
    run_id = _run_id()
    _PLAYERS[run_id] = stepper.to_dict()
    _PLAYERS.move_to_end(run_id)
    while len(_PLAYERS) > config.MAX_PLAYERS:
        evicted, _ = _PLAYERS.popitem(last=False)
        logger.info(f"Evicted playback state for run {evicted}")


def drop_stepper() -> None:
    _PLAYERS.pop(_run_id(), None)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object body")
    return data


def _bad_request(err: Exception):
    logger.warning(f"{request.path}: rejected request: {err}")
    return jsonify({"error": str(err)}), 400


def _position(stepper: Stepper) -> dict:
    event = stepper.current_event
    return {
        "is_running":   stepper.is_running,
        "current_step": stepper.current_step,
        "total_steps":  stepper.total_steps,
        "speed":        stepper.speed,
        "start_node":   stepper.start_node,
        "end_node":     stepper.end_node,
        "event":        event.to_dict() if event else None,
    }


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/run", methods=["POST"])
def api_run():
    try:
        data     = _json_body()
        algo_key = data.get("algorithm", "bfs")
        snapshot = GraphSnapshot.from_dict(data.get("graph", {}))
        start    = data.get("start")
        end      = data.get("end")
        speed    = data.get("speed")
        if isinstance(speed, str) and speed in SPEED_PRESETS:
            speed = SPEED_PRESETS[speed]
        elif speed is not None:
            speed = int(speed)

        rec = Recorder()
        metrics = rec.run(algo_key, snapshot, start, end)
    except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as e:
        return _bad_request(e)

    info = get_algorithm(algo_key)
    logger.info(
        f"Run {info.label}: {len(snapshot.nodes)} nodes, {len(snapshot.edges)} edges, "
        f"start={start!r} end={end!r} → {metrics.total_steps} events"
    )

    stepper = get_stepper()
    stepper.start(rec.trace, speed=speed, start_node=start, end_node=end)
    save_stepper(stepper)

    export = rec.export()
    return jsonify({
        "steps":        export["steps"],
        "metrics":      export["metrics"],
        "current_step": stepper.current_step,
        "total_steps":  stepper.total_steps,
    })


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    return jsonify(_position(get_stepper()))


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper = get_stepper()
    if not stepper.next_step():
        return jsonify({"error": "Already at last step"}), 400
    save_stepper(stepper)
    return jsonify(_position(stepper))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper = get_stepper()
    if not stepper.previous_step():
        return jsonify({"error": "Already at first step"}), 400
    save_stepper(stepper)
    return jsonify(_position(stepper))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    try:
        idx = int(_json_body().get("index", -1))
    except (ValueError, TypeError, OverflowError) as e:
        return _bad_request(e)

    stepper = get_stepper()
    if not stepper.goto_step(idx):
        return jsonify({"error": "Invalid step index"}), 400
    save_stepper(stepper)
    return jsonify(_position(stepper))


@app.route("/api/stop", methods=["POST"])
def api_stop():
    drop_stepper()
    return jsonify(_position(Stepper()))


@app.route("/api/speed", methods=["POST"])
def api_speed():
    try:
        speed = _json_body().get("speed", "medium")
        stepper = get_stepper()
        if isinstance(speed, str) and speed in SPEED_PRESETS:
            stepper.set_speed_preset(speed)
        else:
            stepper.set_speed(int(speed))
    except (ValueError, TypeError, OverflowError) as e:
        return _bad_request(e)

    save_stepper(stepper)
    return jsonify({"speed": stepper.speed})


# ---------------------------------------------------------------------------
# API: Graph helpers
# ---------------------------------------------------------------------------
@app.route("/api/graph/adjacency", methods=["POST"])
def api_graph_adjacency():
    try:
        g = Graph.from_dict(_json_body().get("graph", {}))
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        return _bad_request(e)

    ids, matrix = g.adjacency_matrix()
    return jsonify({
        "list": {
            nid: [{"target": t, "weight": w} for t, w in nbrs]
            for nid, nbrs in g.adjacency_list().items()
        },
        "matrix": {
            "nodes":  ids,
            # JSON has no infinity: "no edge" goes out as null
            "matrix": [[None if math.isinf(w) else w for w in row] for row in matrix],
        },
    })


@app.route("/api/graph/acyclic", methods=["POST"])
def api_graph_acyclic():
    try:
        edges = [Edge.from_dict(e) for e in _json_body().get("edges", [])]
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        return _bad_request(e)

    kept = make_acyclic(edges)
    return jsonify({"edges": [e.to_dict() for e in kept], "removed": len(edges) - len(kept)})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
