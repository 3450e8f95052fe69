"""
main.py — Data Structure Visualizer Flask App
==============================================
JSON API in front of the visualizer core.  The browser front-end owns
layout and drawing; it creates one session per page, sends operation
requests, and reads back the structure plus the current playback step.

Routes:
  GET  /                                   – route index
  GET  /api/algorithms                     – engine registry
  POST /api/session                        – create a session {"kind": …}
  GET  /api/session/<sid>                  – structure + playback + console
  DELETE /api/session/<sid>                – drop a session
  POST /api/session/<sid>/op               – run an operation {"op": …, "args": {…}}
  POST /api/session/<sid>/playback/<act>   – play | pause | toggle | next | prev | reset | seek | speed
  POST /api/session/<sid>/tick             – fire due playback timers
  GET  /api/session/<sid>/export           – last run's steps + metrics

State management:
  Sessions live in an in-process dict keyed by session id.  Nothing is
  persisted; restarting the server drops every page's state.
"""

import logging
import os
import secrets
from typing import Dict

from flask import Flask, jsonify, request

from algorithms import algorithms_for, list_algorithms
from engine import Config, VisualizerSession, configure_logging, KINDS
from structures import InvalidInput, UnknownOperation, VisualizerError

logger = logging.getLogger(__name__)

if os.environ.get("DSVIZ_CONFIG"):
    Config.load_from_file(os.environ["DSVIZ_CONFIG"])
configure_logging()

app = Flask(__name__)
app.secret_key = Config.secret_key or secrets.token_hex(32)

SESSIONS: Dict[str, VisualizerSession] = {}


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
class SessionNotFound(VisualizerError):
    pass


def get_session(sid: str) -> VisualizerSession:
    viz = SESSIONS.get(sid)
    if viz is None:
        raise SessionNotFound(f"No session '{sid}'")
    return viz


def body() -> dict:
    return request.get_json(silent=True) or {}


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(VisualizerError)
def handle_visualizer_error(exc: VisualizerError):
    status = 404 if isinstance(exc, SessionNotFound) else 400
    return jsonify({"error": str(exc), "type": type(exc).__name__}), status


# ---------------------------------------------------------------------------
# Index & registry
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    return jsonify({
        "name": "Data Structure Visualizer",
        "kinds": list(KINDS),
        "routes": sorted(str(rule) for rule in app.url_map.iter_rules() if rule.endpoint != "static"),
    })


@app.route("/api/algorithms")
def api_algorithms():
    structure = request.args.get("structure")
    infos = algorithms_for(structure) if structure else list_algorithms()
    return jsonify({"algorithms": [a.to_dict() for a in infos]})


# ---------------------------------------------------------------------------
# API: Sessions
# ---------------------------------------------------------------------------
@app.route("/api/session", methods=["POST"])
def api_session_create():
    data = body()
    kind = data.get("kind", "")
    viz = VisualizerSession(kind)
    if data.get("sample"):
        viz.run_operation("sample")
    SESSIONS[viz.id] = viz
    logger.info("created %s session %s", kind, viz.id)
    return jsonify({"session_id": viz.id, "kind": viz.kind, "structure": viz.structure()}), 201


@app.route("/api/session/<sid>", methods=["GET"])
def api_session_state(sid):
    return jsonify(get_session(sid).to_dict())


@app.route("/api/session/<sid>", methods=["DELETE"])
def api_session_delete(sid):
    viz = get_session(sid)
    viz.close()
    del SESSIONS[sid]
    return jsonify({"deleted": sid})


# ---------------------------------------------------------------------------
# API: Operations
# ---------------------------------------------------------------------------
@app.route("/api/session/<sid>/op", methods=["POST"])
def api_session_op(sid):
    viz = get_session(sid)
    data = body()
    op = data.get("op")
    if not op:
        raise InvalidInput("Missing 'op'")
    args = data.get("args") or {}
    if not isinstance(args, dict):
        raise InvalidInput("'args' must be an object")
    if "op" in args:
        raise InvalidInput("'args' may not contain 'op'")

    result = viz.run_operation(op, **args)
    payload = result.to_dict()
    payload["playback"] = viz.playback.to_dict()
    payload["console"] = list(viz.console)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/session/<sid>/playback/<action>", methods=["POST"])
def api_session_playback(sid, action):
    pb = get_session(sid).playback
    data = body()

    if action == "play":
        pb.play()
    elif action == "pause":
        pb.pause()
    elif action == "toggle":
        pb.toggle_play()
    elif action == "next":
        if not pb.step_forward():
            raise InvalidInput("Already at last step")
    elif action == "prev":
        if not pb.step_backward():
            raise InvalidInput("Already at first step")
    elif action == "reset":
        pb.reset()
    elif action == "seek":
        try:
            index = int(data.get("index"))
        except (TypeError, ValueError):
            raise InvalidInput("Invalid step index")
        if not pb.seek(index):
            raise InvalidInput("Invalid step index")
    elif action == "speed":
        pb.set_speed(str(data.get("speed", "")))
    else:
        raise UnknownOperation(f"Unknown playback action '{action}'")

    return jsonify(pb.to_dict())


@app.route("/api/session/<sid>/tick", methods=["POST"])
def api_session_tick(sid):
    pb = get_session(sid).playback
    fired = pb.scheduler.poll()
    state = pb.to_dict()
    state["fired"] = fired
    return jsonify(state)


@app.route("/api/session/<sid>/export", methods=["GET"])
def api_session_export(sid):
    return jsonify(get_session(sid).recorder.export())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Data Structure Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
