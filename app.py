from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Table,
    Verdict,
    apply_move,
    deal_klondike,
    help_text,
    table_from_json,
    table_to_json,
    validate_command,
)
from solitaire_core.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = Flask(__name__)

MAX_JOKERS = 2


def _verdict_to_json(v: Verdict) -> Dict[str, Any]:
    out: Dict[str, Any] = {"ok": v.accepted}
    if not v.accepted:
        out["error"] = v.message
        out["reason"] = v.reason_name
    return out


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _read_request() -> Tuple[Optional[Table], Optional[str], Optional[Any]]:
    """Returns (table, move, error_response). error_response is set when the body is unusable."""
    body = _json_body()
    s_in = body.get("state")
    move = body.get("move")
    if not isinstance(s_in, dict):
        return None, None, (jsonify({"ok": False, "error": "state required"}), 400)
    if not isinstance(move, str):
        return None, None, (jsonify({"ok": False, "error": "move required"}), 400)
    try:
        table = table_from_json(s_in)
    except (KeyError, ValueError, TypeError) as e:
        return None, None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)
    return table, move, None


@app.get("/api/help")
def api_help() -> Any:
    return jsonify({"ok": True, "help": help_text()})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    seed = body.get("seed", None)
    try:
        jokers = int(body.get("jokers", 0))
        if not 0 <= jokers <= MAX_JOKERS:
            raise ValueError(f"jokers must be between 0 and {MAX_JOKERS}")
        table = deal_klondike(seed=seed, jokers=jokers)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad request: {e}"}), 400
    return jsonify({"ok": True, "state": table_to_json(table)})


@app.post("/api/check")
def api_check() -> Any:
    table, move, err = _read_request()
    if err is not None:
        return err
    verdict = validate_command(table, move)
    return jsonify(_verdict_to_json(verdict)), (200 if verdict.accepted else 400)


@app.post("/api/move")
def api_move() -> Any:
    table, move, err = _read_request()
    if err is not None:
        return err
    verdict = validate_command(table, move)
    if not verdict.accepted:
        return jsonify(_verdict_to_json(verdict)), 400
    next_table = apply_move(table, verdict.request)
    logger.info("applied move %s", move.upper())
    return jsonify({"ok": True, "state": table_to_json(next_table)})


# Entrypoint for "python -m app"
if __name__ == "__main__":
    setup_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "5000"))
    app.run(host=host, port=port, debug=debug)
