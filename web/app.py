"""Flask JSON API for the pocket calculator and VIN lookup."""

import logging
import os

from flask import Flask, jsonify, request

from pockettools import (
    CalcState,
    DecodeError,
    action_for_key,
    decode_vin,
    extract_vin,
    is_decodable,
    load_recents,
    normalize_vin,
    push_recent,
    save_recents,
    transition,
    validate_vin,
)
from pockettools.config import default_recents_file

_logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")
app.config.setdefault("RECENTS_FILE", default_recents_file())


def error_response(message: str, status: int):
    """JSON error body with the given HTTP status."""
    return jsonify({"error": message}), status


@app.route("/calc", methods=["POST"])
def calc():
    """Apply one key press to the posted state (or a fresh one)."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return error_response("Body must be a JSON object", 400)
    key = payload.get("key")
    if not isinstance(key, str):
        return error_response("Missing key", 400)

    try:
        state = CalcState.from_dict(payload.get("state") or {})
        action = action_for_key(key)
    except (TypeError, ValueError) as e:
        return error_response(str(e), 400)

    return jsonify(transition(state, action).to_dict())


@app.route("/vin/check", methods=["GET"])
def vin_check():
    """Normalize typed text and report its validation verdict."""
    vin = normalize_vin(request.args.get("vin", ""))
    error = validate_vin(vin)
    return jsonify(
        {
            "vin": vin,
            "error": error.value if error else None,
            "decodable": is_decodable(vin),
        }
    )


@app.route("/vin/extract", methods=["POST"])
def vin_extract():
    """Find a VIN in a blob of OCR text."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return error_response("Body must be a JSON object", 400)
    text = payload.get("text")
    if not isinstance(text, str):
        return error_response("Missing text", 400)
    return jsonify({"vin": extract_vin(text)})


@app.route("/vin/<vin>", methods=["GET"])
def vin_decode(vin: str):
    """Decode a VIN and record it in recents."""
    vin = normalize_vin(vin)
    error = validate_vin(vin)
    if error or not is_decodable(vin):
        return error_response(error.value if error else "Empty VIN", 400)

    try:
        fields = decode_vin(vin)
    except DecodeError as e:
        _logger.warning("Lookup failed for vin=%s: %s", vin, e)
        return jsonify({"error": str(e), "retryable": True}), 502

    recents_file = app.config["RECENTS_FILE"]
    save_recents(recents_file, push_recent(load_recents(recents_file), vin))

    return jsonify(
        {
            "vin": vin,
            "fields": [{"label": f.label, "value": f.value} for f in fields],
        }
    )


@app.route("/recents", methods=["GET"])
def recents():
    """Recently decoded VINs, newest first."""
    return jsonify({"recents": load_recents(app.config["RECENTS_FILE"])})


if __name__ == "__main__":
    app.run(debug=True, port=5000)
