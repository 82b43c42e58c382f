"""
Resolution history API endpoints for SocialSave.
"""

from flask import Blueprint, current_app, redirect, request, jsonify

history_bp = Blueprint("history", __name__)


def _history():
    return current_app.extensions["history"]


@history_bp.route("", methods=["GET"])
def list_history():
    """
    List recent resolutions.

    Query params:
        limit: Maximum number of entries to return

    Response:
        {"history": [entry objects]}
    """
    limit = request.args.get("limit", None, type=int)
    if limit is not None and limit < 0:
        return jsonify({"error": "limit must be non-negative"}), 400

    entries = _history().list_entries(limit=limit)
    return jsonify({"history": [entry.to_dict() for entry in entries]})


@history_bp.route("", methods=["DELETE"])
def clear_history():
    """
    Clear all history.

    Response:
        {"cleared": <number of removed entries>}
    """
    return jsonify({"cleared": _history().clear()})


@history_bp.route("/<entry_id>", methods=["GET"])
def get_entry(entry_id: str):
    """
    Get a specific history entry by ID.

    Response:
        Entry object or 404
    """
    entry = _history().get(entry_id)
    if not entry:
        return jsonify({"error": "History entry not found"}), 404

    return jsonify(entry.to_dict())


@history_bp.route("/<entry_id>/download", methods=["GET"])
def download_entry(entry_id: str):
    """
    Redirect to the download reference of a history entry.

    Response:
        302 redirect or 404
    """
    entry = _history().get(entry_id)
    if not entry:
        return jsonify({"error": "History entry not found"}), 404

    return redirect(entry.descriptor.download_url, code=302)
