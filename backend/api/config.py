"""
Configuration validation API endpoints for SocialSave.
"""

from typing import Optional

from flask import Blueprint, jsonify

from api.urls import json_object_body
from services.video_resolver import is_real_mode
from utils.constants import MIN_API_KEY_LENGTH

config_bp = Blueprint("config", __name__)


def validate_api_key(api_key: Optional[str]) -> dict:
    """
    Validate a RapidAPI key and report which resolution mode it selects.

    Args:
        api_key: The API key to validate

    Returns:
        dict with validation results
    """
    result = {
        "valid": False,
        "mode": "demo",
        "error": None,
    }

    if not api_key or not api_key.strip():
        result["error"] = "API key is empty; demo mode will be used"
        return result

    if any(c.isspace() for c in api_key.strip()):
        result["error"] = "Invalid API key format (must not contain whitespace)"
        return result

    if not is_real_mode(api_key):
        result["error"] = (
            f"API key must be longer than {MIN_API_KEY_LENGTH} characters; "
            "demo mode will be used"
        )
        return result

    result["valid"] = True
    result["mode"] = "real"
    return result


@config_bp.route("/validate", methods=["POST"])
def validate():
    """
    Validate an API key.

    Request body:
        {"api_key": "..."}

    Response:
        {"api_key": {"valid": bool, "mode": "real" | "demo", "error": str | null}}
    """
    data = json_object_body()
    if data is None:
        return jsonify({"error": "No JSON body provided"}), 400

    if "api_key" not in data:
        return jsonify({"error": "Request must include 'api_key'"}), 400

    api_key = data["api_key"]
    if api_key is not None and not isinstance(api_key, str):
        return jsonify({"error": "api_key must be a string"}), 400

    return jsonify({"api_key": validate_api_key(api_key)})
