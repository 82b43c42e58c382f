"""
URL validation API endpoints for SocialSave.

Validation answers, before any resolution runs, whether a URL would be
accepted and which mode (real or demo) would resolve it.
"""

from typing import Optional

from flask import Blueprint, current_app, request, jsonify

from services.platform_detector import validate_url
from services.video_resolver import is_real_mode
from utils.constants import MAX_URLS_PER_REQUEST

urls_bp = Blueprint("urls", __name__)


def json_object_body() -> Optional[dict]:
    """Return the request's JSON body if it is a non-empty object, else None."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None
    return data


def plan_resolution(url, api_key: Optional[str]) -> dict:
    """
    Validate a URL and report how it would be resolved.

    Returns:
        The validate_url result plus "mode": "real" or "demo" for valid
        URLs, None otherwise
    """
    result = validate_url(url)
    if result["valid"]:
        result["mode"] = "real" if is_real_mode(api_key) else "demo"
    else:
        result["mode"] = None
    return result


def request_api_key(data: dict):
    """API key from the body, falling back to the configured RAPIDAPI_KEY."""
    return data.get("api_key", current_app.config["SETTINGS"].rapidapi_key)


@urls_bp.route("/validate", methods=["POST"])
def validate():
    """
    Validate one or more URLs.

    Request body:
        {"url": "https://...", "api_key": "..."} or
        {"urls": ["https://...", ...], "api_key": "..."}
        api_key is optional and defaults to RAPIDAPI_KEY

    Response:
        Single URL: validation result dict with "mode"
        Multiple URLs: {"results": [...], "valid_count": int}
    """
    data = json_object_body()
    if data is None:
        return jsonify({"error": "No JSON body provided"}), 400

    api_key = request_api_key(data)
    if api_key is not None and not isinstance(api_key, str):
        return jsonify({"error": "api_key must be a string"}), 400

    if "url" in data:
        return jsonify(plan_resolution(data["url"], api_key))

    if "urls" in data:
        urls = data["urls"]
        if not isinstance(urls, list):
            return jsonify({"error": "urls must be an array"}), 400
        if len(urls) > MAX_URLS_PER_REQUEST:
            return jsonify(
                {"error": f"Maximum {MAX_URLS_PER_REQUEST} URLs per request"}
            ), 400
        results = [plan_resolution(url, api_key) for url in urls]
        return jsonify({
            "results": results,
            "valid_count": sum(1 for r in results if r["valid"]),
        })

    return jsonify({"error": "Request must include 'url' or 'urls'"}), 400
