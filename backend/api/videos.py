"""
Video resolution API endpoints for SocialSave.
"""

import logging

from flask import Blueprint, current_app, request, jsonify

from api.urls import json_object_body, plan_resolution, request_api_key
from services.video_resolver import resolve

logger = logging.getLogger(__name__)

videos_bp = Blueprint("videos", __name__)


@videos_bp.route("/resolve", methods=["POST"])
async def resolve_video():
    """
    Resolve a video URL into a downloadable descriptor.

    Request body:
        {
            "url": "https://www.instagram.com/reel/...",
            "api_key": "..."  // optional, defaults to RAPIDAPI_KEY
        }

    Query params:
        dry_run: If true, only report platform, video_id and mode;
            nothing is resolved or recorded

    Response:
        Descriptor fields plus "history_id" and "filename".
        Resolution errors return {"error": message} with the error's status.
    """
    data = json_object_body()
    if data is None:
        return jsonify({"error": "No JSON body provided"}), 400

    url = data.get("url")
    if not url or not isinstance(url, str) or not url.strip():
        return jsonify({"error": "url is required"}), 400

    api_key = request_api_key(data)
    if api_key is not None and not isinstance(api_key, str):
        return jsonify({"error": "api_key must be a string"}), 400

    if request.args.get("dry_run", "").lower() in ("1", "true", "yes"):
        plan = plan_resolution(url, api_key)
        return jsonify(plan), (200 if plan["valid"] else 400)

    settings = current_app.config["SETTINGS"]
    descriptor = await resolve(url, api_key, demo_delay=settings.demo_delay)

    entry = current_app.extensions["history"].add(url.strip(), descriptor)
    logger.info("Resolved %s video (demo=%s)", descriptor.platform.value, descriptor.is_demo)

    response = descriptor.to_dict()
    response["history_id"] = entry.id
    response["filename"] = descriptor.suggested_filename()
    return jsonify(response)
