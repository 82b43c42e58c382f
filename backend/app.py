"""
SocialSave - Flask Backend
Hot reload: flask run --debug
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from services.errors import ResolutionError
from services.history_manager import HistoryManager
from services.video_resolver import is_real_mode
from utils.constants import APP_VERSION
from utils.settings import Settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None):
    """Application factory pattern."""
    if settings is None:
        settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.extensions["history"] = HistoryManager(limit=settings.history_limit)

    # CORS for frontend
    CORS(app, origins=[settings.frontend_url])

    # Health check
    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok", "version": APP_VERSION})

    @app.errorhandler(ResolutionError)
    def handle_resolution_error(error: ResolutionError):
        logger.warning("Resolution failed: %s", error.message)
        return jsonify({"error": error.message}), error.status_code

    # Register blueprints
    from api.config import config_bp
    from api.history import history_bp
    from api.urls import urls_bp
    from api.videos import videos_bp

    app.register_blueprint(urls_bp, url_prefix="/api/urls")
    app.register_blueprint(videos_bp, url_prefix="/api/videos")
    app.register_blueprint(history_bp, url_prefix="/api/history")
    app.register_blueprint(config_bp, url_prefix="/api/config")

    mode = "real" if is_real_mode(settings.rapidapi_key) else "demo"
    logger.info("SocialSave %s started (default mode: %s)", APP_VERSION, mode)

    return app


if __name__ == "__main__":
    create_app().run(debug=True, port=5000)
