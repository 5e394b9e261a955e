"""
Covergen Application Factory
"""
import logging
import os
from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_wtf.csrf import CSRFProtect

from config import config

csrf = CSRFProtect()

# Version info
APP_VERSION = os.environ.get("APP_VERSION", "2026.10")
BUILD_TIME = os.environ.get("BUILD_TIME", "")
GIT_COMMIT = os.environ.get("GIT_COMMIT", "")


def create_app(config_name='default'):
    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from covergen.api import api_bp

    app.register_blueprint(api_bp)

    # Exempt API routes from CSRF (the form posts with fetch, no token)
    csrf.exempt(api_bp)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(413)
    def too_large(e):
        limit = app.config.get("MAX_CONTENT_LENGTH") or 0
        return jsonify({"error": f"Upload too large (limit {limit // (1024 * 1024)} MB)"}), 413

    # Health check endpoint
    @app.route('/healthz')
    def healthz():
        """Health check for load balancers and monitoring"""
        from covergen.api import credential
        from covergen.services.openai_service import client_ready

        ok, msg = client_ready(credential())
        return jsonify({
            "status": "ok" if ok else "degraded",
            "version": app.config.get("APP_VERSION", APP_VERSION),
            "openai_ready": ok,
            "openai_message": msg,
            "model": app.config.get("OPENAI_MODEL"),
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    # Version endpoint
    @app.route('/version')
    def version():
        """Version and build info"""
        return jsonify({
            "version": app.config.get("APP_VERSION", APP_VERSION),
            "build_time": app.config.get("BUILD_TIME", BUILD_TIME),
            "git_commit": app.config.get("GIT_COMMIT", GIT_COMMIT),
            "features": {
                "pdf_upload": True,
                "tone_scale": True,
            }
        })

    return app
