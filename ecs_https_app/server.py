import ssl
import sys

import structlog
from flask import Flask, current_app, jsonify

from ecs_https_app.config import (
    CERT_FILE,
    KEY_FILE,
    LISTEN_HOST,
    Settings,
    configure_logging,
    load_settings,
)
from ecs_https_app.errors import StartupConfigurationError
from ecs_https_app.tls import load_tls_context

logger = structlog.get_logger(__name__)

GREETING = "Hello from ECS Node.js App with HTTPS"


def create_app(settings: Settings) -> Flask:
    app = Flask(__name__)
    app.config["PORT"] = settings.port

    # ALB target group health check
    @app.route("/health", methods=["GET"])
    def health():
        return jsonify(status="healthy"), 200

    @app.route("/", methods=["GET"])
    def home():
        return (
            jsonify(
                message=GREETING,
                port=current_app.config["PORT"],
                protocol="HTTPS",
            ),
            200,
        )

    return app


def serve(app: Flask, port: int, ssl_context: ssl.SSLContext):
    logger.info(f"HTTPS Server running on port {port}", port=port)
    app.run(host=LISTEN_HOST, port=port, ssl_context=ssl_context)


def main():
    try:
        settings = load_settings()
        configure_logging(settings.loglevel)
        context = load_tls_context(certfile=CERT_FILE, keyfile=KEY_FILE)
    except StartupConfigurationError as e:
        logger.error("startup failed", error=str(e), path=e.path)
        sys.exit(1)

    serve(create_app(settings), settings.port, context)
