# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from noteful.infrastructure.container import Container, container as default_container
from noteful.infrastructure.db import init_db
from noteful.shared.logging import logger, setup_logging
from noteful.shared.middleware.error_handler import configure_error_handling
from noteful.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config

    setup_logging(config.log_level, log_file=config.log_file)
    init_db(container.engine)

    app = Flask(__name__)
    configure_error_handling(app, config)
    configure_request_logging(app, config)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(
        f"Flask app initialized (env={config.app_env}, token_lifetime={config.jwt_expiry})"
    )
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080, threaded=True)
