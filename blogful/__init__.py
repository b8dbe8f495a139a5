"""Blogful API application factory."""

import logging

from flask import Flask

from blogful.extensions import cors, db, ma, talisman
from blogful.telemetry import telemetry_enabled


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    # Providers must be installed before the app is instrumented
    if telemetry_enabled():
        from blogful.telemetry import instrument_flask_app, setup_telemetry

        setup_telemetry()

    app = Flask(__name__)

    if telemetry_enabled():
        instrument_flask_app(app)

    # Load configuration
    if config_class is None:
        from blogful.config import Config

        config_class = Config
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    ma.init_app(app)
    origins = app.config["CORS_ORIGINS"]
    cors.init_app(app, origins=origins, send_wildcard=origins == "*")
    # JSON only, so no content security policy; TLS is terminated upstream
    talisman.init_app(app, force_https=False, content_security_policy=None)

    # Register blueprints
    from blogful.routes import articles_bp, health_bp, users_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(articles_bp)
    app.register_blueprint(users_bp)

    from blogful.errors import register_error_handlers

    register_error_handlers(app)

    from blogful.middleware import register_access_log, register_request_timer

    register_request_timer(app)
    register_access_log(app)

    if telemetry_enabled():
        from blogful.middleware import register_metrics_middleware

        register_metrics_middleware(app)

    _configure_logging()

    with app.app_context():
        db.create_all()

    return app


def _configure_logging() -> None:
    """Configure logging for the application."""
    # No-op when a handler is already installed (e.g. by LoggingInstrumentor)
    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    if telemetry_enabled():
        from blogful.telemetry import get_otel_log_handler

        handler = get_otel_log_handler()
        root_logger = logging.getLogger()
        if handler and handler not in root_logger.handlers:
            root_logger.addHandler(handler)

    # App loggers - propagate to root
    logging.getLogger("blogful").setLevel(logging.DEBUG)
    logging.getLogger("blogful").propagate = True

    # Reduce noise from framework loggers
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
