"""Error responses and the application's terminal error handlers."""

import logging

from flask import Flask, current_app, jsonify
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from werkzeug.exceptions import HTTPException

from blogful.extensions import db


logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "server error"


def error_response(message: str, status_code: int) -> tuple:
    """Create a client error response.

    Use this function in routes instead of returning jsonify directly.

    Args:
        message: Error message.
        status_code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    return jsonify({"error": {"message": message}}), status_code


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        return error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def server_error(error: Exception):
        return _make_server_error_response(error)


def _make_server_error_response(error: Exception) -> tuple:
    """Log an unexpected failure and build the 500 response.

    In production only a generic message is returned; elsewhere the error
    message and type are included for diagnostics.

    Args:
        error: The unhandled exception.

    Returns:
        Tuple of (response, status_code).
    """
    db.session.rollback()

    span = trace.get_current_span()
    if span.is_recording():
        span.set_status(Status(StatusCode.ERROR, str(error)))
        span.record_exception(error)
        span.set_attribute("error.type", "server_error")

    logger.exception(f"Unhandled exception: {error}")

    if current_app.config.get("ENVIRONMENT") == "production":
        response = {"error": {"message": SERVER_ERROR_MESSAGE}}
    else:
        response = {
            "message": str(error),
            "error": {
                "type": type(error).__name__,
                "args": [repr(arg) for arg in error.args],
            },
        }

    return jsonify(response), 500
