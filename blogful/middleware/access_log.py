"""Per-request access logging."""

import logging
from datetime import datetime, timezone

from flask import Flask, Response, request

from blogful.middleware.timing import elapsed_ms


access_logger = logging.getLogger("blogful.access")


def register_access_log(app: Flask) -> None:
    """Log one line per request on the ``blogful.access`` logger.

    Production uses a short format with the response time; other
    environments use the Apache common log format.

    Args:
        app: Flask application instance.
    """
    short_format = app.config.get("ENVIRONMENT") == "production"

    @app.after_request
    def log_request(response: Response) -> Response:
        if short_format:
            access_logger.info(_short_line(response))
        else:
            access_logger.info(_common_line(response))
        return response


def _url() -> str:
    return request.full_path if request.query_string else request.path


def _size(response: Response) -> str:
    length = response.content_length
    return str(length) if length is not None else "-"


def _short_line(response: Response) -> str:
    return f"{request.method} {_url()} {response.status_code} {_size(response)} - {elapsed_ms():.3f} ms"


def _common_line(response: Response) -> str:
    timestamp = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z")
    return (
        f'{request.remote_addr or "-"} - - [{timestamp}] '
        f'"{request.method} {_url()} {request.environ.get("SERVER_PROTOCOL", "HTTP/1.1")}" '
        f"{response.status_code} {_size(response)}"
    )
