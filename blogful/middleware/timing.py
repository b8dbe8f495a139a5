"""Request timing shared by the access log and metrics middleware."""

import time

from flask import Flask, g


def register_request_timer(app: Flask) -> None:
    @app.before_request
    def start_request_timer() -> None:
        g.request_start = time.perf_counter()


def elapsed_ms() -> float:
    """Milliseconds since the current request started, 0.0 if untimed."""
    start = g.get("request_start")
    if start is None:
        return 0.0
    return (time.perf_counter() - start) * 1000
