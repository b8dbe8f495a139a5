"""HTTP metrics middleware."""

from flask import Flask, Response, request
from opentelemetry.metrics import Meter

from blogful.middleware.timing import elapsed_ms
from blogful.telemetry import get_meter


UNTRACKED_PATHS = frozenset({"/health"})


class HttpMetrics:
    """Request counter and latency histogram keyed by route pattern."""

    def __init__(self, meter: Meter) -> None:
        self.requests = meter.create_counter(
            name="http_requests_total",
            description="Total HTTP requests",
            unit="1",
        )
        self.duration = meter.create_histogram(
            name="http_request_duration_ms",
            description="HTTP request duration in milliseconds",
            unit="ms",
        )

    def record(self, method: str, route: str, status_code: int, duration_ms: float) -> None:
        attributes = {"method": method, "route": route, "status": str(status_code)}
        self.requests.add(1, attributes)
        self.duration.record(duration_ms, attributes)


def register_metrics_middleware(app: Flask, meter: Meter | None = None) -> None:
    """Record every routed request except health checks.

    Args:
        app: Flask application instance.
        meter: Meter to create instruments on. Defaults to this module's meter.
    """
    http_metrics = HttpMetrics(meter or get_meter(__name__))

    @app.after_request
    def record_metrics(response: Response) -> Response:
        if request.path not in UNTRACKED_PATHS:
            # Rule pattern keeps article ids out of the attribute set
            route = request.url_rule.rule if request.url_rule else "unmatched"
            http_metrics.record(request.method, route, response.status_code, elapsed_ms())
        return response
