"""Middleware modules."""

from blogful.middleware.access_log import register_access_log
from blogful.middleware.metrics import register_metrics_middleware
from blogful.middleware.timing import register_request_timer


__all__ = ["register_request_timer", "register_access_log", "register_metrics_middleware"]
