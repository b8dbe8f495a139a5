"""OpenTelemetry setup for the Blogful API.

Traces, metrics and logs are exported over OTLP/HTTP. Nothing here runs when
``OTEL_SDK_DISABLED`` is set; the API-level tracer and meter then fall back
to no-op implementations.
"""

import logging
import os

from opentelemetry import _logs, metrics, trace
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource, get_aggregated_resources
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor


_otel_log_handler: LoggingHandler | None = None
_initialized: bool = False


def telemetry_enabled() -> bool:
    return not os.getenv("OTEL_SDK_DISABLED")


def _build_resource() -> Resource:
    # OTEL_RESOURCE_ATTRIBUTES is merged in by get_aggregated_resources
    return get_aggregated_resources(
        detectors=[],
        initial_resource=Resource.create(
            {
                "service.name": os.getenv("OTEL_SERVICE_NAME", "blogful-api"),
                "service.version": os.getenv("OTEL_SERVICE_VERSION", "1.0.0"),
                "deployment.environment": os.getenv("ENVIRONMENT", "development"),
            }
        ),
    )


def setup_telemetry() -> None:
    """Install tracer, meter and logger providers and library instrumentation.

    Safe to call more than once; only the first call has an effect.
    """
    global _otel_log_handler, _initialized

    if _initialized:
        return

    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318")
    resource = _build_resource()

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
    )
    trace.set_tracer_provider(tracer_provider)

    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=f"{endpoint}/v1/metrics"),
        export_interval_millis=60000,
    )
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[reader]))

    logger_provider = LoggerProvider(resource=resource)
    logger_provider.add_log_record_processor(
        BatchLogRecordProcessor(OTLPLogExporter(endpoint=f"{endpoint}/v1/logs"))
    )
    _logs.set_logger_provider(logger_provider)
    _otel_log_handler = LoggingHandler(level=logging.DEBUG, logger_provider=logger_provider)

    SQLAlchemyInstrumentor().instrument()
    # Adds trace_id and span_id to every log record
    LoggingInstrumentor().instrument(set_logging_format=True)

    _initialized = True


def get_otel_log_handler() -> LoggingHandler | None:
    """Return the OTel logging handler, or None before setup_telemetry()."""
    return _otel_log_handler


def instrument_flask_app(app) -> None:
    """Instrument a Flask app for tracing.

    Must run per app instance since Gunicorn forks workers after the
    global instrumentation is installed.
    """
    FlaskInstrumentor().instrument_app(app, excluded_urls="/health")


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)


def get_meter(name: str) -> metrics.Meter:
    return metrics.get_meter(name)
