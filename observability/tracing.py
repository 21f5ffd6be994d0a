"""
LEXIKON - Distributed Tracing with OpenTelemetry

Spans around table builds and paradigm resolution, so a slow or failing
lemma can be located from the trace backend.

Features:
- OTLP export to Jaeger, Tempo, or any OTLP-compatible backend
- Decorator and context manager instrumentation
- Configurable sampling

Usage:
    from observability.tracing import setup_tracing, get_tracer, span_decorator

    setup_tracing(TracingConfig(service_name="lexikon", enabled=True))

    @span_decorator("paradigm.build_table")
    def build_table(table):
        ...
"""
from __future__ import annotations

import functools
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar, ParamSpec

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)
from opentelemetry.sdk.trace.sampling import (
    ParentBased,
    TraceIdRatioBased,
    ALWAYS_ON,
    ALWAYS_OFF,
)
from opentelemetry.trace import Status, StatusCode, SpanKind

P = ParamSpec("P")
T = TypeVar("T")

# Global state
_tracer_provider: Optional[TracerProvider] = None
_initialized: bool = False


@dataclass
class TracingConfig:
    """Configuration for OpenTelemetry tracing."""

    service_name: str = "lexikon"
    service_version: str = "1.0.0"
    otlp_endpoint: str = field(
        default_factory=lambda: os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")
    )
    enabled: bool = field(
        default_factory=lambda: os.getenv("OTEL_TRACING_ENABLED", "false").lower() == "true"
    )
    sample_rate: float = field(
        default_factory=lambda: float(os.getenv("OTEL_SAMPLE_RATE", "1.0"))
    )
    environment: str = field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development")
    )
    otlp_export: bool = True
    console_export: bool = field(
        default_factory=lambda: os.getenv("OTEL_CONSOLE_EXPORT", "false").lower() == "true"
    )
    batch_export: bool = True


def setup_tracing(config: Optional[TracingConfig] = None) -> trace.TracerProvider:
    """
    Configure OpenTelemetry tracing with OTLP export.

    Until this is called, spans go to the API's default no-op provider.

    Args:
        config: Tracing configuration. Uses defaults if not provided.

    Returns:
        Configured TracerProvider
    """
    global _tracer_provider, _initialized

    if _initialized and _tracer_provider:
        return _tracer_provider

    config = config or TracingConfig()

    if not config.enabled:
        _initialized = True
        return trace.get_tracer_provider()

    resource = Resource.create({
        SERVICE_NAME: config.service_name,
        SERVICE_VERSION: config.service_version,
        "deployment.environment": config.environment,
        "service.namespace": "lexikon",
    })

    if config.sample_rate <= 0.0:
        sampler = ALWAYS_OFF
    elif config.sample_rate >= 1.0:
        sampler = ALWAYS_ON
    else:
        sampler = ParentBased(root=TraceIdRatioBased(config.sample_rate))

    _tracer_provider = TracerProvider(resource=resource, sampler=sampler)

    if config.otlp_export:
        otlp_exporter = OTLPSpanExporter(endpoint=config.otlp_endpoint, insecure=True)
        if config.batch_export:
            _tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        else:
            _tracer_provider.add_span_processor(SimpleSpanProcessor(otlp_exporter))

    if config.console_export:
        _tracer_provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(_tracer_provider)
    _initialized = True

    return _tracer_provider


def get_tracer(name: str, version: str = "1.0.0") -> trace.Tracer:
    """
    Get a tracer instance for manual instrumentation.

    Args:
        name: Tracer name, typically __name__ of the module
        version: Tracer version string
    """
    return trace.get_tracer(name, version)


def shutdown_tracing() -> None:
    """Flush pending spans and forget the configured provider."""
    global _tracer_provider, _initialized
    if _tracer_provider is not None:
        _tracer_provider.shutdown()
    _initialized = False
    _tracer_provider = None


@contextmanager
def create_span(
    name: str,
    attributes: Optional[Dict[str, Any]] = None,
    tracer_name: str = "lexikon",
):
    """
    Context manager for creating spans with automatic error handling.

    Example:
        >>> with create_span("paradigm.resolve", attributes={"lemma": "λόγος"}) as span:
        ...     forms = resolve(tree, declension)
    """
    tracer = get_tracer(tracer_name)
    with tracer.start_as_current_span(name, kind=SpanKind.INTERNAL) as span:
        if attributes:
            for key, value in attributes.items():
                _set_safe_attribute(span, key, value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise


def span_decorator(
    name: Optional[str] = None,
    attributes: Optional[Dict[str, Any]] = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for automatic span creation around functions.

    Args:
        name: Span name (defaults to function name)
        attributes: Static attributes to add to all spans
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        span_name = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            # Looked up per call so a provider installed after import is used
            tracer = get_tracer(func.__module__)
            with tracer.start_as_current_span(span_name, kind=SpanKind.INTERNAL) as span:
                if attributes:
                    for key, value in attributes.items():
                        span.set_attribute(key, value)
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise

        return wrapper

    return decorator


def _set_safe_attribute(span: trace.Span, key: str, value: Any) -> None:
    """Set span attribute with type coercion for safety."""
    if value is None:
        return

    if isinstance(value, (str, int, float, bool)):
        span.set_attribute(key, value)
    elif isinstance(value, (list, tuple)):
        span.set_attribute(key, [str(v)[:100] for v in value[:10]])
    else:
        span.set_attribute(key, str(value)[:200])
