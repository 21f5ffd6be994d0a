"""
LEXIKON - Observability Package

Tracing and structured logging for the paradigm engine.

Components:
- tracing: OpenTelemetry distributed tracing with OTLP export
- logging: Structlog integration with trace context propagation

Usage:
    from observability import setup_observability, get_logger

    setup_observability(service_name="lexikon")
    logger = get_logger(__name__)
"""
from typing import Optional

from .tracing import (
    setup_tracing,
    get_tracer,
    create_span,
    span_decorator,
    TracingConfig,
    shutdown_tracing,
)
from .logging import (
    setup_logging,
    get_logger,
    shutdown_logging,
    LoggingConfig,
    LogContext,
    bind_context,
    unbind_context,
    clear_context,
    ExtractionLogger,
)


def setup_observability(
    service_name: str = "lexikon",
    service_version: str = "1.0.0",
    environment: Optional[str] = None,
    enable_tracing: Optional[bool] = None,
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> None:
    """
    Initialize logging and tracing from the application configuration.

    Explicit arguments override the values read from the environment.
    """
    from config import get_config

    config = get_config()
    obs = config.observability

    setup_logging(LoggingConfig(
        service_name=service_name,
        level=(log_level or config.logging.level).upper(),
        json_format=config.logging.json_format if json_logs is None else json_logs,
        log_to_file=config.logging.log_to_file,
        log_file_path=config.logging.log_file,
        environment=environment or obs.environment,
    ))

    setup_tracing(TracingConfig(
        service_name=service_name,
        service_version=service_version,
        otlp_endpoint=obs.otlp_endpoint,
        enabled=obs.tracing_enabled if enable_tracing is None else enable_tracing,
        sample_rate=obs.get_sample_rate_for_env(),
        environment=environment or obs.environment,
    ))


def shutdown_observability() -> None:
    """Flush spans and close log handlers."""
    shutdown_tracing()
    shutdown_logging()


__all__ = [
    "setup_observability",
    "shutdown_observability",
    # Tracing
    "setup_tracing",
    "get_tracer",
    "create_span",
    "span_decorator",
    "TracingConfig",
    "shutdown_tracing",
    # Logging
    "setup_logging",
    "get_logger",
    "shutdown_logging",
    "LoggingConfig",
    "LogContext",
    "bind_context",
    "unbind_context",
    "clear_context",
    "ExtractionLogger",
]
