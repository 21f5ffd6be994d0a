"""
LEXIKON - Unified Error Handling

Error hierarchy for paradigm extraction and resolution.

Features:
- Hierarchical exception classes with context preservation
- Error severity levels and a recoverable flag so callers can tell
  per-cell problems from per-table and per-query ones
- Structured error context for debugging
- OpenTelemetry integration for error tracing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class ErrorSeverity(Enum):
    """Error severity levels for prioritized handling."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"      # one cell dropped, extraction continues
    ERROR = "error"          # one table or query failed
    CRITICAL = "critical"    # programming or configuration error


@dataclass
class ErrorContext:
    """Structured context for error debugging and tracing."""

    operation: str
    component: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    lemma: Optional[str] = None
    table_title: Optional[str] = None
    position: Optional[Tuple[int, int]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            "operation": self.operation,
            "component": self.component,
            "timestamp": self.timestamp.isoformat(),
            "lemma": self.lemma,
            "table_title": self.table_title,
            "position": list(self.position) if self.position else None,
            "metadata": self.metadata,
        }


class LexikonError(Exception):
    """
    Base exception for all LEXIKON-specific errors.

    Provides:
    - Structured error context
    - Severity level
    - Chained exception support
    - OpenTelemetry span recording
    """

    default_severity: ErrorSeverity = ErrorSeverity.ERROR
    error_code: str = "LEXIKON_ERROR"
    default_recoverable: bool = False

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        severity: Optional[ErrorSeverity] = None,
        cause: Optional[Exception] = None,
        recoverable: Optional[bool] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.severity = severity or self.default_severity
        self.cause = cause
        self.recoverable = self.default_recoverable if recoverable is None else recoverable
        self.suggestions = suggestions or []
        self.timestamp = datetime.now(timezone.utc)

        self._record_to_span()

    def _record_to_span(self) -> None:
        """Record exception to current OpenTelemetry span."""
        span = trace.get_current_span()
        if span and span.is_recording():
            span.set_status(Status(StatusCode.ERROR, self.message))
            span.record_exception(self)
            span.set_attribute("error.code", self.error_code)
            span.set_attribute("error.severity", self.severity.value)
            span.set_attribute("error.recoverable", self.recoverable)
            if self.context:
                span.set_attribute("error.component", self.context.component)
                span.set_attribute("error.operation", self.context.operation)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reports."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.to_dict() if self.context else None,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f" (component: {self.context.component})")
        if self.cause:
            parts.append(f" [caused by: {self.cause}]")
        return "".join(parts)

    def with_context(self, **kwargs: Any) -> "LexikonError":
        """Add additional context to the error."""
        if self.context:
            self.context.metadata.update(kwargs)
        else:
            self.context = ErrorContext(
                operation="unknown",
                component="unknown",
                metadata=kwargs
            )
        return self


class ConfigError(LexikonError):
    """Configuration-related errors."""

    error_code = "CONFIG_ERROR"
    default_severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        actual_value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.config_key = config_key
        self.actual_value = actual_value


class FormatError(LexikonError):
    """A table is structurally malformed; the whole table is rejected."""

    error_code = "FORMAT_ERROR"
    default_severity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        attribute: Optional[str] = None,
        actual_value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.attribute = attribute
        self.actual_value = actual_value


class CellError(LexikonError):
    """A single cell could not be placed in the paradigm tree."""

    error_code = "CELL_ERROR"
    default_severity = ErrorSeverity.WARNING
    default_recoverable = True

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        position: Optional[Tuple[int, int]] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.text = text
        self.position = position


class ClassificationConflict(CellError):
    """A cell's headers imply more than one part of speech."""

    error_code = "CLASSIFICATION_CONFLICT"

    def __init__(self, message: str, candidates: Sequence[Any] = (), **kwargs: Any):
        super().__init__(message, **kwargs)
        self.candidates = list(candidates)


class MissingDimension(CellError):
    """A required grammatical dimension has no tag on the cell."""

    error_code = "MISSING_DIMENSION"

    def __init__(self, message: str, dimension: Optional[str] = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.dimension = dimension


class ResolveError(LexikonError):
    """A paradigm query could not be answered."""

    error_code = "RESOLVE_ERROR"
    default_severity = ErrorSeverity.WARNING


class MissingRequiredDimension(ResolveError):
    """A query lacks a value for a dimension the paradigm requires."""

    error_code = "MISSING_REQUIRED_DIMENSION"

    def __init__(self, dimension: str, message: Optional[str] = None, **kwargs: Any):
        super().__init__(message or f"{dimension} required", **kwargs)
        self.dimension = dimension


class FormNotAttested(ResolveError):
    """The requested branch was never populated."""

    error_code = "FORM_NOT_ATTESTED"

    def __init__(self, path: Sequence[str], message: Optional[str] = None, **kwargs: Any):
        self.path = tuple(path)
        super().__init__(message or f"no form at {'.'.join(self.path)}", **kwargs)


class UnsupportedPartOfSpeech(LexikonError):
    """No paradigm schema exists for the part of speech."""

    error_code = "UNSUPPORTED_PART_OF_SPEECH"
    default_severity = ErrorSeverity.CRITICAL

    def __init__(self, part_of_speech: Any, message: Optional[str] = None, **kwargs: Any):
        super().__init__(message or f"no paradigm schema for {part_of_speech}", **kwargs)
        self.part_of_speech = part_of_speech


class CodeDecodeError(LexikonError):
    """A morphology code component could not be decoded."""

    error_code = "CODE_DECODE_ERROR"
    default_severity = ErrorSeverity.ERROR

    def __init__(self, message: str, component: Optional[str] = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.component = component
