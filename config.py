"""
LEXIKON - Configuration

Centralized configuration management for the paradigm engine.
Uses environment variables with sensible defaults.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional
from enum import Enum

from dotenv import load_dotenv

from core.errors import ConfigError

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    json_format: bool = field(default_factory=lambda: os.getenv("LOG_FORMAT", "json").lower() == "json")
    log_to_file: bool = field(default_factory=lambda: os.getenv("LOG_TO_FILE", "false").lower() == "true")
    log_file: Path = field(default_factory=lambda: Path(os.getenv("LOG_FILE", "./logs/lexikon.log")))


@dataclass
class ObservabilityConfig:
    """
    OpenTelemetry configuration.

    Tracing is off unless OTEL_TRACING_ENABLED is set.
    """
    service_name: str = field(
        default_factory=lambda: os.getenv("OTEL_SERVICE_NAME", "lexikon")
    )
    service_version: str = field(
        default_factory=lambda: os.getenv("OTEL_SERVICE_VERSION", "1.0.0")
    )
    otlp_endpoint: str = field(
        default_factory=lambda: os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")
    )
    tracing_enabled: bool = field(
        default_factory=lambda: os.getenv("OTEL_TRACING_ENABLED", "false").lower() == "true"
    )
    sample_rate: float = field(
        default_factory=lambda: float(os.getenv("OTEL_SAMPLE_RATE", "1.0"))
    )
    environment: str = field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development")
    )

    def get_sample_rate_for_env(self) -> float:
        """Get appropriate sample rate based on environment."""
        env = self.environment.lower()
        if env == "production":
            return min(self.sample_rate, 0.1)
        elif env == "staging":
            return min(self.sample_rate, 0.5)
        else:
            return self.sample_rate

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for diagnostics."""
        return {
            "service_name": self.service_name,
            "service_version": self.service_version,
            "otlp_endpoint": self.otlp_endpoint,
            "tracing_enabled": self.tracing_enabled,
            "sample_rate": self.get_sample_rate_for_env(),
            "environment": self.environment,
        }


@dataclass
class ExtractionConfig:
    """Markers and selectors used when reading inflection tables."""
    # Cell text meaning "no form attested"
    no_form_glyph: str = field(default_factory=lambda: os.getenv("LEXIKON_NO_FORM_GLYPH", "—"))
    # Separator between alternative forms inside one cell
    line_break: str = "\n"
    notes_header: str = field(default_factory=lambda: os.getenv("LEXIKON_NOTES_HEADER", "notes"))

    # HTML selectors
    table_selector: str = field(default_factory=lambda: os.getenv("LEXIKON_TABLE_SELECTOR", ".NavFrame"))
    title_selector: str = field(default_factory=lambda: os.getenv("LEXIKON_TITLE_SELECTOR", ".NavHead"))
    form_selector: str = field(default_factory=lambda: os.getenv("LEXIKON_FORM_SELECTOR", ".Polyt"))
    movable_nu: str = "ν"


@dataclass
class MatchingConfig:
    """Fuzzy matching configuration."""
    min_score: float = field(default_factory=lambda: float(os.getenv("LEXIKON_MIN_MATCH_SCORE", "0.0")))


@dataclass
class Config:
    """Main configuration class combining all sub-configs."""
    env: Environment = field(default_factory=lambda: Environment(os.getenv("ENVIRONMENT", "development")))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)

    def __post_init__(self):
        self.validate()

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.env == Environment.DEVELOPMENT

    def validate(self) -> None:
        """Reject values the engine cannot work with."""
        if self.logging.level.upper() not in LogLevel.__members__:
            raise ConfigError(
                f"Unknown log level: {self.logging.level}",
                config_key="LOG_LEVEL",
                actual_value=self.logging.level,
            )
        if not 0.0 <= self.observability.sample_rate <= 1.0:
            raise ConfigError(
                "Sample rate must be within [0, 1]",
                config_key="OTEL_SAMPLE_RATE",
                actual_value=self.observability.sample_rate,
            )
        if not 0.0 <= self.matching.min_score <= 2.0:
            raise ConfigError(
                "Minimum match score must be within [0, 2]",
                config_key="LEXIKON_MIN_MATCH_SCORE",
                actual_value=self.matching.min_score,
            )
        if not self.extraction.line_break:
            raise ConfigError("Line break marker cannot be empty", config_key="line_break")

    def setup_logging(self) -> None:
        """Setup structured logging based on configuration."""
        from observability.logging import LoggingConfig as StructuredLoggingConfig, setup_logging

        setup_logging(StructuredLoggingConfig(
            service_name=self.observability.service_name,
            level=self.logging.level.upper(),
            json_format=self.logging.json_format,
            log_to_file=self.logging.log_to_file,
            log_file_path=self.logging.log_file,
            environment=self.env.value,
        ))

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "env": self.env.value,
            "debug": self.debug,
            "logging": {
                "level": self.logging.level,
                "json_format": self.logging.json_format,
            },
            "observability": self.observability.to_dict(),
            "extraction": {
                "no_form_glyph": self.extraction.no_form_glyph,
                "notes_header": self.extraction.notes_header,
                "table_selector": self.extraction.table_selector,
                "title_selector": self.extraction.title_selector,
                "form_selector": self.extraction.form_selector,
            },
            "matching": {
                "min_score": self.matching.min_score,
            },
        }


# Singleton configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    load_dotenv(override=True)
    _config = Config()
    return _config
