"""Shared utilities for SSML parsing.

This module provides the configuration object, error taxonomy, result types,
and logging helpers used across all processing layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)
from .errors import (
    ErrorKind,
    InvalidRootError,
    MalformedAttributeError,
    MalformedDocumentError,
    MismatchedTagError,
    SSMLParseError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    ParseResult,
    PerformanceMetrics,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "ErrorKind",
    "InvalidRootError",
    "MalformedAttributeError",
    "MalformedDocumentError",
    "MismatchedTagError",
    "SSMLParseError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "ParseResult",
    "PerformanceMetrics",
]
