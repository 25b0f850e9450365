"""Result objects and diagnostic types for SSML parsing.

This module defines the non-raising result wrapper returned by
``parse_document`` together with the diagnostics and performance metrics it
carries.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .errors import SSMLParseError

if TYPE_CHECKING:
    from ssml_parser.tree.nodes import Element


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert diagnostic to dictionary representation."""
        result: Dict[str, Any] = {
            "severity": self.severity.name,
            "message": self.message,
            "component": self.component,
        }
        if self.details:
            result["details"] = dict(self.details)
        return result


@dataclass
class PerformanceMetrics:
    """Performance metrics for a parse operation."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0
    elements_built: int = 0
    text_nodes_built: int = 0
    memory_used_bytes: int = 0

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary representation."""
        return {
            "processing_time_ms": self.processing_time_ms,
            "characters_processed": self.characters_processed,
            "elements_built": self.elements_built,
            "text_nodes_built": self.text_nodes_built,
            "memory_used_bytes": self.memory_used_bytes,
            "characters_per_second": self.characters_per_second,
        }


@dataclass
class ParseResult:
    """Outcome of a non-raising parse.

    Exactly one of ``root`` and ``error`` is set.
    """

    root: Optional["Element"] = None
    error: Optional[SSMLParseError] = None
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None
    text: Optional[str] = None  # flattened tree text, set on success

    def __post_init__(self) -> None:
        """Validate that the result is either a tree or an error."""
        if (self.root is None) == (self.error is None):
            raise ValueError("ParseResult requires exactly one of root or error")
        if self.error is not None and self.text is not None:
            raise ValueError("A failed ParseResult cannot carry text")

    @property
    def success(self) -> bool:
        """True when the document parsed into a tree."""
        return self.root is not None

    @property
    def error_kind(self) -> Optional[str]:
        """Name of the error kind, or None on success."""
        if self.error is None:
            return None
        return self.error.kind.value

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Append a diagnostic tagged with this result's correlation ID."""
        self.diagnostics.append(
            DiagnosticEntry(
                severity=severity,
                message=message,
                component=component,
                details=details,
                correlation_id=self.correlation_id,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        result: Dict[str, Any] = {
            "success": self.success,
            "diagnostics": [entry.to_dict() for entry in self.diagnostics],
            "performance": self.performance.to_dict(),
        }
        if self.root is not None:
            result["root"] = self.root.to_dict()
        if self.text is not None:
            result["text"] = self.text
        if self.error is not None:
            result["error"] = {
                "kind": self.error_kind,
                "message": self.error.message,
                "fragment": self.error.fragment,
            }
        return result
