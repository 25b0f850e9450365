"""Performance profiling tools for the SSML parser.

Measures wall time and resident memory around parse operations.
"""

import time
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Dict, List, Optional, Type

import psutil

from ssml_parser.shared.logging import get_logger


@dataclass
class ProfileReport:
    """Timing and memory figures for one profiled operation."""

    label: str
    start_time: float
    end_time: float = 0.0
    memory_start: int = 0  # bytes
    memory_end: int = 0  # bytes
    input_size: int = 0  # characters

    @property
    def duration_ms(self) -> float:
        """Processing duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000

    @property
    def memory_delta(self) -> int:
        """Resident memory change in bytes (never negative)."""
        return max(0, self.memory_end - self.memory_start)

    @property
    def characters_per_second(self) -> float:
        """Input characters processed per second."""
        duration_s = self.end_time - self.start_time
        if duration_s <= 0:
            return 0.0
        return self.input_size / duration_s

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary representation."""
        return {
            "label": self.label,
            "duration_ms": self.duration_ms,
            "memory_delta_bytes": self.memory_delta,
            "input_size": self.input_size,
            "characters_per_second": self.characters_per_second,
        }


class ParseProfiler:
    """Context-manager profiler for parse operations.

    Examples:
        >>> profiler = ParseProfiler()
        >>> with profiler.profile("greeting", input_size=24):
        ...     root = parse("<speak>hello</speak>")
        >>> profiler.reports[-1].duration_ms >= 0
        True
    """

    def __init__(self, enable_memory_tracking: bool = True) -> None:
        """Initialize the profiler.

        Args:
            enable_memory_tracking: Sample resident memory with psutil
        """
        self.enable_memory_tracking = enable_memory_tracking
        self.reports: List[ProfileReport] = []
        self.logger = get_logger(__name__, None, "parse_profiler")
        self._process = psutil.Process() if enable_memory_tracking else None

    def current_memory(self) -> int:
        """Resident set size of this process in bytes, or 0 when disabled."""
        if self._process is None:
            return 0
        return int(self._process.memory_info().rss)

    def profile(self, label: str, input_size: int = 0) -> "_ProfileContext":
        """Profile the enclosed block under ``label``."""
        return _ProfileContext(self, label, input_size)


class _ProfileContext:
    def __init__(self, profiler: ParseProfiler, label: str, input_size: int) -> None:
        self.profiler = profiler
        self.report = ProfileReport(
            label=label, start_time=0.0, input_size=input_size
        )

    def __enter__(self) -> ProfileReport:
        self.report.memory_start = self.profiler.current_memory()
        self.report.start_time = time.perf_counter()
        return self.report

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.report.end_time = time.perf_counter()
        self.report.memory_end = self.profiler.current_memory()
        self.profiler.reports.append(self.report)
        self.profiler.logger.debug(
            "Profiled operation",
            extra={
                "label": self.report.label,
                "duration_ms": self.report.duration_ms,
                "memory_delta_bytes": self.report.memory_delta,
                "failed": exc_type is not None,
            }
        )
