"""Tests for the performance profiling module."""

from unittest.mock import patch

import pytest

from ssml_parser.api import parse
from ssml_parser.tools.profiling import ParseProfiler, ProfileReport


class TestProfileReport:
    """Test ProfileReport data class."""

    def test_profile_report_creation(self):
        """Test derived timing and memory figures."""
        report = ProfileReport(
            label="parse",
            start_time=1000.0,
            end_time=1001.0,
            memory_start=1024,
            memory_end=2048,
            input_size=500,
        )

        assert report.duration_ms == 1000.0  # 1 second = 1000ms
        assert report.memory_delta == 1024  # 2048 - 1024
        assert report.characters_per_second == 500.0

    def test_memory_delta_never_negative(self):
        """Test memory released during the block counts as zero."""
        report = ProfileReport("parse", 0.0, 1.0, memory_start=4096, memory_end=1024)
        assert report.memory_delta == 0

    def test_zero_duration(self):
        """Test throughput for an instantaneous block."""
        report = ProfileReport("parse", 5.0, 5.0, input_size=10)
        assert report.characters_per_second == 0.0

    def test_to_dict(self):
        """Test dictionary representation."""
        data = ProfileReport("parse", 0.0, 0.5, input_size=100).to_dict()
        assert data == {
            "label": "parse",
            "duration_ms": 500.0,
            "memory_delta_bytes": 0,
            "input_size": 100,
            "characters_per_second": 200.0,
        }


class TestParseProfiler:
    """Test the context-manager profiler."""

    def test_memory_tracking_disabled(self):
        """Test no memory is sampled when tracking is off."""
        profiler = ParseProfiler(enable_memory_tracking=False)
        assert profiler.current_memory() == 0

        with profiler.profile("parse", input_size=20):
            parse("<speak>hello</speak>")

        (report,) = profiler.reports
        assert report.label == "parse"
        assert report.input_size == 20
        assert report.memory_delta == 0
        assert report.duration_ms >= 0

    def test_memory_tracking_enabled(self):
        """Test resident memory is sampled through psutil."""
        profiler = ParseProfiler()
        assert profiler.current_memory() > 0

    def test_sampled_memory_delta(self):
        """Test the report records memory before and after the block."""
        profiler = ParseProfiler()
        with patch.object(profiler, "current_memory", side_effect=[100, 600]):
            with profiler.profile("parse"):
                pass

        assert profiler.reports[0].memory_delta == 500

    def test_report_recorded_on_exception(self):
        """Test failing blocks are still recorded."""
        profiler = ParseProfiler(enable_memory_tracking=False)
        with pytest.raises(ValueError):
            with profiler.profile("failing"):
                raise ValueError("boom")

        assert [r.label for r in profiler.reports] == ["failing"]
