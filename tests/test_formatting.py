"""Tests for formatting helpers."""

from perf_analyzer.engine.models import ResourceTiming
from perf_analyzer.utils.formatting import (
    format_bytes,
    format_duration,
    summarize_by_type,
    truncate_name,
)


class TestFormatBytes:
    """Test byte formatting."""

    def test_zero(self):
        assert format_bytes(0) == "0 B"

    def test_unit_boundaries(self):
        assert format_bytes(1024) == "1 KB"
        assert format_bytes(1024 ** 2) == "1 MB"
        assert format_bytes(1024 ** 3) == "1 GB"

    def test_fractional_values(self):
        assert format_bytes(1536) == "1.5 KB"
        assert format_bytes(500) == "500 B"

    def test_caps_at_gigabytes(self):
        assert format_bytes(1024 ** 4) == "1024 GB"


class TestFormatDuration:
    """Test duration formatting."""

    def test_zero(self):
        assert format_duration(0) == "0ms"

    def test_below_one_second(self):
        assert format_duration(999) == "999ms"
        assert format_duration(12.4) == "12ms"

    def test_seconds(self):
        assert format_duration(1000) == "1.0s"
        assert format_duration(2500) == "2.5s"


class TestDisplayHelpers:
    """Test truncation and aggregation helpers."""

    def test_short_name_unchanged(self):
        assert truncate_name("https://example.com/a.js") == "https://example.com/a.js"

    def test_long_name_truncated(self):
        name = "https://example.com/" + "x" * 80 + "/bundle.js"
        short = truncate_name(name)
        assert short.startswith(name[:30])
        assert short.endswith(name[-27:])
        assert "..." in short
        assert len(short) == 60

    def test_summarize_by_type_keeps_first_seen_order(self):
        resources = [
            ResourceTiming("a", 100, 1, "document"),
            ResourceTiming("b", 10, 1, "script"),
            ResourceTiming("c", 20, 1, "script"),
            ResourceTiming("d", 5, 1, "widget"),
        ]
        summary = summarize_by_type(resources)
        assert [s["type"] for s in summary] == ["document", "script", "widget"]
        assert summary[1] == {"type": "script", "count": 2, "size": 30}
