"""
Test statistics tracking for dump exports.

What this tests:
---------------
1. DumpStats initialization
2. Derived metrics (duration, throughput)
3. Summary and dictionary export

Why this matters:
----------------
- Users need visibility into what an export wrote and skipped
"""

import time
from unittest.mock import patch

from object_printing.utils.stats import DumpStats


class TestDumpStats:
    """Test DumpStats behaviour."""

    def test_default_initialization(self):
        """
        Test default initialization values for DumpStats.

        What this tests:
        ---------------
        1. Counters start at zero
        2. Start time is set automatically
        3. End time is None and error list empty

        Why this matters:
        ----------------
        - Consistent initial state for every export
        """
        before = time.time()
        stats = DumpStats()
        after = time.time()

        assert stats.objects_written == 0
        assert stats.objects_skipped == 0
        assert stats.bytes_written == 0
        assert before <= stats.start_time <= after
        assert stats.end_time is None
        assert stats.errors == []
        assert not stats.is_complete

    def test_duration_uses_end_time(self):
        stats = DumpStats(start_time=100.0, end_time=104.0)

        assert stats.duration_seconds == 4.0

    def test_duration_running(self):
        stats = DumpStats(start_time=100.0)

        with patch("time.time", return_value=110.0):
            assert stats.duration_seconds == 10.0

    def test_objects_per_second(self):
        stats = DumpStats(objects_written=10, start_time=100.0, end_time=105.0)

        assert stats.objects_per_second == 2.0

    def test_objects_per_second_zero_duration(self):
        stats = DumpStats(objects_written=10, start_time=100.0, end_time=100.0)

        assert stats.objects_per_second == 0

    def test_objects_processed(self):
        assert DumpStats(objects_written=3, objects_skipped=2).objects_processed == 5

    def test_summary(self):
        stats = DumpStats(objects_written=10, bytes_written=200, start_time=100.0, end_time=105.0)

        assert stats.summary() == (
            "Wrote 10 objects | Size: 200 bytes | Rate: 2.0 objects/sec | Duration: 5.0 seconds"
        )

    def test_summary_with_skips_and_errors(self):
        stats = DumpStats(objects_skipped=1, errors=[ValueError("x")], start_time=1.0, end_time=2.0)

        summary = stats.summary()

        assert "Skipped: 1" in summary
        assert "Errors: 1" in summary

    def test_as_dict(self):
        stats = DumpStats(objects_written=4, start_time=100.0, end_time=102.0)

        data = stats.as_dict()

        assert data["objects_written"] == 4
        assert data["duration_seconds"] == 2.0
        assert data["objects_per_second"] == 2.0
        assert data["is_complete"] is True
        assert data["error_count"] == 0
