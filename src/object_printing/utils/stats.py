"""
Statistics tracking for dump exports.

Tracks how many objects were written or skipped, the volume of text
produced and the errors met while exporting.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DumpStats:
    """
    Statistics tracker for a dump export.

    Filled in by the exporter while objects are printed and written.
    """

    objects_written: int = 0
    objects_skipped: int = 0
    bytes_written: int = 0
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    errors: List[Exception] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        """
        Calculate export duration in seconds.

        Uses end_time if the export is complete, otherwise current time.
        """
        if self.end_time:
            return self.end_time - self.start_time
        return time.time() - self.start_time

    @property
    def objects_per_second(self) -> float:
        """
        Calculate export throughput.

        Returns 0 if duration is zero to avoid division errors.
        """
        duration = self.duration_seconds
        if duration > 0:
            return self.objects_written / duration
        return 0

    @property
    def objects_processed(self) -> int:
        return self.objects_written + self.objects_skipped

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None

    @property
    def error_count(self) -> int:
        """Get total number of errors encountered."""
        return len(self.errors)

    def summary(self) -> str:
        """
        Generate human-readable summary of statistics.

        Returns:
            Formatted string with key metrics
        """
        parts = [
            f"Wrote {self.objects_written} objects",
            f"Size: {self.bytes_written} bytes",
            f"Rate: {self.objects_per_second:.1f} objects/sec",
            f"Duration: {self.duration_seconds:.1f} seconds",
        ]

        if self.objects_skipped > 0:
            parts.append(f"Skipped: {self.objects_skipped}")

        if self.error_count > 0:
            parts.append(f"Errors: {self.error_count}")

        return " | ".join(parts)

    def as_dict(self) -> Dict[str, Any]:
        """
        Export statistics as dictionary.

        Useful for logging or reporting.

        Returns:
            Dictionary containing all statistics
        """
        return {
            "objects_written": self.objects_written,
            "objects_skipped": self.objects_skipped,
            "bytes_written": self.bytes_written,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "duration_seconds": self.duration_seconds,
            "objects_per_second": self.objects_per_second,
            "error_count": self.error_count,
            "is_complete": self.is_complete,
        }
