"""Aggregate counters for a test case execution."""

from dataclasses import dataclass


@dataclass(kw_only=True)
class RunSummary:
    """Counters produced by the host for one or more executed test cases.

    Mutable: the adapter corrects ``failed`` and ``skipped`` in place.
    """

    total: int = 0
    failed: int = 0
    skipped: int = 0
    time: float = 0.0

    @property
    def passed(self) -> int:
        """Number of tests that neither failed nor were skipped."""
        return self.total - self.failed - self.skipped

    def aggregate(self, other: "RunSummary") -> "RunSummary":
        """Add the counters of ``other`` to this summary."""
        self.total += other.total
        self.failed += other.failed
        self.skipped += other.skipped
        self.time += other.time
        return self
