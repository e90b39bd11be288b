"""Exceptions raised by the adapter."""


class DynamicSkipError(Exception):
    """Base class for adapter errors."""


class SummaryConsistencyError(DynamicSkipError):
    """Raised when more failures were reclassified than the host counted."""

    def __init__(self, failed: int, reclassified_count: int) -> None:
        super().__init__(
            f"Reclassified {reclassified_count} failure(s) as skipped, "
            f"but the run summary only reports {failed} failure(s)"
        )
        self.failed = failed
        self.reclassified_count = reclassified_count


class HostNotFoundError(DynamicSkipError):
    """Raised when a host plugin is not found."""
