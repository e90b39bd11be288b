"""Correction of run summaries after failures were reported as skips."""

import logging

from dynamic_skip.errors import SummaryConsistencyError
from dynamic_skip.models.summary import RunSummary

log = logging.getLogger(__name__)


def reconcile_summary(summary: RunSummary, reclassified_count: int) -> RunSummary:
    """Move ``reclassified_count`` tests from failed to skipped.

    The host counted each reclassified test as failed, so ``total`` already
    includes it and stays unchanged. The summary is updated in place and
    returned.

    Raises:
        ValueError: If ``reclassified_count`` is negative
        SummaryConsistencyError: If the summary has fewer failures than
            were reclassified

    """
    if reclassified_count < 0:
        raise ValueError(f"reclassified_count must be >= 0, got {reclassified_count}")
    if reclassified_count == 0:
        return summary

    if summary.failed < reclassified_count:
        log.error(
            "Run summary reports %d failure(s) but %d were reclassified",
            summary.failed,
            reclassified_count,
        )
        raise SummaryConsistencyError(summary.failed, reclassified_count)

    summary.failed -= reclassified_count
    summary.skipped += reclassified_count
    log.info(
        "Reclassified %d failure(s) as skipped (failed=%d skipped=%d total=%d)",
        reclassified_count,
        summary.failed,
        summary.skipped,
        summary.total,
    )
    return summary
