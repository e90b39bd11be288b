"""Run-time test skipping for hosts without a native skip outcome."""

from dynamic_skip.adapter import TestCaseAdapter
from dynamic_skip.bus import MessageSink, SkippableMessageBus
from dynamic_skip.errors import (
    DynamicSkipError,
    HostNotFoundError,
    SummaryConsistencyError,
)
from dynamic_skip.naming import DisplayNameFormatter
from dynamic_skip.reconcile import reconcile_summary
from dynamic_skip.skip import SKIP_SENTINEL, SkipTestError, skip

__all__ = [
    "SKIP_SENTINEL",
    "DisplayNameFormatter",
    "DynamicSkipError",
    "HostNotFoundError",
    "MessageSink",
    "SkipTestError",
    "SkippableMessageBus",
    "SummaryConsistencyError",
    "TestCaseAdapter",
    "reconcile_summary",
    "skip",
]
