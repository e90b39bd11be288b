"""Adapter that runs a test case with run-time skip support."""

import logging
from dataclasses import dataclass, field, replace

from dynamic_skip.bus import MessageSink, SkippableMessageBus
from dynamic_skip.hosts.base import ExecutionContext, TestCaseHost
from dynamic_skip.models.config import AdapterConfig
from dynamic_skip.models.summary import RunSummary
from dynamic_skip.models.test_case import TestCase
from dynamic_skip.naming import DisplayNameFormatter
from dynamic_skip.reconcile import reconcile_summary
from dynamic_skip.skip import SKIP_SENTINEL

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestCaseAdapter:
    """Runs test cases on a host, reporting skip-sentinel failures as skips.

    Holds no per-run state: each ``execute`` call gets its own message bus
    and reclassification counter.
    """

    __test__ = False

    host: TestCaseHost
    formatter: DisplayNameFormatter = field(default_factory=DisplayNameFormatter)
    skip_sentinel: str = SKIP_SENTINEL

    @classmethod
    def from_config(
        cls, host: TestCaseHost, config: AdapterConfig
    ) -> "TestCaseAdapter":
        """Create adapter for ``host`` from configuration."""
        return cls(
            host=host,
            formatter=DisplayNameFormatter(prefix=config.name_prefix),
            skip_sentinel=config.skip_sentinel,
        )

    def display_name(self, test_case: TestCase) -> str:
        """Return the shortened display name of ``test_case``."""
        return self.formatter.format(test_case.display_name)

    async def execute(
        self,
        test_case: TestCase,
        message_bus: MessageSink,
        context: ExecutionContext,
    ) -> RunSummary:
        """Run ``test_case`` on the host and return its corrected summary.

        Args:
            test_case: Case to run
            message_bus: Sink receiving the case's result messages
            context: Execution context passed through to the host

        Returns:
            Host summary with reclassified failures counted as skipped

        Raises:
            SummaryConsistencyError: If the host counted fewer failures than
                were reported as skips

        """
        test_case = replace(test_case, display_name=self.display_name(test_case))

        with SkippableMessageBus(message_bus, sentinel=self.skip_sentinel) as bus:
            summary = await self.host.run_test_case(test_case, bus, context)

        log.debug(
            "Executed %s: total=%d failed=%d skipped=%d reclassified=%d",
            test_case.display_name,
            summary.total,
            summary.failed,
            summary.skipped,
            bus.reclassified_count,
        )
        return reconcile_summary(summary, bus.reclassified_count)
