"""Runner for executing several test cases through one adapter."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from dynamic_skip.adapter import TestCaseAdapter
from dynamic_skip.bus import MessageSink
from dynamic_skip.hosts.base import ExecutionContext
from dynamic_skip.hosts.loading import load_host_manifest
from dynamic_skip.models.config import AdapterConfig
from dynamic_skip.models.summary import RunSummary
from dynamic_skip.models.test_case import TestCase

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SkippableTestRunner:
    """Runs test cases concurrently and aggregates their summaries."""

    __test__ = False

    adapter: TestCaseAdapter

    @classmethod
    @asynccontextmanager
    async def from_host_key(
        cls,
        key: str,
        host_config: Mapping[str, Any],
        adapter_config: AdapterConfig | None = None,
    ) -> AsyncGenerator["SkippableTestRunner", None]:
        """Create runner over the host plugin registered under ``key``.

        Args:
            key: Host key as registered in pyproject.toml (e.g., "inline")
            host_config: Raw host configuration, validated by the host's
                configuration class
            adapter_config: Adapter settings (defaults when omitted)

        Raises:
            HostNotFoundError: If no host with the given key is found
            pydantic.ValidationError: If ``host_config`` is invalid

        """
        log.info("Loading host: %s", key)
        manifest = load_host_manifest(key)
        config = manifest.config_cls.model_validate(host_config)

        async with manifest.host_factory(config) as host:
            adapter = TestCaseAdapter.from_config(
                host, adapter_config or AdapterConfig()
            )
            yield cls(adapter=adapter)

    async def run_all(
        self,
        test_cases: Sequence[TestCase],
        message_bus: MessageSink,
        context: ExecutionContext,
    ) -> RunSummary:
        """Execute all cases and return the combined summary.

        Every case runs to completion before an error is reported.

        Args:
            test_cases: Cases to execute
            message_bus: Sink shared by every case
            context: Execution context shared by every case

        Returns:
            Sum of the corrected summaries of all cases

        Raises:
            Exception: The first error raised by any case, once all cases
                have finished

        """
        if not test_cases:
            log.info("No test cases to run")
            return RunSummary()

        log.info("Running %d test case(s)...", len(test_cases))
        results = await asyncio.gather(
            *(
                self.adapter.execute(test_case, message_bus, context)
                for test_case in test_cases
            ),
            return_exceptions=True,
        )

        return self._process_results(test_cases, results)

    def _process_results(
        self,
        test_cases: Sequence[TestCase],
        results: Sequence[RunSummary | BaseException],
    ) -> RunSummary:
        """Aggregate summaries, raising the first error after logging all."""
        total = RunSummary()
        errors: list[BaseException] = []

        for test_case, result in zip(test_cases, results, strict=True):
            if isinstance(result, RunSummary):
                total.aggregate(result)
            else:
                log.error(
                    "Test case execution failed: %s: %s",
                    test_case.display_name,
                    result,
                    exc_info=result,
                )
                errors.append(result)

        if errors:
            raise errors[0]

        log.info(
            "Run completed: total=%d passed=%d failed=%d skipped=%d (%.2fs)",
            total.total,
            total.passed,
            total.failed,
            total.skipped,
            total.time,
        )
        return total
