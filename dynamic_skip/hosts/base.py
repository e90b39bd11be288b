"""Abstract base class for test hosts."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from dynamic_skip.bus import MessageSink
from dynamic_skip.models.summary import RunSummary
from dynamic_skip.models.test_case import TestCase


@dataclass(frozen=True, kw_only=True)
class ExecutionContext:
    """Everything a host needs to run a test body besides the case itself."""

    constructor_arguments: Sequence[Any] = field(default_factory=tuple)
    cancel_event: asyncio.Event = field(default_factory=asyncio.Event)
    diagnostic_sink: MessageSink | None = None


@dataclass(frozen=True, kw_only=True)
class TestCaseHost(ABC):
    """Runtime that executes test bodies and reports their outcome.

    Hosts know nothing about skipping at run time: a body raising the skip
    sentinel is reported as a failure and counted as one.
    """

    __test__ = False

    @abstractmethod
    async def run_test_case(
        self,
        test_case: TestCase,
        message_bus: MessageSink,
        context: ExecutionContext,
    ) -> RunSummary:
        """Run one test case, posting its result messages to ``message_bus``.

        Args:
            test_case: Case to run
            message_bus: Sink for every result message of this case
            context: Constructor arguments, cancellation and diagnostics

        Returns:
            Summary counting this case

        """
