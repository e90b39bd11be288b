"""Host that runs Python callables in the current event loop."""

import asyncio
import inspect
import logging
import time
import traceback
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from dynamic_skip.bus import MessageSink
from dynamic_skip.hosts.base import ExecutionContext, TestCaseHost
from dynamic_skip.hosts.inline.config import InlineHostConfig
from dynamic_skip.models.messages import (
    DiagnosticMessage,
    TestFailed,
    TestFinished,
    TestPassed,
    TestSkipped,
    TestStarting,
)
from dynamic_skip.models.summary import RunSummary
from dynamic_skip.models.test_case import TestCase
from dynamic_skip.skip import exception_type_name

log = logging.getLogger(__name__)


def exception_chain(exc: BaseException) -> Sequence[BaseException]:
    """Return ``exc`` followed by the exceptions it was raised from."""
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return chain


def failure_message(
    test_case: TestCase, exc: BaseException, elapsed: float
) -> TestFailed:
    """Describe ``exc`` raised by ``test_case`` as a failure message."""
    chain = exception_chain(exc)
    return TestFailed(
        test=test_case.ref,
        exception_types=tuple(exception_type_name(type(e)) for e in chain),
        messages=tuple(str(e) for e in chain),
        stack_traces=tuple(
            "".join(traceback.format_tb(e.__traceback__)) for e in chain
        ),
        execution_time=elapsed,
    )


@dataclass(frozen=True, kw_only=True)
class InlineTestHost(TestCaseHost):
    """Runs coroutine bodies on the event loop and sync bodies in worker threads.

    Constructor arguments from the execution context are passed to the body
    ahead of the case's data row arguments.
    """

    config: InlineHostConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: InlineHostConfig
    ) -> AsyncGenerator["InlineTestHost", None]:
        """Create host from configuration."""
        yield cls(config=config)

    async def run_test_case(
        self,
        test_case: TestCase,
        message_bus: MessageSink,
        context: ExecutionContext,
    ) -> RunSummary:
        """Run the case body and report its outcome."""
        test = test_case.ref

        if context.cancel_event.is_set():
            if context.diagnostic_sink is not None:
                context.diagnostic_sink.post(
                    DiagnosticMessage(
                        message=f"Not running {test.display_name}: run cancelled"
                    )
                )
            return RunSummary()

        if test_case.skip_reason is not None:
            log.info("Skipping %s: %s", test.display_name, test_case.skip_reason)
            if message_bus.post(TestSkipped(test=test, reason=test_case.skip_reason)):
                context.cancel_event.set()
            message_bus.post(TestFinished(test=test))
            return RunSummary(total=1, skipped=1)

        if message_bus.post(TestStarting(test=test)):
            context.cancel_event.set()

        started = time.perf_counter()
        try:
            await self._invoke(test_case, context)
        except Exception as exc:
            elapsed = time.perf_counter() - started
            log.debug("Test %s raised %r", test.display_name, exc)
            result: TestPassed | TestFailed = failure_message(test_case, exc, elapsed)
        else:
            elapsed = time.perf_counter() - started
            result = TestPassed(test=test, execution_time=elapsed)

        if message_bus.post(result):
            context.cancel_event.set()
        if message_bus.post(TestFinished(test=test, execution_time=elapsed)):
            context.cancel_event.set()

        return RunSummary(
            total=1,
            failed=1 if isinstance(result, TestFailed) else 0,
            time=elapsed,
        )

    async def _invoke(self, test_case: TestCase, context: ExecutionContext) -> None:
        args = (*context.constructor_arguments, *test_case.arguments)
        if inspect.iscoroutinefunction(test_case.body):
            call = test_case.body(*args)
        else:
            # Sync bodies run in a worker thread; a timed out thread is abandoned
            call = asyncio.to_thread(test_case.body, *args)
        outcome = await asyncio.wait_for(call, timeout=self.config.timeout)
        if inspect.isawaitable(outcome):
            await asyncio.wait_for(outcome, timeout=self.config.timeout)
