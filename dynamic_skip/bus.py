"""Message bus that turns skip-sentinel failures into skips."""

import logging
import threading
from types import TracebackType
from typing import Protocol

from dynamic_skip.models.messages import TestFailed, TestSkipped
from dynamic_skip.skip import SKIP_SENTINEL

log = logging.getLogger(__name__)


class MessageSink(Protocol):
    """Channel result messages are posted to.

    ``post`` returns True when the consumer wants execution to stop early.
    """

    def post(self, message: object) -> bool: ...

    def close(self) -> None: ...


class SkippableMessageBus:
    """Wraps a sink and reports sentinel failures as skips.

    Every posted message results in exactly one message forwarded to the
    wrapped sink. ``reclassified_count`` counts the substitutions made.
    """

    def __init__(self, inner: MessageSink, sentinel: str = SKIP_SENTINEL) -> None:
        self._inner = inner
        self._sentinel = sentinel
        self._lock = threading.Lock()
        self._reclassified_count = 0

    @property
    def reclassified_count(self) -> int:
        """Number of failures forwarded as skips so far."""
        with self._lock:
            return self._reclassified_count

    def post(self, message: object) -> bool:
        """Forward ``message``, replacing a sentinel failure with a skip."""
        if isinstance(message, TestFailed) and message.exception_type == self._sentinel:
            with self._lock:
                self._reclassified_count += 1
            reason = message.messages[0] if message.messages else ""
            log.debug(
                "Reporting %s as skipped: %s", message.test.display_name, reason
            )
            return self._inner.post(TestSkipped(test=message.test, reason=reason))
        return self._inner.post(message)

    def close(self) -> None:
        """Release the bus. The wrapped sink is owned by the caller."""

    def __enter__(self) -> "SkippableMessageBus":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
