"""Result messages reported while a test case executes."""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class TestRef:
    """Identity of the test a message concerns."""

    __test__ = False

    unique_id: str
    display_name: str


@dataclass(frozen=True, kw_only=True)
class ResultMessage:
    """Base for all messages describing one test's execution."""

    test: TestRef


@dataclass(frozen=True, kw_only=True)
class TestStarting(ResultMessage):
    """The test body is about to run."""

    __test__ = False


@dataclass(frozen=True, kw_only=True)
class TestPassed(ResultMessage):
    """The test body completed without raising."""

    __test__ = False

    execution_time: float = 0.0
    output: str = ""


@dataclass(frozen=True, kw_only=True)
class TestFailed(ResultMessage):
    """The test body raised.

    ``exception_types``, ``messages`` and ``stack_traces`` are parallel
    sequences, outermost exception first.
    """

    __test__ = False

    exception_types: Sequence[str] = field(default_factory=tuple)
    messages: Sequence[str] = field(default_factory=tuple)
    stack_traces: Sequence[str] = field(default_factory=tuple)
    execution_time: float = 0.0
    output: str = ""

    @property
    def exception_type(self) -> str | None:
        """Type name of the outermost exception, if any."""
        return self.exception_types[0] if self.exception_types else None


@dataclass(frozen=True, kw_only=True)
class TestSkipped(ResultMessage):
    """The test was skipped."""

    __test__ = False

    reason: str = ""


@dataclass(frozen=True, kw_only=True)
class TestFinished(ResultMessage):
    """The test finished, whatever its outcome."""

    __test__ = False

    execution_time: float = 0.0
    output: str = ""


@dataclass(frozen=True, kw_only=True)
class DiagnosticMessage:
    """Free-form message for a diagnostic sink."""

    message: str
