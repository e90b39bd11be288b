"""The skip sentinel raised by test bodies to skip at run time."""

from typing import NoReturn


class SkipTestError(Exception):
    """Raised by a test body to request that the test be reported as skipped.

    The first argument is used as the skip reason.
    """

    __test__ = False


def exception_type_name(exc_type: type[BaseException]) -> str:
    """Return the fully qualified name used to identify an exception type."""
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


SKIP_SENTINEL = exception_type_name(SkipTestError)


def skip(reason: str = "") -> NoReturn:
    """Skip the currently running test."""
    raise SkipTestError(reason)
