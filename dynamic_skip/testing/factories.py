"""Test factories for generating test data.

Requires polyfactory from the `test` extra.
"""

from polyfactory.factories import DataclassFactory

from dynamic_skip.models.messages import TestFailed, TestRef


class TestRefFactory(DataclassFactory[TestRef]):
    """Factory for TestRef."""

    __model__ = TestRef


class TestFailedFactory(DataclassFactory[TestFailed]):
    """Factory for TestFailed."""

    __model__ = TestFailed

    exception_types = ("builtins.AssertionError",)
    messages = ("assert 1 == 2",)
    stack_traces = ("",)

