"""Tests for the TestCase model."""

from dynamic_skip.models.messages import TestRef
from dynamic_skip.models.test_case import TestCase


def sample_body(*args: object) -> None:
    """Do nothing."""


def test_from_callable_uses_qualified_name() -> None:
    """Names a case after the module and qualified name of its body."""
    case = TestCase.from_callable(sample_body)

    assert case.display_name == f"{sample_body.__module__}.sample_body"
    assert case.unique_id == case.display_name
    assert case.arguments == ()
    assert case.skip_reason is None


def test_from_callable_appends_data_row() -> None:
    """Data row arguments are rendered after the name."""
    case = TestCase.from_callable(sample_body, [1, "a"])

    assert case.display_name == f"{sample_body.__module__}.sample_body(1, 'a')"
    assert case.arguments == (1, "a")


def test_from_callable_keeps_skip_reason() -> None:
    """A statically skipped row keeps its reason."""
    case = TestCase.from_callable(sample_body, [None], skip_reason="flaky")

    assert case.skip_reason == "flaky"


def test_ref_reflects_identity() -> None:
    """The reference carries id and display name."""
    case = TestCase(unique_id="id-1", display_name="Foo", body=sample_body)

    assert case.ref == TestRef(unique_id="id-1", display_name="Foo")
