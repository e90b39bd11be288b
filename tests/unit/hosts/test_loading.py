"""Tests for host loading module."""

import pytest

from dynamic_skip.errors import HostNotFoundError
from dynamic_skip.hosts.inline import inline_host_manifest
from dynamic_skip.hosts.loading import load_host_manifest


def test_load_host_manifest_returns_manifest() -> None:
    """Loads host manifest by key."""
    manifest = load_host_manifest("inline")

    assert manifest is inline_host_manifest


def test_load_host_manifest_raises_for_unknown_host() -> None:
    """Raises HostNotFoundError for unknown host key."""
    with pytest.raises(HostNotFoundError) as exc_info:
        load_host_manifest("unknown-host")

    assert "unknown-host" in str(exc_info.value)
    assert "Available hosts" in str(exc_info.value)
