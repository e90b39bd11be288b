"""Inline host module."""

from dynamic_skip.hosts.inline.config import InlineHostConfig
from dynamic_skip.hosts.inline.host import InlineTestHost
from dynamic_skip.hosts.inline.manifest import inline_host_manifest

__all__ = ["InlineHostConfig", "InlineTestHost", "inline_host_manifest"]
