"""Inline host manifest."""

from dynamic_skip.hosts.inline.config import InlineHostConfig
from dynamic_skip.hosts.inline.host import InlineTestHost
from dynamic_skip.hosts.manifest import HostManifest

inline_host_manifest = HostManifest(
    config_cls=InlineHostConfig,
    host_factory=InlineTestHost.from_config,
)
