"""Host manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from dynamic_skip.hosts.base import TestCaseHost

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class HostManifest(Generic[ConfigT]):
    """Manifest describing a host plugin.

    References the configuration class and the factory that creates the host,
    so hosts are only imported once selected by key.
    """

    config_cls: type[ConfigT]
    host_factory: Callable[[ConfigT], AbstractAsyncContextManager[TestCaseHost]]
