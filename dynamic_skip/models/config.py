"""Configuration for the skip adapter."""

from pydantic import Field

from dynamic_skip.models.base import Model
from dynamic_skip.skip import SKIP_SENTINEL


class AdapterConfig(Model):
    """Settings shared by every test case the adapter executes."""

    name_prefix: str = Field(
        default="",
        description="Leading qualifier stripped from display names",
    )
    skip_sentinel: str = Field(
        default=SKIP_SENTINEL,
        description="Exception type name that marks a failure as a skip",
    )
