"""Configuration for the inline host."""

from pydantic import BaseModel, PositiveFloat


class InlineHostConfig(BaseModel):
    """Configuration for the inline host."""

    # None disables the limit
    timeout: PositiveFloat | None = None
