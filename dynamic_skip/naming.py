"""Display name shortening."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DisplayNameFormatter:
    """Strips a namespace qualifier from the front of test display names.

    Only a leading occurrence of ``prefix`` is removed. The same text appearing
    later in the name, for example inside data row arguments, is kept.
    """

    prefix: str = ""

    def format(self, qualified_name: str) -> str:
        """Return ``qualified_name`` without the leading prefix."""
        return qualified_name.removeprefix(self.prefix)
