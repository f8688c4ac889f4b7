from __future__ import annotations

from typing import Protocol


class TagAliasProvider(Protocol):
    def canonical_form(self, raw: str) -> str | None:
        """Return the display form registered for a tag alias, if any."""

    def as_mapping(self) -> dict[str, str]:
        """Return the full lowercase-alias to display-form table."""
