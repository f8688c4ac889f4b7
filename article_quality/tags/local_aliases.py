from __future__ import annotations

import json
from pathlib import Path

from .provider import TagAliasProvider


class LocalTagAliases(TagAliasProvider):
    def __init__(self, aliases_path: str | Path | None = None) -> None:
        path = Path(aliases_path) if aliases_path else Path(__file__).with_name("aliases.json")
        self._aliases = self._load_aliases(path)

    @staticmethod
    def _load_aliases(path: Path) -> dict[str, str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return {str(key).strip().lower(): str(value) for key, value in raw.items() if str(value).strip()}

    def canonical_form(self, raw: str) -> str | None:
        return self._aliases.get(raw.strip().lower())

    def as_mapping(self) -> dict[str, str]:
        return dict(self._aliases)
