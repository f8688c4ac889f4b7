"""Rubric numbers for the checkers, read from ``config/scoring.yaml``.

``SCORING_CONFIG_PATH`` points the loader at another file; the result is
cached until ``clear_scoring_cache()`` is called.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SCORING_PATH = Path(__file__).resolve().parents[2] / "config" / "scoring.yaml"


def scoring_config_path() -> Path:
    override = os.getenv("SCORING_CONFIG_PATH")
    return Path(override) if override else DEFAULT_SCORING_PATH


@lru_cache(maxsize=1)
def _load(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{path}'") from exc
    except OSError as exc:
        raise RuntimeError(f"Cannot read scoring config '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Scoring config '{path}' is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise RuntimeError(f"Scoring config '{path}' must be a mapping at the top level")
    return data


def get_scoring_config() -> dict[str, Any]:
    return _load(scoring_config_path())


def clear_scoring_cache() -> None:
    _load.cache_clear()


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up ``"section.key.subkey"``; any missing segment yields ``default``."""
    if not path:
        return default
    node: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node
