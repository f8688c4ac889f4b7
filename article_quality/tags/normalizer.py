"""Canonical display forms for raw article tags.

Tags arrive from feeds as comma-separated strings, arrays of strings, or
arrays of ``{"name": ...}`` objects. Everything funnels through
``normalize_tag_input`` which returns a deduplicated list in first-seen order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from . import get_default_alias_provider

logger = logging.getLogger(__name__)

MAX_TAG_LENGTH = 30

_GENERIC_TAGS = frozenset(
    {
        "プログラミング",
        "programming",
        "開発",
        "development",
        "技術",
        "technology",
        "ソフトウェア",
        "software",
    }
)

TAG_NORMALIZATION_MAP: dict[str, str] = get_default_alias_provider().as_mapping()


def normalize_tag(tag: str) -> str:
    trimmed = tag.strip()
    if not trimmed:
        return ""
    canonical = get_default_alias_provider().canonical_form(trimmed)
    if canonical:
        return canonical
    return trimmed[0].upper() + trimmed[1:]


def is_valid_tag(tag: Any) -> bool:
    if not isinstance(tag, str):
        return False
    trimmed = tag.strip()
    if not trimmed or len(trimmed) > MAX_TAG_LENGTH:
        return False
    return trimmed.lower() not in _GENERIC_TAGS


def _dedupe_casefold(tags: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for tag in tags:
        key = tag.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(tag)
    return result


def normalize_tags(tags: Iterable[Any]) -> list[str]:
    normalized = (normalize_tag(tag) for tag in tags if isinstance(tag, str))
    return _dedupe_casefold(tag for tag in normalized if is_valid_tag(tag))


def _coerce_tokens(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(",")
    tokens: list[str] = []
    for item in value:
        if item is None or isinstance(item, bool):
            continue
        if isinstance(item, (int, float)):
            tokens.append(str(item))
        elif isinstance(item, str):
            tokens.extend(item.split(","))
        elif isinstance(item, Mapping) and isinstance(item.get("name"), str):
            tokens.append(item["name"])
    return tokens


def _is_meaningful_token(token: str) -> bool:
    # Single letters are usually a string that was iterated character by character.
    return len(token) > 1 or token.isdigit()


def normalize_tag_input(value: str | Iterable[Any] | None) -> list[str]:
    tokens = [token.strip() for token in _coerce_tokens(value)]
    return normalize_tags(token for token in tokens if token and _is_meaningful_token(token))


def is_valid_tag_array(value: Any) -> bool:
    if not isinstance(value, list):
        return False
    return all(isinstance(item, str) and item.strip() for item in value)


def validate_and_normalize_tags(value: str | Iterable[Any] | None, source_name: str) -> list[str]:
    tags = normalize_tag_input(value)
    if not tags and value:
        logger.warning("tags_filtered_out source=%s raw=%r", source_name, value)
    return tags
