from __future__ import annotations

import re

BULLET_MARKER = "・"
PERIOD = "。"

_BULLET_PATTERN = re.compile(rf"^\s*{BULLET_MARKER}")
_BLANK_RUN_RE = re.compile(r"[ \t]+")


def non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def is_bullet_line(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def split_bullets(text: str) -> tuple[list[str], list[str]]:
    """Return (bullet contents without the marker, non-bullet lines)."""
    bullets: list[str] = []
    others: list[str] = []
    for line in non_empty_lines(text):
        if is_bullet_line(line):
            bullets.append(strip_bullet_prefix(line))
        else:
            others.append(line)
    return bullets, others


def collapse_blanks(text: str) -> str:
    return _BLANK_RUN_RE.sub(" ", text)


def ends_with_period(text: str) -> bool:
    return text.endswith(PERIOD)


def ensure_period(text: str) -> str:
    if not text or text.endswith(PERIOD):
        return text
    return text + PERIOD

