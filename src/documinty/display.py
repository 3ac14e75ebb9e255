"""Formatting helpers shared by the CLI commands."""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from documinty.models import Entry

MAX_DESC_LENGTH = 80
ELLIPSIS = "(…)"


def truncate(text: str | None, limit: int = MAX_DESC_LENGTH) -> str:
    """Cut text to limit chars, marking the cut with (…)."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def parse_methods(raw: str | None) -> list[str]:
    """Split a comma-separated method list, dropping blanks."""
    if not raw:
        return []
    return [m.strip() for m in raw.split(",") if m.strip()]


def group_by_directory(entries: list[Entry]) -> dict[str, list[Entry]]:
    """Group entries by their containing directory, in first-seen order.

    Files at the project root group under ".".
    """
    grouped: dict[str, list[Entry]] = {}
    for e in entries:
        directory = posixpath.dirname(e.path) or "."
        grouped.setdefault(directory, []).append(e)
    return grouped


def basename(path: str) -> str:
    return posixpath.basename(path)
