"""Data model for a single documentation tag."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any


def _dedupe(values: Iterable[Any]) -> list[str]:
    """Stringify values and drop repeats, keeping first occurrence order."""
    seen: dict[str, None] = {}
    for v in values:
        seen.setdefault(str(v), None)
    return list(seen)


def as_list(values: Any) -> list[Any]:
    """Wrap a bare string or scalar in a list; None becomes empty."""
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [values]
    return list(values)


def _timestamp_str(value: Any) -> str:
    # Unquoted ISO timestamps in hand-edited YAML load as datetime objects.
    if isinstance(value, date):
        return value.isoformat()
    return "" if value is None else str(value)


def merge_methods(existing: Iterable[Any], new: Iterable[Any]) -> list[str]:
    """Union of two method lists: existing keep position, new ones appended."""
    return _dedupe([*existing, *new])


def subtract_methods(existing: Iterable[Any], removed: Iterable[Any]) -> list[str]:
    """Existing methods minus anything in removed. Unknown names are ignored."""
    drop = {str(m) for m in removed}
    return [m for m in _dedupe(existing) if m not in drop]


@dataclass
class Entry:
    """One file tagged under one feature."""

    path: str
    node: str                          # model | controller | service | … (free-form)
    feature: str
    methods: list[str] = field(default_factory=list)
    description: str = ""
    timestamp: str = ""                # ISO-8601, supplied by the caller

    @classmethod
    def create(
        cls,
        *,
        path: str,
        node: Any,
        feature: str,
        methods: Iterable[Any] | str | None = None,
        timestamp: str,
        description: str | None = "",
    ) -> Entry:
        """Build a new entry with node/methods coerced to strings and description trimmed."""
        return cls(
            path=path,
            node=str(node),
            feature=feature,
            methods=_dedupe(as_list(methods)),
            description=str(description or "").strip(),
            timestamp=timestamp,
        )

    @classmethod
    def from_dict(cls, d: dict[str, Any], feature: str = "") -> Entry:
        return cls(
            path=str(d.get("path", "")),
            node=str(d.get("node", "")),
            feature=str(d.get("feature") or feature),
            methods=[str(m) for m in as_list(d.get("methods") or [])],
            description=str(d.get("description") or ""),
            timestamp=_timestamp_str(d.get("timestamp")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "node": self.node,
            "feature": self.feature,
            "methods": list(self.methods),
            "description": self.description,
            "timestamp": self.timestamp,
        }
