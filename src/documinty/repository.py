"""Read and write features/<name>.yml files.

FeatureRepository maps a feature name to its persisted, ordered entry list:
    repo = FeatureRepository("/path/to/.documinty/features")
    repo.create("auth")
    entries = repo.load("auth")
    repo.save("auth", [*entries, entry])

Every call re-reads or fully rewrites one file; nothing is cached between
calls. Writes go to a sibling temp file that is renamed over the target, so
a reader sees either the old or the new list, never a partial one. There is
no locking: two processes rewriting the same feature can lose an update.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from documinty.errors import FeatureExistsError, FeatureNotFoundError
from documinty.models import Entry

if TYPE_CHECKING:
    from collections.abc import Iterable

FEATURE_EXT = ".yml"

logger = logging.getLogger("documinty.repository")


class FeatureRepository:
    """One YAML file per feature, each holding {"entries": [...]}."""

    def __init__(self, features_dir: Path | str) -> None:
        self.features_dir = Path(features_dir)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def _feature_path(self, name: str) -> Path:
        return self.features_dir / f"{name}{FEATURE_EXT}"

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def exists(self, name: str) -> bool:
        return self._feature_path(name).is_file()

    def list_names(self) -> list[str]:
        """All feature names (file stems). Sorted for display only."""
        if not self.features_dir.is_dir():
            return []
        return sorted(p.stem for p in self.features_dir.glob(f"*{FEATURE_EXT}") if p.is_file())

    def load(self, name: str) -> list[Entry]:
        """Parse the entry list for name. Raises FeatureNotFoundError if absent."""
        path = self._feature_path(name)
        if not path.is_file():
            raise FeatureNotFoundError(name)

        raw = self._read_yaml(path)
        items = raw.get("entries") if isinstance(raw, dict) else None
        if items is None:
            return []
        if not isinstance(items, list):
            logger.warning("entries in %s is not a list, treating as empty", path)
            return []
        return [Entry.from_dict(item, feature=name) for item in items if isinstance(item, dict)]

    def _read_yaml(self, path: Path) -> Any:
        try:
            with path.open() as f:
                return yaml.safe_load(f)
        except yaml.YAMLError:
            logger.warning("ignoring malformed feature file: %s", path)
            return None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, name: str) -> None:
        """Write an empty entry list for name. Raises FeatureExistsError if present."""
        if self.exists(name):
            raise FeatureExistsError(name)
        self.save(name, [])

    def save(self, name: str, entries: Iterable[Entry]) -> None:
        """Overwrite the feature file with the full entry list."""
        data = {"entries": [e.to_dict() for e in entries]}
        self._write_yaml(self._feature_path(name), data)

    def _write_yaml(self, path: Path, data: dict[str, Any]) -> None:
        """Write to a sibling tmp file, then rename over path. A failed dump leaves path untouched."""
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(f"{FEATURE_EXT}.tmp")
        try:
            with tmp.open("w") as f:
                yaml.safe_dump(data, f, sort_keys=False, default_flow_style=False, allow_unicode=True)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        tmp.replace(path)
