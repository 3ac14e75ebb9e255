"""Store: the query/mutation API over a project's feature files.

    store = Store("/path/to/project")
    store.init(codebase_name="shop")
    store.add_feature("auth")
    store.add_entry(path="app/login.py", node="controller", feature="auth",
                    methods=["call"], timestamp="2025-01-01T00:00:00Z",
                    description="Handles login")
    store.entries_for("app/login.py")

Each operation reloads the feature file it touches, mutates the list in
memory and writes the whole file back before returning. A failed operation
never writes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from documinty.config import ProjectConfig, init_config
from documinty.errors import EntryNotFoundError, InvalidActionError
from documinty.models import Entry, as_list, merge_methods, subtract_methods
from documinty.repository import FeatureRepository

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

MethodAction = Literal["add", "remove"]

logger = logging.getLogger("documinty.store")


class Store:
    """Feature and entry operations for the project rooted at root."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root) if root is not None else Path.cwd()
        self.config = ProjectConfig(root=self.root)
        self.repo = FeatureRepository(self.config.features_dir)

    # ------------------------------------------------------------------
    # Bootstrap
    # ------------------------------------------------------------------

    def init(self, codebase_name: str | None = None) -> ProjectConfig:
        """Create .documinty/features/ and write config.yml. Idempotent."""
        self.config = init_config(self.root, codebase_name=codebase_name)
        logger.info("initialized %s (codebase_name=%s)", self.config.base_dir, self.config.codebase_name)
        return self.config

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    def add_feature(self, name: str) -> str:
        """Create an empty feature. Raises FeatureExistsError if it exists."""
        self.repo.create(name)
        logger.info("created feature %s", name)
        return name

    def list_features(self) -> list[str]:
        return self.repo.list_names()

    features = list_features

    def search_features(self, query: str) -> list[str]:
        """Feature names containing query (case-sensitive substring)."""
        return [name for name in self.list_features() if query in name]

    # ------------------------------------------------------------------
    # Entries — read
    # ------------------------------------------------------------------

    def entries_for(self, path: str) -> list[Entry]:
        """Every entry tagging path, across all features. Empty if none."""
        results: list[Entry] = []
        for feature in self.list_features():
            if not self.repo.exists(feature):
                continue
            results.extend(e for e in self.repo.load(feature) if e.path == path)
        logger.debug("entries_for %s: %d found", path, len(results))
        return results

    def entries_for_feature(self, feature: str) -> list[Entry]:
        """All entries under feature, in file order. Raises FeatureNotFoundError."""
        return self.repo.load(feature)

    # ------------------------------------------------------------------
    # Entries — write
    # ------------------------------------------------------------------

    def add_entry(
        self,
        *,
        path: str,
        node: Any,
        feature: str,
        methods: Iterable[Any] | str | None = None,
        timestamp: str,
        description: str | None = "",
    ) -> Entry:
        """Append a new entry under feature and return it.

        Repeated calls with the same path and feature append further entries;
        nothing is merged.
        """
        entries = self.repo.load(feature)
        entry = Entry.create(
            path=path,
            node=node,
            feature=feature,
            methods=methods,
            timestamp=timestamp,
            description=description,
        )
        entries.append(entry)
        self.repo.save(feature, entries)
        logger.info("tagged %s as %s under %s", path, entry.node, feature)
        return entry

    def remove_entry(self, *, path: str, feature: str) -> list[Entry]:
        """Drop every entry for path under feature and return them.

        Raises FeatureNotFoundError, or EntryNotFoundError when nothing matches.
        """
        entries = self.repo.load(feature)
        removed = [e for e in entries if e.path == path]
        if not removed:
            raise EntryNotFoundError(path, feature, f"No entries for '{path}' under feature '{feature}'")

        self.repo.save(feature, [e for e in entries if e.path != path])
        logger.info("removed %d entr%s for %s from %s", len(removed), "y" if len(removed) == 1 else "ies", path, feature)
        return removed

    def edit_methods(
        self,
        *,
        path: str,
        feature: str,
        new_methods: Iterable[Any] | str,
        action: MethodAction | str = "add",
    ) -> Entry:
        """Add methods to (set union) or remove methods from the matching entry."""
        action = str(action)
        if action not in ("add", "remove"):
            raise InvalidActionError(action)

        new_methods = as_list(new_methods)

        def apply(entry: Entry) -> None:
            if action == "add":
                entry.methods = merge_methods(entry.methods, new_methods)
            else:
                entry.methods = subtract_methods(entry.methods, new_methods)

        entry = self._update_entry(path, feature, apply)
        logger.info("%s methods %s on %s under %s", action, new_methods, path, feature)
        return entry

    def add_methods(self, *, path: str, feature: str, new_methods: Iterable[Any]) -> Entry:
        return self.edit_methods(path=path, feature=feature, new_methods=new_methods, action="add")

    def remove_methods(self, *, path: str, feature: str, new_methods: Iterable[Any]) -> Entry:
        return self.edit_methods(path=path, feature=feature, new_methods=new_methods, action="remove")

    def update_description(self, *, path: str, feature: str, new_description: str) -> Entry:
        """Overwrite the description of the matching entry."""

        def apply(entry: Entry) -> None:
            entry.description = str(new_description)

        entry = self._update_entry(path, feature, apply)
        logger.info("updated description of %s under %s", path, feature)
        return entry

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _update_entry(self, path: str, feature: str, transform: Callable[[Entry], None]) -> Entry:
        """Load feature, apply transform to the first (path, feature) match, save."""
        entries = self.repo.load(feature)
        entry = next((e for e in entries if e.path == path and e.feature == feature), None)
        if entry is None:
            raise EntryNotFoundError(path, feature)

        transform(entry)
        self.repo.save(feature, entries)
        return entry
