"""Shared fixtures: an initialized documinty project in a temp directory."""

from pathlib import Path

import pytest

from documinty.store import Store

TIMESTAMP = "2025-06-08T12:00:00Z"


@pytest.fixture(autouse=True)
def _no_root_override(monkeypatch):
    monkeypatch.delenv("DOCUMINTY_ROOT", raising=False)


@pytest.fixture
def store(tmp_path: Path) -> Store:
    s = Store(tmp_path)
    s.init(codebase_name="myapp")
    return s


@pytest.fixture
def features_dir(tmp_path: Path) -> Path:
    return tmp_path / ".documinty" / "features"


@pytest.fixture
def tagged(store: Store) -> Store:
    """Store with feature 'feat1' holding one entry for app/models/user.rb."""
    store.add_feature("feat1")
    store.add_entry(
        path="app/models/user.rb",
        node="model",
        feature="feat1",
        methods=["a"],
        timestamp=TIMESTAMP,
        description="User model",
    )
    return store
