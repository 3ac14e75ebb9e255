"""Tests for FeatureRepository (one YAML file per feature)."""

import pytest
import yaml

from documinty.errors import FeatureExistsError, FeatureNotFoundError
from documinty.models import Entry
from documinty.repository import FeatureRepository


@pytest.fixture
def repo(tmp_path):
    return FeatureRepository(tmp_path / "features")


def _entry(path="a.py", feature="auth"):
    return Entry.create(path=path, node="model", feature=feature, methods=["m"], timestamp="t", description="d")


def test_create_writes_empty_entry_list(repo):
    repo.create("auth")
    assert repo.exists("auth")
    assert yaml.safe_load((repo.features_dir / "auth.yml").read_text()) == {"entries": []}


def test_create_twice_raises(repo):
    repo.create("auth")
    with pytest.raises(FeatureExistsError, match="already exists"):
        repo.create("auth")


def test_load_missing_raises(repo):
    with pytest.raises(FeatureNotFoundError, match="does not exist"):
        repo.load("nope")


def test_save_then_load_preserves_order(repo):
    repo.create("auth")
    entries = [_entry("b.py"), _entry("a.py"), _entry("c.py")]
    repo.save("auth", entries)
    assert [e.path for e in repo.load("auth")] == ["b.py", "a.py", "c.py"]
    assert repo.load("auth") == entries


def test_save_leaves_no_temp_file(repo):
    repo.create("auth")
    repo.save("auth", [_entry()])
    assert sorted(p.name for p in repo.features_dir.iterdir()) == ["auth.yml"]


def test_list_names_strips_extension(repo):
    for name in ("billing", "auth"):
        repo.create(name)
    (repo.features_dir / "notes.txt").write_text("ignored")
    assert sorted(repo.list_names()) == ["auth", "billing"]


def test_list_names_without_directory(repo):
    assert repo.list_names() == []


@pytest.mark.parametrize("content", ["", "entries:\n", "entries: 5\n", "- just\n- a list\n", "entries: [unclosed\n"])
def test_load_treats_malformed_files_as_empty(repo, content):
    repo.features_dir.mkdir(parents=True)
    (repo.features_dir / "auth.yml").write_text(content)
    assert repo.load("auth") == []


def test_load_skips_non_mapping_items(repo):
    repo.features_dir.mkdir(parents=True)
    (repo.features_dir / "auth.yml").write_text("entries:\n  - junk\n  - path: a.py\n    node: model\n")
    loaded = repo.load("auth")
    assert [e.path for e in loaded] == ["a.py"]
    assert loaded[0].feature == "auth"


def test_timestamps_survive_as_strings(repo):
    repo.create("auth")
    entry = Entry.create(path="a.py", node="m", feature="auth", timestamp="2025-01-01T00:00:00Z")
    repo.save("auth", [entry])
    assert repo.load("auth")[0].timestamp == "2025-01-01T00:00:00Z"


def test_failed_save_leaves_previous_file_intact(repo):
    repo.create("auth")
    repo.save("auth", [_entry("a.py")])
    before = (repo.features_dir / "auth.yml").read_text()

    bad = _entry("b.py")
    bad.description = object()
    with pytest.raises(yaml.YAMLError):
        repo.save("auth", [bad])

    assert (repo.features_dir / "auth.yml").read_text() == before
    assert sorted(p.name for p in repo.features_dir.iterdir()) == ["auth.yml"]
