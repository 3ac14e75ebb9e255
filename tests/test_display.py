"""Tests for CLI formatting helpers."""

from documinty.display import MAX_DESC_LENGTH, basename, group_by_directory, parse_methods, truncate
from documinty.models import Entry


def _entry(path):
    return Entry(path=path, node="model", feature="f")


def test_truncate_short_text_unchanged():
    assert truncate("short") == "short"
    assert truncate("x" * MAX_DESC_LENGTH) == "x" * MAX_DESC_LENGTH


def test_truncate_long_text():
    assert truncate("x" * 100) == "x" * 80 + "(…)"


def test_truncate_empty():
    assert truncate("") == ""
    assert truncate(None) == ""


def test_parse_methods():
    assert parse_methods(" m1, m2 ,,  ,m3") == ["m1", "m2", "m3"]
    assert parse_methods("") == []
    assert parse_methods(None) == []


def test_group_by_directory_first_seen_order():
    entries = [_entry("app/models/user.rb"), _entry("README.md"), _entry("app/models/post.rb"), _entry("lib/x.rb")]
    grouped = group_by_directory(entries)
    assert list(grouped) == ["app/models", ".", "lib"]
    assert [basename(e.path) for e in grouped["app/models"]] == ["user.rb", "post.rb"]
