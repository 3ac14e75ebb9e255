"""File-based documentation tags: one YAML file per feature.

Layout:
    .documinty/
        config.yml                # {codebase_name: ...}
        features/
            <feature>.yml         # {entries: [...]}

Entry fields:
    {"path": ..., "node": ..., "feature": ..., "methods": [...], "description": ..., "timestamp": ...}

Every mutation is a full read-modify-write of one feature file. Concurrent
processes writing the same feature can lose updates; each write goes to a
temp file that is renamed over the target, so readers never see a partial file.
"""

from documinty.config import ProjectConfig, init_config, load_config
from documinty.errors import (
    DocumintyError,
    EntryNotFoundError,
    FeatureExistsError,
    FeatureNotFoundError,
    InvalidActionError,
    StoreNotInitializedError,
)
from documinty.models import Entry
from documinty.repository import FeatureRepository
from documinty.store import Store

__all__ = [
    "DocumintyError",
    "Entry",
    "EntryNotFoundError",
    "FeatureExistsError",
    "FeatureNotFoundError",
    "FeatureRepository",
    "InvalidActionError",
    "ProjectConfig",
    "Store",
    "StoreNotInitializedError",
    "init_config",
    "load_config",
]
