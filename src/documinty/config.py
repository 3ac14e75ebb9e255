"""ProjectConfig: where a documinty project keeps its files.

Layout (all relative to the project root):

    .documinty/
        config.yml            # {codebase_name: <string>}
        features/
            <feature>.yml     # {entries: [{path, node, feature, methods, description, timestamp}, ...]}

The root is the nearest directory (searching upward from cwd) that holds a
.documinty/ directory. DOCUMINTY_ROOT overrides the starting point.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from documinty.errors import StoreNotInitializedError

CONFIG_DIR = ".documinty"
CONFIG_FILE = "config.yml"
FEATURES_DIR = "features"
ROOT_ENV_VAR = "DOCUMINTY_ROOT"

logger = logging.getLogger("documinty.config")


@dataclass
class ProjectConfig:
    """Resolved configuration for a documinty project."""

    root: Path
    codebase_name: str = ""

    @property
    def base_dir(self) -> Path:
        return self.root / CONFIG_DIR

    @property
    def config_path(self) -> Path:
        return self.base_dir / CONFIG_FILE

    @property
    def features_dir(self) -> Path:
        return self.base_dir / FEATURES_DIR

    @property
    def is_initialized(self) -> bool:
        return self.base_dir.is_dir()

    def ensure_dirs(self) -> None:
        """Create .documinty/ and features/ if they don't exist."""
        self.features_dir.mkdir(parents=True, exist_ok=True)


def default_codebase_name(root: Path) -> str:
    return Path(root).resolve().name


def start_dir(root: Path | str | None = None) -> Path:
    """Directory to begin the upward search from: explicit root, env var, or cwd."""
    if root:
        return Path(root)
    env_root = os.environ.get(ROOT_ENV_VAR)
    return Path(env_root) if env_root else Path.cwd()


def find_root(start: Path) -> Path | None:
    """Walk upward from start looking for a .documinty/ directory."""
    start = start.resolve()
    for directory in (start, *start.parents):
        if (directory / CONFIG_DIR).is_dir():
            return directory
    return None


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError:
        logger.warning("ignoring malformed config file: %s", path)
        return {}
    return raw if isinstance(raw, dict) else {}


def load_config(root: Path | str | None = None) -> ProjectConfig:
    """Load config.yml for the project containing root (or cwd).

    Raises StoreNotInitializedError when no .documinty/ is found.
    """
    start = start_dir(root)
    root_path = find_root(start)
    if root_path is None:
        msg = f"No {CONFIG_DIR}/ directory found in {start.resolve()} or its parents (run `documinty init`)"
        raise StoreNotInitializedError(msg)

    cfg = ProjectConfig(root=root_path)
    raw = _read_config_file(cfg.config_path)
    cfg.codebase_name = str(raw.get("codebase_name") or default_codebase_name(root_path))
    return cfg


def init_config(root: Path | str, codebase_name: str | None = None) -> ProjectConfig:
    """Create .documinty/ + features/ and (re)write config.yml. Safe to repeat."""
    root_path = Path(root)
    cfg = ProjectConfig(
        root=root_path,
        codebase_name=codebase_name or default_codebase_name(root_path),
    )
    cfg.ensure_dirs()
    with cfg.config_path.open("w") as f:
        yaml.safe_dump({"codebase_name": cfg.codebase_name}, f, sort_keys=False, default_flow_style=False)
    return cfg
