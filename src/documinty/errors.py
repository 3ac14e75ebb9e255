"""Errors raised by the documinty store.

Every failure the store reports derives from DocumintyError so callers can
catch the whole family, while each kind stays distinguishable.
"""

from __future__ import annotations


class DocumintyError(Exception):
    """Base class for all store failures."""


class StoreNotInitializedError(DocumintyError):
    """No .documinty/ directory was found for the project."""


class FeatureExistsError(DocumintyError, FileExistsError):
    """A feature file already exists for this name."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"Feature '{feature}' already exists")


class FeatureNotFoundError(DocumintyError, LookupError):
    """The referenced feature has no backing file."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"Feature '{feature}' does not exist")


class EntryNotFoundError(DocumintyError, LookupError):
    """The feature exists but holds no entry for the given path."""

    def __init__(self, path: str, feature: str, message: str | None = None) -> None:
        self.path = path
        self.feature = feature
        super().__init__(message or f"No documentation found for '{path}' under feature '{feature}'")


class InvalidActionError(DocumintyError, ValueError):
    """edit_methods was asked for something other than add or remove."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"Action not supported: '{action}' (must be 'add' or 'remove')")
