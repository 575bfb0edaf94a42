"""repodeps exception hierarchy.

All public exceptions inherit from RepoDepsError, giving callers a single
base class to catch when they want to handle any repodeps-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repodeps.core.dependency.constraints import Dependency


class RepoDepsError(Exception):
    """Base exception for all repodeps errors."""


class RevisionError(RepoDepsError, ValueError):
    """Raised when a revision string cannot be parsed."""


class ManifestError(RepoDepsError):
    """Raised when a universe manifest is malformed.

    Covers unreadable files, invalid YAML/JSON, and package entries with
    missing ids, bad revisions or malformed dependency lists.
    """


class ResolutionError(RepoDepsError):
    """Raised when dependency resolution fails."""


class UnknownPackageError(ResolutionError):
    """Raised when a requested package id has no installable remote."""


class UnsatisfiableDependencyError(ResolutionError):
    """Raised when a dependency edge cannot be satisfied.

    Attributes:
        dependency: The edge that could not be satisfied.
    """

    def __init__(self, message: str, dependency: Dependency) -> None:
        super().__init__(message)
        self.dependency = dependency


class MissingDependencyError(UnsatisfiableDependencyError):
    """The dependency target does not exist anywhere in the universe."""


class VersionUnavailableError(UnsatisfiableDependencyError):
    """Neither the local install nor the remote meets the minimum revision."""
