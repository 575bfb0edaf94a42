"""Per-edge version resolution against the package universe.

Decides, for one dependency edge, whether an installed package already
satisfies it, whether the best available remote package must be installed,
or whether the edge cannot be met at all. The policy is greedy and never
backtracks: it looks at exactly one local and one remote candidate.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from repodeps.core.dependency.constraints import Dependency
from repodeps.core.dependency.graph import Package, PackageUniverse
from repodeps.exceptions import (
    MissingDependencyError,
    UnsatisfiableDependencyError,
    VersionUnavailableError,
)


class OutcomeKind(enum.Enum):
    """How a dependency edge was resolved."""

    LOCAL = "local"
    REMOTE = "remote"
    UNSATISFIABLE = "unsatisfiable"


class FailureReason(enum.Enum):
    """Why a dependency edge could not be resolved."""

    MISSING_DEPENDENCY = "missing-dependency"
    VERSION_UNAVAILABLE = "version-unavailable"


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of resolving a single dependency edge.

    Attributes:
        kind: Local satisfaction, remote selection, or failure.
        dependency: The edge that was resolved.
        package: The selected remote package when ``kind`` is REMOTE.
        reason: The failure category when ``kind`` is UNSATISFIABLE.
        message: Human-readable failure description.
    """

    kind: OutcomeKind
    dependency: Dependency
    package: Package | None = None
    reason: FailureReason | None = None
    message: str = ""

    @property
    def satisfiable(self) -> bool:
        return self.kind is not OutcomeKind.UNSATISFIABLE

    def raise_for_failure(self) -> None:
        """Raise the matching ``UnsatisfiableDependencyError`` if this is a failure."""
        if self.kind is not OutcomeKind.UNSATISFIABLE:
            return
        if self.reason is FailureReason.MISSING_DEPENDENCY:
            raise MissingDependencyError(self.message, self.dependency)
        if self.reason is FailureReason.VERSION_UNAVAILABLE:
            raise VersionUnavailableError(self.message, self.dependency)
        raise UnsatisfiableDependencyError(self.message, self.dependency)  # pragma: no cover


def resolve_dependency(
    dependency: Dependency, universe: PackageUniverse
) -> ResolutionOutcome:
    """Resolve one dependency edge.

    Rules, in order:

    1. Target id unknown to the universe: unsatisfiable (missing).
    2. Installed and (no minimum, or installed revision >= minimum): local.
    3. No remote, or the remote is below the minimum: unsatisfiable
       (version unavailable).
    4. Otherwise the remote package is selected.

    Args:
        dependency: The edge to resolve.
        universe: Installed and available packages.

    Returns:
        A ``ResolutionOutcome``; this function never raises for an
        unsatisfiable edge.
    """
    path = dependency.path
    if path not in universe:
        return ResolutionOutcome(
            kind=OutcomeKind.UNSATISFIABLE,
            dependency=dependency,
            reason=FailureReason.MISSING_DEPENDENCY,
            message=f"Dependant package with key {path} not found!",
        )

    entry = universe[path]
    if entry.local is not None and dependency.accepts(entry.local.version):
        return ResolutionOutcome(kind=OutcomeKind.LOCAL, dependency=dependency)

    remote = entry.remote
    if remote is None or not dependency.accepts(remote.version):
        # Only reachable with a minimum: an unconstrained edge is met by
        # whichever of local or remote exists.
        return ResolutionOutcome(
            kind=OutcomeKind.UNSATISFIABLE,
            dependency=dependency,
            reason=FailureReason.VERSION_UNAVAILABLE,
            message=(
                f'Package "{entry.display_name}" with revision at least '
                f"{dependency.min_revision} not available."
            ),
        )

    return ResolutionOutcome(
        kind=OutcomeKind.REMOTE, dependency=dependency, package=remote
    )
