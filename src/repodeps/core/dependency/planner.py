"""Install planning: closure building followed by install ordering.

``compute_required_packages`` is the functional entry point and returns
``None`` when resolution fails. ``DependencyPlanner`` wraps the same
computation and reports the outcome as an ``InstallPlan`` that carries the
diagnostics emitted along the way.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from repodeps.core.dependency.closure import build_closure
from repodeps.core.dependency.graph import Package, PackageUniverse
from repodeps.core.dependency.sequencer import order_packages
from repodeps.core.diagnostics import (
    DiagnosticsSink,
    LoggingDiagnostics,
    RecordingDiagnostics,
    TeeDiagnostics,
)
from repodeps.exceptions import UnsatisfiableDependencyError

logger = logging.getLogger(__name__)


def compute_required_packages(
    requests: Iterable[Package],
    universe: PackageUniverse,
    diagnostics: DiagnosticsSink | None = None,
) -> list[Package] | None:
    """Compute everything needed to install *requests*, in install order.

    Packages are returned dependencies-first: requesting A, which depends
    on B, yields ``[B, A]``. Dependencies already met by an installed
    package are left out, and installed packages are assumed to have their
    own dependencies met. If a dependency cycle is encountered, the order
    of results at or below the cycle is undefined.

    Args:
        requests: Packages the user asked to install.
        universe: Installed and available packages. Not mutated.
        diagnostics: Receives a warning per failure and an info note when
            cycles prevent a full sort. Defaults to logging.

    Returns:
        The ordered packages, or None if some dependency could not be
        found at the required revision.
    """
    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()
    try:
        closure = build_closure(requests, universe, sink)
    except UnsatisfiableDependencyError as exc:
        logger.debug("Resolution aborted on %s: %s", exc.dependency, exc)
        return None
    return order_packages(closure, sink)


# ---------------------------------------------------------------------------
# InstallPlan / DependencyPlanner
# ---------------------------------------------------------------------------


@dataclass
class InstallPlan:
    """Result of planning an installation.

    Attributes:
        success: True if every dependency could be satisfied.
        packages: Packages to install, dependencies first. Empty on failure.
        warnings: Warnings emitted while planning, in order.
        notes: Informational notes emitted while planning, in order.
    """

    success: bool
    packages: list[Package] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [p.path for p in self.packages]


class DependencyPlanner:
    """Plans installations against one universe snapshot.

    Holds no state between calls besides the universe and the sink, so one
    planner may be reused for many requests.

    Args:
        universe: Installed and available packages.
        diagnostics: Extra sink that also receives every message, e.g. a
            logging sink for the CLI. Messages are always recorded on the
            returned plan.
    """

    def __init__(
        self,
        universe: PackageUniverse,
        diagnostics: DiagnosticsSink | None = None,
    ) -> None:
        self._universe = universe
        self._diagnostics = diagnostics

    def plan(self, requests: Iterable[Package | str]) -> InstallPlan:
        """Plan the installation of *requests*.

        Ids are looked up as the universe's remote package for that id.

        Raises:
            UnknownPackageError: If a requested id has no remote package.
        """
        packages = [
            self._universe.request(r) if isinstance(r, str) else r for r in requests
        ]
        recorder = RecordingDiagnostics()
        sink: DiagnosticsSink = recorder
        if self._diagnostics is not None:
            sink = TeeDiagnostics(recorder, self._diagnostics)

        ordered = compute_required_packages(packages, self._universe, sink)
        if ordered is None:
            return InstallPlan(
                success=False, warnings=recorder.warnings, notes=recorder.infos
            )
        return InstallPlan(
            success=True,
            packages=ordered,
            warnings=recorder.warnings,
            notes=recorder.infos,
        )
