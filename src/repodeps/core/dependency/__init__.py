"""Package universe and greedy dependency resolution.

This package computes, for a set of requested packages, the transitive set
of packages that must be installed and an order in which to install them.
All public names are re-exported here, so callers can write
``from repodeps.core.dependency import X``.

Phases
------
- **Closure building** (``closure``): breadth-first walk from the requests.
- **Version resolution** (``resolver``): per-edge choice between the
  installed package, the best remote package, or failure.
- **Sequencing** (``sequencer``): iterative root peeling, cycle tolerant.
"""

from repodeps.core.dependency.constraints import (
    Dependency,
    Revision,
)
from repodeps.core.dependency.graph import (
    Closure,
    Package,
    PackageUniverse,
    UpdatablePackage,
)
from repodeps.core.dependency.resolver import (
    FailureReason,
    OutcomeKind,
    ResolutionOutcome,
    resolve_dependency,
)
from repodeps.core.dependency.closure import build_closure
from repodeps.core.dependency.sequencer import order_packages
from repodeps.core.dependency.planner import (
    DependencyPlanner,
    InstallPlan,
    compute_required_packages,
)

__all__ = [
    "Revision",
    "Dependency",
    "Package",
    "UpdatablePackage",
    "PackageUniverse",
    "Closure",
    "OutcomeKind",
    "FailureReason",
    "ResolutionOutcome",
    "resolve_dependency",
    "build_closure",
    "order_packages",
    "DependencyPlanner",
    "InstallPlan",
    "compute_required_packages",
]
