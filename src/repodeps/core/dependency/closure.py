"""Breadth-first computation of the set of packages an install requires.

Starting from the requested packages, every declared dependency is resolved
once (the first edge that reaches a target decides how it is satisfied) and
remote selections are expanded in turn. The walk is an explicit FIFO
worklist, so deep or cyclic graphs never recurse.

Note that later edges to an already-seen target are recorded but their
minimum revision is not checked again. In a diamond where a loose
constraint is met before a stricter one, the stricter one goes unenforced.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from repodeps.core.dependency.graph import Closure, Package, PackageUniverse
from repodeps.core.dependency.resolver import OutcomeKind, resolve_dependency
from repodeps.core.diagnostics import DiagnosticsSink, LoggingDiagnostics

logger = logging.getLogger(__name__)


def build_closure(
    requests: Iterable[Package],
    universe: PackageUniverse,
    diagnostics: DiagnosticsSink | None = None,
) -> Closure:
    """Compute the required packages, roots and edge multimap for *requests*.

    Args:
        requests: Packages the user asked to install, in request order.
        universe: Installed and available packages. Not mutated.
        diagnostics: Sink for failure warnings. Defaults to logging.

    Returns:
        A freshly built ``Closure``.

    Raises:
        UnsatisfiableDependencyError: If any reachable dependency is missing
            from the universe or unavailable at the required revision. The
            warning has already been emitted when this is raised.
    """
    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()
    closure = Closure()
    queue: deque[Package] = deque()

    for pkg in requests:
        if pkg.path in closure.required:
            continue
        closure.required[pkg.path] = pkg
        closure.roots.append(pkg)
        queue.append(pkg)

    seen: set[str] = set()

    while queue:
        current = queue.popleft()
        for dep in current.dependencies:
            if dep.path in seen:
                closure.edges.setdefault(dep.path, []).append(dep)
                continue
            seen.add(dep.path)

            outcome = resolve_dependency(dep, universe)
            if outcome.kind is OutcomeKind.LOCAL:
                logger.debug("%s: %s already installed", current.path, dep)
                continue
            if not outcome.satisfiable:
                sink.log_warning(outcome.message)
                outcome.raise_for_failure()

            remote = outcome.package
            assert remote is not None
            if remote.path not in closure.required:
                closure.required[remote.path] = remote
                queue.append(remote)
            closure.edges.setdefault(dep.path, []).append(dep)
            # It is somebody's dependency now, so it cannot be a root.
            closure.roots = [r for r in closure.roots if r.path != remote.path]

    logger.debug(
        "Closure: %d required, %d root(s), %d target(s) with edges",
        len(closure.required), len(closure.roots), len(closure.edges),
    )
    return closure
