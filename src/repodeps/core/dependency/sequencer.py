"""Install ordering of a computed closure by iterative root peeling.

Roots (required packages nobody still waiting depends on) are emitted
top-down; each emitted package releases one recorded edge per dependency,
and a target whose last referrer has been emitted becomes a root. The
top-down list is reversed at the end so dependencies install first.

Packages on a dependency cycle never lose all their referrers. They are
appended after peeling in discovery order, so the order of results at or
below a cycle is unspecified. This is a degradation, not an error.
"""

from __future__ import annotations

import logging
from collections import deque

from repodeps.core.dependency.constraints import Dependency
from repodeps.core.dependency.graph import Closure, Package
from repodeps.core.diagnostics import DiagnosticsSink, LoggingDiagnostics

logger = logging.getLogger(__name__)


def order_packages(
    closure: Closure, diagnostics: DiagnosticsSink | None = None
) -> list[Package]:
    """Order the closure's required packages dependencies-first.

    Args:
        closure: Output of ``build_closure``. Not mutated.
        diagnostics: Sink for the partial-sort note. Defaults to logging.

    Returns:
        Every required package exactly once.
    """
    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()

    pending: dict[str, list[Dependency]] = {
        path: list(deps) for path, deps in closure.edges.items()
    }
    remaining_roots: deque[Package] = deque(closure.roots)
    scheduled: set[str] = {p.path for p in closure.roots}
    result: list[Package] = []

    while remaining_roots:
        root = remaining_roots.popleft()
        result.append(root)
        for dep in root.dependencies:
            bucket = pending.get(dep.path)
            if not bucket or dep not in bucket:
                continue
            bucket.remove(dep)
            if bucket:
                continue
            target = closure.required.get(dep.path)
            if target is not None and target.path not in scheduled:
                scheduled.add(target.path)
                remaining_roots.append(target)

    if len(result) != len(closure.required):
        sink.log_info("Failed to sort dependencies, returning partially-sorted list.")
        leftover = [p for path, p in closure.required.items() if path not in scheduled]
        logger.debug("Unsorted (cyclic) packages: %s", ", ".join(p.path for p in leftover))
        result.extend(leftover)

    result.reverse()
    return result
