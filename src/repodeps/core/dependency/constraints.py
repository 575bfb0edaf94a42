"""Revisions and dependency edges for the package universe.

This module provides the foundational data types for declaring version
requirements between packages: the ``Revision`` triple used both as a
package's own version and as a minimum-revision constraint, and the
``Dependency`` edge that carries such a constraint.

Ordering is componentwise over (major, minor, micro). A revision parsed
from fewer than three components is zero-filled for comparison; only its
string rendering remembers how many components were written. Since zero is
the least component, "at least 2" and "at least 2.0.0" admit exactly the
same revisions, which is what treating the missing components of a
constraint as wildcards means for a minimum bound.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from repodeps.exceptions import RevisionError


# ---------------------------------------------------------------------------
# Revision: Ordered (major, minor, micro) triple
# ---------------------------------------------------------------------------

_REVISION_RE = re.compile(r"^(0|[1-9]\d*)(?:\.(0|[1-9]\d*))?(?:\.(0|[1-9]\d*))?$")


@dataclass(frozen=True, order=True)
class Revision:
    """A package revision, totally ordered by (major, minor, micro).

    Attributes:
        major: Major component.
        minor: Minor component (0 when not given).
        micro: Micro component (0 when not given).
        precision: Number of components the revision was written with.
            Used for display only; it never affects equality or ordering.
    """

    major: int
    minor: int = 0
    micro: int = 0
    precision: int = field(default=3, compare=False)

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.micro) < 0:
            raise RevisionError(f"Revision components must be non-negative: {self!r}")
        if not 1 <= self.precision <= 3:
            raise RevisionError(f"Invalid revision precision: {self.precision}")

    @classmethod
    def parse(cls, text: str | int) -> Revision:
        """Parse a revision such as ``"23"``, ``"23.0"`` or ``"23.0.1"``.

        Integers are accepted as a bare major component, which is what YAML
        hands back for an unquoted ``version: 23``. Floats are rejected: YAML
        reads an unquoted ``23.10`` as ``23.1``, so the written form is lost.

        Raises:
            RevisionError: If *text* is not one to three dot-separated
                non-negative integers.
        """
        if isinstance(text, (bool, float)):
            raise RevisionError(f"Invalid revision: {text!r}")
        raw = str(text).strip()
        m = _REVISION_RE.match(raw)
        if not m:
            raise RevisionError(f"Invalid revision: {text!r}")
        parts = [int(g) for g in m.groups() if g is not None]
        return cls(
            parts[0],
            parts[1] if len(parts) > 1 else 0,
            parts[2] if len(parts) > 2 else 0,
            precision=len(parts),
        )

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the zero-filled (major, minor, micro) triple."""
        return self.major, self.minor, self.micro

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.as_tuple()[: self.precision])


# ---------------------------------------------------------------------------
# Dependency: Edge type in the universe
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Dependency:
    """A directed dependency edge from a package to another package id.

    Represents: "installing this package *requires* that ``path`` is
    installed at a revision of at least ``min_revision``." A ``None``
    minimum is satisfied by any installed or available revision.

    Attributes:
        path: Id of the required package.
        min_revision: Inclusive lower bound, or None for any revision.
    """

    path: str
    min_revision: Revision | None = None

    def accepts(self, revision: Revision) -> bool:
        """Return True if *revision* meets this edge's minimum."""
        return self.min_revision is None or revision >= self.min_revision

    def __str__(self) -> str:
        if self.min_revision is None:
            return self.path
        return f"{self.path}>={self.min_revision}"
