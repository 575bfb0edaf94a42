"""Package model and the package universe consulted during resolution.

Implements the read-only substrate of dependency resolution: ``Package``
(one concrete revision with its declared dependencies), ``UpdatablePackage``
(the local and remote views of one package id) and ``PackageUniverse``
(the id-keyed map of those entries), plus name-level cycle detection.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from repodeps.core.dependency.constraints import Dependency, Revision
from repodeps.exceptions import UnknownPackageError


# ---------------------------------------------------------------------------
# Package: A concrete revision of one package id
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Package:
    """A package at a specific revision, either installed or available.

    The local and remote views of "the same" package share ``path``. The
    dependency tuple is fixed at construction and never mutated.

    Attributes:
        path: Unique package id (e.g. ``"build-tools;23.0.1"``).
        version: The package's own revision.
        dependencies: Declared dependency edges, in declaration order.
        display_name: Human-readable name used in diagnostics.
        archive_url: Location of the complete archive, absolute or relative
            to ``source_url``. Only meaningful for remote packages.
        source_url: URL of the repository source that listed this package.
    """

    path: str
    version: Revision
    dependencies: tuple[Dependency, ...] = ()
    display_name: str = ""
    archive_url: str | None = None
    source_url: str | None = None

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as a tuple.
        if not isinstance(self.dependencies, tuple):
            object.__setattr__(self, "dependencies", tuple(self.dependencies))

    @property
    def label(self) -> str:
        """Display name, falling back to the package id."""
        return self.display_name or self.path

    def __str__(self) -> str:
        return f"{self.path}@{self.version}"


# ---------------------------------------------------------------------------
# UpdatablePackage: Local and remote views of one id
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UpdatablePackage:
    """The locally-installed and best-available remote package for one id.

    At least one of ``local`` and ``remote`` is set for every entry that
    ``PackageUniverse`` hands out.
    """

    local: Package | None = None
    remote: Package | None = None

    @property
    def representative(self) -> Package:
        """The local package if installed, otherwise the remote one."""
        pkg = self.local or self.remote
        if pkg is None:  # pragma: no cover
            raise ValueError("UpdatablePackage has neither local nor remote")
        return pkg

    @property
    def display_name(self) -> str:
        return self.representative.label


# ---------------------------------------------------------------------------
# PackageUniverse
# ---------------------------------------------------------------------------


class PackageUniverse(Mapping[str, UpdatablePackage]):
    """Id-keyed view of every installed and available package.

    Built once by the caller with ``add_local``/``add_remote`` (or loaded
    from a manifest), then treated as read-only by resolution. Resolution
    never mutates it, so one snapshot may be resolved against repeatedly.

    Thread safety: building is NOT thread-safe; concurrent reads of a fully
    built universe are.
    """

    def __init__(self) -> None:
        self._locals: dict[str, Package] = {}
        self._remotes: dict[str, Package] = {}

    # -- Construction ---------------------------------------------------------

    def add_local(self, package: Package) -> None:
        """Record *package* as the installed revision of its id, replacing any."""
        self._locals[package.path] = package

    def add_remote(self, package: Package) -> None:
        """Record *package* as the best available remote for its id, replacing any."""
        self._remotes[package.path] = package

    # -- Mapping protocol -----------------------------------------------------

    def __getitem__(self, path: str) -> UpdatablePackage:
        local = self._locals.get(path)
        remote = self._remotes.get(path)
        if local is None and remote is None:
            raise KeyError(path)
        return UpdatablePackage(local=local, remote=remote)

    def __iter__(self) -> Iterator[str]:
        yield from self._locals
        for path in self._remotes:
            if path not in self._locals:
                yield path

    def __len__(self) -> int:
        return len(self._locals.keys() | self._remotes.keys())

    def __contains__(self, path: object) -> bool:
        return path in self._locals or path in self._remotes

    # -- Queries --------------------------------------------------------------

    def local(self, path: str) -> Package | None:
        return self._locals.get(path)

    def remote(self, path: str) -> Package | None:
        return self._remotes.get(path)

    def request(self, path: str) -> Package:
        """Return the remote package to install for a requested id.

        Raises:
            UnknownPackageError: If *path* has no remote package.
        """
        remote = self._remotes.get(path)
        if remote is None:
            if path in self._locals:
                raise UnknownPackageError(
                    f"Package {path!r} is installed but has no remote to install"
                )
            raise UnknownPackageError(f"Package {path!r} not found")
        return remote

    def detect_cycles(self) -> list[list[str]]:
        """Detect dependency cycles between package ids using iterative DFS.

        Edges are taken from both the local and the remote package of each
        id, collapsed to id level. Targets outside the universe are ignored.

        Returns:
            A list of cycles, each a path of ids that starts and ends with
            the same id (e.g. ``["a", "b", "a"]``). Empty if acyclic.
        """
        adj: dict[str, list[str]] = {}
        for path in self:
            targets: list[str] = []
            for pkg in (self._locals.get(path), self._remotes.get(path)):
                if pkg is None:
                    continue
                for dep in pkg.dependencies:
                    if dep.path in self and dep.path not in targets:
                        targets.append(dep.path)
            adj[path] = targets

        WHITE, GRAY, BLACK = 0, 1, 2
        color: dict[str, int] = {p: WHITE for p in adj}
        cycles: list[list[str]] = []

        for start in adj:
            if color[start] != WHITE:
                continue
            color[start] = GRAY
            # Stack of (node, next-neighbour index); the stack is the DFS path.
            stack: list[tuple[str, int]] = [(start, 0)]
            while stack:
                node, idx = stack[-1]
                neighbours = adj[node]
                if idx >= len(neighbours):
                    color[node] = BLACK
                    stack.pop()
                    continue
                stack[-1] = (node, idx + 1)
                nxt = neighbours[idx]
                if color[nxt] == GRAY:
                    # Back edge: the cycle is the path suffix starting at nxt.
                    path_ids = [n for n, _ in stack]
                    cycles.append(path_ids[path_ids.index(nxt):] + [nxt])
                elif color[nxt] == WHITE:
                    color[nxt] = GRAY
                    stack.append((nxt, 0))

        return cycles


@dataclass
class Closure:
    """Intermediate result of closure building, consumed by the sequencer.

    Attributes:
        required: Every package that must be installed, requests included,
            keyed by id in discovery order.
        roots: Required packages not known to be anyone's dependency, in
            discovery order without duplicates.
        edges: Dependency edges recorded per target id. The number of edges
            in a bucket is the number of referrers still to be released.
    """

    required: dict[str, Package] = field(default_factory=dict)
    roots: list[Package] = field(default_factory=list)
    edges: dict[str, list[Dependency]] = field(default_factory=dict)
