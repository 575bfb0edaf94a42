"""Loading a package universe from a YAML (or JSON) manifest.

Manifest layout::

    packages:
      - id: "platform-tools"
        display_name: "SDK Platform-Tools"
        local:
          version: "23.0.1"
        remote:
          version: "24.0.0"
          archive: "platform-tools_r24.zip"
          source: "https://dl.example.com/repository/repository.xml"
          dependencies:
            - "tools"
            - {id: "build-tools", min_version: "23.0.1"}

JSON is a subset of YAML, so ``.json`` manifests load through the same
``yaml.safe_load`` call.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from repodeps.core.dependency import Dependency, Package, PackageUniverse, Revision
from repodeps.exceptions import ManifestError, RevisionError

logger = logging.getLogger(__name__)


def load_universe(path: Path) -> PackageUniverse:
    """Read and parse the manifest at *path*.

    Raises:
        ManifestError: If the file cannot be read or is malformed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in {path}: {exc}") from exc
    universe = parse_universe(data)
    logger.debug("Loaded %d package id(s) from %s", len(universe), path)
    return universe


def parse_universe(data: Any) -> PackageUniverse:
    """Build a ``PackageUniverse`` from already-parsed manifest data.

    Raises:
        ManifestError: On any structural problem, naming the entry.
    """
    if not isinstance(data, dict) or not isinstance(data.get("packages"), list):
        raise ManifestError("Manifest must be a mapping with a 'packages' list")

    universe = PackageUniverse()
    for index, entry in enumerate(data["packages"]):
        if not isinstance(entry, dict):
            raise ManifestError(f"packages[{index}] must be a mapping")
        path = entry.get("id")
        if not isinstance(path, str) or not path.strip():
            raise ManifestError(f"packages[{index}] is missing an 'id'")
        display_name = str(entry.get("display_name") or "")

        local = entry.get("local")
        remote = entry.get("remote")
        if local is None and remote is None:
            raise ManifestError(f"Package {path!r} has neither 'local' nor 'remote'")
        if local is not None:
            universe.add_local(_parse_package(path, display_name, local, "local"))
        if remote is not None:
            universe.add_remote(_parse_package(path, display_name, remote, "remote"))
    return universe


def _parse_package(
    path: str, display_name: str, block: Any, kind: str
) -> Package:
    where = f"{path!r} ({kind})"
    if not isinstance(block, dict):
        raise ManifestError(f"Package {where} must be a mapping")
    if "version" not in block:
        raise ManifestError(f"Package {where} is missing 'version'")
    version = _parse_revision(where, block["version"])

    deps_raw = block.get("dependencies") or []
    if not isinstance(deps_raw, list):
        raise ManifestError(f"Package {where}: 'dependencies' must be a list")
    dependencies = [_parse_dependency(where, d) for d in deps_raw]

    for key in ("archive", "source"):
        if block.get(key) is not None and not isinstance(block[key], str):
            raise ManifestError(f"Package {where}: '{key}' must be a string")

    return Package(
        path=path,
        version=version,
        dependencies=tuple(dependencies),
        display_name=display_name,
        archive_url=block.get("archive"),
        source_url=block.get("source"),
    )


def _parse_dependency(where: str, item: Any) -> Dependency:
    if isinstance(item, str):
        return Dependency(item)
    if not isinstance(item, dict) or not isinstance(item.get("id"), str):
        raise ManifestError(f"Package {where}: bad dependency entry {item!r}")
    minimum = item.get("min_version")
    if minimum is None:
        return Dependency(item["id"])
    return Dependency(item["id"], _parse_revision(where, minimum))


def _parse_revision(where: str, value: Any) -> Revision:
    if isinstance(value, float):
        raise ManifestError(
            f"Package {where}: revision {value!r} was read as a number; "
            "quote dotted revisions in the manifest"
        )
    try:
        return Revision.parse(value)
    except RevisionError as exc:
        raise ManifestError(f"Package {where}: {exc}") from exc
