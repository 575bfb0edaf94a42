"""Shared fixtures for repodeps tests."""

from __future__ import annotations

import logging
import pathlib

import pytest

SAMPLE_MANIFEST = """\
packages:
  - id: tools
    display_name: SDK Tools
    local:
      version: "24.1"
    remote:
      version: "25.0.1"
      archive: tools_r25.0.1.zip
      source: https://dl.example.com/repository/repository.xml
      dependencies:
        - platform-tools
  - id: platform-tools
    display_name: SDK Platform-Tools
    remote:
      version: "23.1"
      archive: https://mirror.example.com/platform-tools_r23.1.zip
  - id: build-tools
    display_name: Build Tools
    remote:
      version: "23.0.2"
      archive: build-tools_r23.0.2.zip
      source: https://dl.example.com/repository/repository.xml
      dependencies:
        - {id: tools, min_version: "25"}
  - id: emulator
    remote:
      version: "2"
      dependencies:
        - {id: tools, min_version: "99"}
"""


@pytest.fixture(autouse=True)
def _reset_repodeps_logger():
    """Undo CLI logging setup so handlers never outlive a test's streams."""
    yield
    root = logging.getLogger("repodeps")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def sample_manifest(tmp_path: pathlib.Path) -> pathlib.Path:
    """Write a small universe manifest and return its path."""
    path = tmp_path / "universe.yaml"
    path.write_text(SAMPLE_MANIFEST)
    return path
