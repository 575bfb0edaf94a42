"""Shared fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def cyclic_manifest(tmp_path: Path) -> Path:
    """Write a JSON manifest whose packages form a -> b -> c -> a."""
    data = {
        "packages": [
            {"id": "a", "remote": {"version": "1", "dependencies": ["b"]}},
            {"id": "b", "remote": {"version": "1", "dependencies": ["c"]}},
            {"id": "c", "remote": {"version": "1", "dependencies": ["a"]}},
        ]
    }
    path = tmp_path / "cyclic.json"
    path.write_text(json.dumps(data))
    return path
