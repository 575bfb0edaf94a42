"""Tests for ``repodeps cycles``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from repodeps.cli.main import cli


class TestCyclesCommand:
    """Tests for cycle reporting."""

    def test_acyclic_manifest(self, runner: CliRunner, sample_manifest: Path) -> None:
        result = runner.invoke(cli, ["cycles", str(sample_manifest)])
        assert result.exit_code == 0
        assert "No dependency cycles" in result.output

    def test_cycle_reported(self, runner: CliRunner, cyclic_manifest: Path) -> None:
        result = runner.invoke(cli, ["cycles", str(cyclic_manifest)])
        assert result.exit_code == 0
        assert "1 dependency cycle(s)" in result.output
        assert "a -> b -> c -> a" in result.output

    def test_json(self, runner: CliRunner, cyclic_manifest: Path) -> None:
        result = runner.invoke(cli, ["cycles", "--json", str(cyclic_manifest)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"cycles": [["a", "b", "c", "a"]]}

    def test_verbose_flag_accepted(self, runner: CliRunner, cyclic_manifest: Path) -> None:
        result = runner.invoke(cli, ["-v", "cycles", str(cyclic_manifest)])
        assert result.exit_code == 0
