"""``repodeps cycles <manifest>`` -- Report dependency cycles in a universe.

Cycles do not make resolution fail, but the install order of packages at
or below a cycle is unspecified. This command lists them so that a
repository maintainer can see which parts of a plan are only partially
sorted.

Exit Codes:
    0 -- Always, once the manifest has been read.
    2 -- Unreadable or malformed manifest.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from repodeps.cli.output import print_cycles, print_json
from repodeps.exceptions import ManifestError
from repodeps.manifest import load_universe


@click.command("cycles")
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit cycles as JSON.")
def cycles_command(manifest: str, as_json: bool) -> None:
    """List the dependency cycles between package ids in MANIFEST."""
    try:
        universe = load_universe(Path(manifest))
    except ManifestError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    cycles = universe.detect_cycles()
    if as_json:
        print_json({"cycles": cycles})
    else:
        print_cycles(cycles)
