"""``repodeps plan <manifest> <id>...`` -- Compute an install plan.

Loads the package universe from MANIFEST, resolves the requested package
ids and their transitive dependencies, and prints the packages to install
in dependency-first order.

Exit Codes:
    0 -- Plan computed.
    1 -- Resolution failed (missing dependency or unavailable revision).
    2 -- Unreadable manifest or unknown requested id.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from repodeps.cli.output import (
    plan_to_dict,
    print_diagnostics,
    print_install_plan,
    print_json,
)
from repodeps.core.dependency import DependencyPlanner
from repodeps.exceptions import ManifestError, UnknownPackageError
from repodeps.manifest import load_universe


@click.command("plan")
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.argument("package_ids", nargs=-1, required=True)
@click.option(
    "--json", "as_json",
    is_flag=True,
    default=False,
    help="Emit the plan as JSON instead of a table.",
)
def plan_command(manifest: str, package_ids: tuple[str, ...], as_json: bool) -> None:
    """Resolve PACKAGE_IDS against MANIFEST and print the install order.

    Exit code 0 on success, 1 on resolution failure, 2 on bad input.
    """
    try:
        universe = load_universe(Path(manifest))
    except ManifestError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    planner = DependencyPlanner(universe)
    try:
        plan = planner.plan(package_ids)
    except UnknownPackageError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if as_json:
        data = plan_to_dict(plan)
        print_diagnostics(data["warnings"], data["notes"])
        print_json(data)
    else:
        print_install_plan(plan)

    sys.exit(0 if plan.success else 1)
