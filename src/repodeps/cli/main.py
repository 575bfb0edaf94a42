"""repodeps CLI -- Dependency planning for SDK component repositories.

Entry point for the ``repodeps`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    plan    -- Compute the install order for requested package ids.
    cycles  -- List dependency cycles in a universe manifest.

Usage::

    repodeps plan universe.yaml "platforms;android-23"
    repodeps plan --json universe.yaml tools
    repodeps cycles universe.yaml
    repodeps -v plan universe.yaml tools   # log resolution details
"""

from __future__ import annotations

import click

from repodeps import __version__
from repodeps.cli.cycles_cmd import cycles_command
from repodeps.cli.plan_cmd import plan_command
from repodeps.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log informational messages.")
@click.option("--debug", is_flag=True, help="Log debug messages (very verbose).")
def cli(verbose: bool, debug: bool) -> None:
    """repodeps: Resolve and order package installs from a component repository.

    Reads a YAML or JSON manifest describing installed and available
    packages, and computes which packages an install needs and in which
    order. Set REPODEPS_LOG_LEVEL to change the default log level.
    """
    flag_level = "DEBUG" if debug else "INFO" if verbose else None
    setup_logging(flag_level)


cli.add_command(plan_command)
cli.add_command(cycles_command)
