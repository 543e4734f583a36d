#!/usr/bin/env python3
"""cephdisk CLI - disk inventory for MicroCeph clusters."""
from typing import Optional

import typer
from rich.console import Console

from cephdisk.cli_disk_commands import register_disk_commands
from cephdisk.cli_support import CmdControl, setup_file_logging
from cephdisk.core.logger import get_logger, set_verbosity

app = typer.Typer(
    name="cephdisk",
    help="""cephdisk - Disk inventory for MicroCeph clusters

Quick start:
  cephdisk disk list                     # Disks configured as OSDs
  cephdisk disk list --available         # ...plus unclaimed local disks
  cephdisk disk list --format json       # Machine-readable output
""",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    state_dir: Optional[str] = typer.Option(
        None, "--state-dir", help="Daemon state directory (default: $CEPHDISK_STATE_DIR or the snap path)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all information messages"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Show all debug messages"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Path to log file"),
):
    """Global options."""
    ctx.obj = CmdControl(state_dir=state_dir, verbose=verbose, debug=debug, log_file=log_file)
    set_verbosity(verbose or debug)
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose or debug)


register_disk_commands(app, console, err_console)

if __name__ == "__main__":
    app()
