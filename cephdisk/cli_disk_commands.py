"""Disk inventory commands."""
from __future__ import annotations

import typer
from rich.console import Console

from cephdisk.cli_support import (
    CmdControl,
    build_host_identity,
    build_reader,
    handle_cli_error,
    load_config,
)
from cephdisk.core.errors import CephDiskError
from cephdisk.inventory.aggregator import InventoryAggregator
from cephdisk.output import parse_format

DiskTyper = typer.Typer(help="Manage and inspect OSD disks")


def register_disk_commands(root: typer.Typer, console: Console, err_console: Console) -> None:
    """Attach disk commands to the main CLI."""

    @DiskTyper.command("list")
    def list_command(
        ctx: typer.Context,
        available: bool = typer.Option(
            False, "--available", "-a", help="Also list unpartitioned disks not yet configured on this host"
        ),
        format: str = typer.Option("table", "--format", "-f", help="Output format: table|json|yaml"),
    ):
        """List disks configured in MicroCeph."""
        common = ctx.obj if isinstance(ctx.obj, CmdControl) else CmdControl()
        verbose = common.verbose or common.debug

        try:
            output_format = parse_format(format)
            config = load_config(common)
            aggregator = InventoryAggregator(
                build_reader(config),
                build_host_identity(config),
            )
            aggregator.list_disks(
                show_available=available,
                output_format=output_format,
                console=console,
            )
        except CephDiskError as e:
            handle_cli_error(e, err_console, verbose, exit_code=1)

    root.add_typer(DiskTyper, name="disk")
