"""Build and render the configured and available disk inventories."""
from __future__ import annotations

from typing import List, Optional, Union

from rich.console import Console

from cephdisk.core.logger import get_logger
from cephdisk.inventory.matcher import unclaimed_disks
from cephdisk.inventory.sorting import sort_rowset
from cephdisk.models.disk import ConfiguredDisk
from cephdisk.models.rowset import RowSet
from cephdisk.output import OutputFormat, parse_format, render
from cephdisk.services.client import ApiReader
from cephdisk.services.host import HostIdentity

logger = get_logger(__name__)

CONFIGURED_CAPTION = "Disks configured in MicroCeph:"
AVAILABLE_CAPTION = "Available unpartitioned disks on this system:"

CONFIGURED_HEADER = ["OSD", "LOCATION", "PATH"]
AVAILABLE_HEADER = ["MODEL", "CAPACITY", "TYPE", "PATH"]


class InventoryAggregator:
    """
    Combines cluster data with local hardware to list disks.

    The configured inventory comes straight from the cluster. The available
    inventory is the local hardware report minus partitioned disks and
    disks already configured on this host.

    Reader failures propagate as RetrievalError; nothing is retried.

    Example:
        aggregator = InventoryAggregator(ClusterClient(url), LocalHostIdentity())
        aggregator.list_disks(show_available=True, output_format="json", console=console)
    """

    def __init__(self, reader: ApiReader, host: HostIdentity):
        self.reader = reader
        self.host = host

    def fetch_configured(self) -> List[ConfiguredDisk]:
        disks = self.reader.get_disks()
        logger.debug(f"Fetched {len(disks)} configured disk(s)")
        return disks

    def configured_rowset(self, disks: Optional[List[ConfiguredDisk]] = None) -> RowSet:
        """One row per configured disk, ordered on the OSD column."""
        if disks is None:
            disks = self.fetch_configured()

        rowset = RowSet(header=list(CONFIGURED_HEADER), caption=CONFIGURED_CAPTION)
        for disk in disks:
            rowset.add((str(disk.osd), disk.location, disk.path), disk)
        return sort_rowset(rowset)

    def available_rowset(self, configured: Optional[List[ConfiguredDisk]] = None) -> RowSet:
        """One row per unpartitioned local disk not configured on this host."""
        if configured is None:
            configured = self.fetch_configured()
        resources = self.reader.get_resources()
        hostname = self.host.get_local_hostname()

        available = unclaimed_disks(resources.disks, configured, hostname)
        logger.debug(
            f"{len(available)} of {len(resources.disks)} local disk(s) available on {hostname}"
        )

        rowset = RowSet(header=list(AVAILABLE_HEADER), caption=AVAILABLE_CAPTION)
        for disk in available:
            rowset.add((disk.model, disk.size_human, disk.type, disk.by_id_path), disk)
        return sort_rowset(rowset)

    def list_disks(
        self,
        show_available: bool,
        output_format: Union[str, OutputFormat],
        console: Console,
    ) -> None:
        """Print the configured disks and, if requested, the available ones.

        If the available listing fails the configured output has already
        been written; the error still propagates.
        """
        fmt = parse_format(output_format)

        configured = self.fetch_configured()
        render(self.configured_rowset(configured), fmt, console)

        if not show_available:
            return

        available = self.available_rowset(configured)
        if fmt is OutputFormat.TABLE:
            console.print("")
        render(available, fmt, console)
