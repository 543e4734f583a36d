"""Match enumerated hardware against disks already configured in the cluster."""
from typing import Iterable, List, Sequence

from cephdisk.core.logger import get_logger
from cephdisk.models.disk import ConfiguredDisk, PhysicalDisk

logger = get_logger(__name__)


def is_claimed(
    disk: PhysicalDisk, configured: Iterable[ConfiguredDisk], hostname: str
) -> bool:
    """True if a disk on ``hostname`` was configured under this disk's by-id path.

    Paths are compared as exact strings. Disks configured on other hosts
    never claim local hardware since by-id names are not cluster-global.
    """
    device_path = disk.by_id_path
    for entry in configured:
        if entry.location != hostname:
            continue
        if entry.path == device_path:
            return True
    return False


def is_available(
    disk: PhysicalDisk, configured: Iterable[ConfiguredDisk], hostname: str
) -> bool:
    """True if the disk can be offered as raw unclaimed capacity."""
    if disk.is_partitioned:
        return False
    return not is_claimed(disk, configured, hostname)


def unclaimed_disks(
    disks: Iterable[PhysicalDisk],
    configured: Sequence[ConfiguredDisk],
    hostname: str,
) -> List[PhysicalDisk]:
    """Filter ``disks`` down to unpartitioned disks not configured on this host."""
    available = []
    for disk in disks:
        if disk.is_partitioned:
            logger.debug(f"Skipping {disk.by_id_path}: has {len(disk.partitions)} partition(s)")
            continue
        if is_claimed(disk, configured, hostname):
            logger.debug(f"Skipping {disk.by_id_path}: already configured on {hostname}")
            continue
        available.append(disk)
    return available
