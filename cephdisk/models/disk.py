"""Configured and physical disk models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

BY_ID_PREFIX = "/dev/disk/by-id/"


def format_size_iec(size: int, precision: int = 2) -> str:
    """Human-readable IEC size (1000B, 1.00KiB, 3.64TiB)."""
    if size < 1024:
        return f"{size}B"
    value = float(size)
    for unit in ['KiB', 'MiB', 'GiB', 'TiB', 'PiB']:
        value /= 1024
        if value < 1024:
            return f"{value:.{precision}f}{unit}"
    return f"{value / 1024:.{precision}f}EiB"


@dataclass
class ConfiguredDisk:
    """A disk already configured as an OSD somewhere in the cluster."""
    osd: int              # OSD number
    location: str         # Owning cluster member
    path: str             # Device path recorded at add time

    def to_dict(self) -> Dict[str, Any]:
        return {"osd": self.osd, "location": self.location, "path": self.path}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfiguredDisk":
        return cls(
            osd=int(data["osd"]),
            location=str(data.get("location") or ""),
            path=str(data.get("path") or ""),
        )


@dataclass
class Partition:
    """A partition found on a physical disk."""
    id: str = ""          # Kernel name (sda1)
    device: str = ""
    size: int = 0
    partition: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "device": self.device,
            "size": self.size,
            "partition": self.partition,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Partition":
        return cls(
            id=str(data.get("id", "") or ""),
            device=str(data.get("device", "") or ""),
            size=int(data.get("size", 0) or 0),
            partition=int(data.get("partition", 0) or 0),
        )


@dataclass
class PhysicalDisk:
    """A disk reported by the hardware enumeration of one node."""
    model: str
    size: int             # Bytes
    type: str             # sata, nvme, scsi, virtio...
    device_id: str        # Name under /dev/disk/by-id
    partitions: List[Partition] = field(default_factory=list)
    id: str = ""          # Kernel name (sda, nvme0n1)
    device: str = ""      # major:minor
    device_path: str = ""
    wwn: str = ""
    removable: bool = False
    rpm: int = 0

    @property
    def by_id_path(self) -> str:
        """Stable device path the disk would be configured under."""
        return f"{BY_ID_PREFIX}{self.device_id}"

    @property
    def size_human(self) -> str:
        return format_size_iec(self.size)

    @property
    def is_partitioned(self) -> bool:
        return len(self.partitions) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "device": self.device,
            "model": self.model,
            "type": self.type,
            "size": self.size,
            "device_id": self.device_id,
            "device_path": self.device_path,
            "wwn": self.wwn,
            "removable": self.removable,
            "rpm": self.rpm,
            "partitions": [p.to_dict() for p in self.partitions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhysicalDisk":
        return cls(
            model=str(data.get("model", "") or ""),
            size=int(data.get("size", 0) or 0),
            type=str(data.get("type", "") or ""),
            device_id=str(data.get("device_id", "") or ""),
            partitions=[Partition.from_dict(p) for p in data.get("partitions") or []],
            id=str(data.get("id", "") or ""),
            device=str(data.get("device", "") or ""),
            device_path=str(data.get("device_path", "") or ""),
            wwn=str(data.get("wwn", "") or ""),
            removable=bool(data.get("removable", False)),
            rpm=int(data.get("rpm", 0) or 0),
        )


@dataclass
class ResourcesStorage:
    """Storage section of a node's hardware resource report."""
    disks: List[PhysicalDisk] = field(default_factory=list)
    total: Optional[int] = None

    def __post_init__(self):
        if self.total is None:
            self.total = len(self.disks)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourcesStorage":
        disks = [PhysicalDisk.from_dict(d) for d in data.get("disks") or []]
        return cls(disks=disks, total=int(data.get("total", len(disks)) or 0))
