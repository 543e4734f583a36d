"""Data models for cephdisk."""
from cephdisk.models.disk import (
    BY_ID_PREFIX,
    ConfiguredDisk,
    Partition,
    PhysicalDisk,
    ResourcesStorage,
    format_size_iec,
)
from cephdisk.models.rowset import RowSet

__all__ = [
    'BY_ID_PREFIX',
    'ConfiguredDisk',
    'Partition',
    'PhysicalDisk',
    'ResourcesStorage',
    'RowSet',
    'format_size_iec',
]
