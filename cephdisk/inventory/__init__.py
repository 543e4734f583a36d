"""Disk inventory reconciliation."""
from cephdisk.inventory.aggregator import InventoryAggregator
from cephdisk.inventory.matcher import is_available, is_claimed, unclaimed_disks
from cephdisk.inventory.sorting import sort_rowset

__all__ = [
    'InventoryAggregator',
    'is_available',
    'is_claimed',
    'sort_rowset',
    'unclaimed_disks',
]
