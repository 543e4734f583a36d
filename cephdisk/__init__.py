"""Disk inventory reconciliation and listing for MicroCeph clusters."""

__version__ = "0.1.0"
