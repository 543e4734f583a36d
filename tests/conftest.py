"""Shared test fixtures for cephdisk tests."""
import io
from unittest.mock import Mock

import pytest
from rich.console import Console

from cephdisk.models.disk import ConfiguredDisk, Partition, PhysicalDisk, ResourcesStorage


@pytest.fixture
def console():
    """Rich console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def configured_disks():
    """Two OSDs on two different nodes."""
    return [
        ConfiguredDisk(osd=0, location="node-1", path="/tmp/folder-1"),
        ConfiguredDisk(osd=1, location="node-2", path="/tmp/folder-2"),
    ]


@pytest.fixture
def physical_disks():
    """Two unpartitioned virtual disks."""
    return [
        PhysicalDisk(
            model="Virtual Warp Drive",
            size=1000,
            type="warp",
            device_id="virtio-0f5b1c2e-6d8a-11ee-b962-0242ac120002",
        ),
        PhysicalDisk(
            model="Virtual Flux Drive",
            size=1000,
            type="flux",
            device_id="virtio-1a7c3d4f-6d8a-11ee-b962-0242ac120002",
        ),
    ]


@pytest.fixture
def partitioned_disk():
    return PhysicalDisk(
        model="Boot SSD",
        size=256060514304,
        type="nvme",
        device_id="nvme-Boot_SSD_S123",
        partitions=[Partition(id="nvme0n1p1", device="259:1", size=536870912, partition=1)],
    )


@pytest.fixture
def mock_reader(configured_disks, physical_disks):
    """Reader returning the configured and physical disk fixtures."""
    reader = Mock()
    reader.get_disks.return_value = configured_disks
    reader.get_resources.return_value = ResourcesStorage(disks=physical_disks)
    return reader


@pytest.fixture
def mock_host():
    host = Mock()
    host.get_local_hostname.return_value = "node-1"
    return host
