"""Cluster API readers for configured disks and hardware resources."""
from typing import Any, Dict, List, Optional, Protocol

import requests

from cephdisk.core.errors import RetrievalError
from cephdisk.core.logger import get_logger
from cephdisk.models.disk import ConfiguredDisk, ResourcesStorage
from cephdisk.services.unixsocket import LOCAL_BASE_URL, UnixSocketAdapter

logger = get_logger(__name__)

API_VERSION = "1.0"


class ApiReader(Protocol):
    """Read-only view of the cluster API used by disk listing."""

    def get_disks(self) -> List[ConfiguredDisk]:
        ...

    def get_resources(self) -> ResourcesStorage:
        ...


class ClusterClient:
    """
    REST client for the cluster daemon.

    Every response is wrapped in the daemon envelope::

        {"type": "sync", "status_code": 200, "metadata": ...}
        {"type": "error", "error_code": 500, "error": "..."}

    With socket_path set, requests go to the daemon's local control socket
    instead of over the network. Any transport failure, error envelope or
    malformed payload surfaces as RetrievalError. Requests are not retried.

    Example:
        client = ClusterClient(socket_path="/var/snap/microceph/common/state/control.socket")
        disks = client.get_disks()
    """

    def __init__(
        self,
        base_url: str = LOCAL_BASE_URL,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
        socket_path: Optional[str] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.socket_path = socket_path
        self.session = session or requests.Session()
        if socket_path:
            self.session.mount(f"{self.base_url}/", UnixSocketAdapter(socket_path, timeout))

    def get_disks(self) -> List[ConfiguredDisk]:
        """Fetch every disk configured in the cluster."""
        metadata = self._get("disks")
        if metadata is None:
            return []
        if not isinstance(metadata, list):
            raise RetrievalError(f"Unexpected disks payload: {type(metadata).__name__}")
        try:
            return [ConfiguredDisk.from_dict(item) for item in metadata]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RetrievalError(f"Malformed disk record: {e}") from e

    def get_resources(self) -> ResourcesStorage:
        """Fetch the storage section of the local node's resource report."""
        metadata = self._get("resources")
        if not isinstance(metadata, dict):
            raise RetrievalError("Unexpected resources payload")
        try:
            return ResourcesStorage.from_dict(metadata)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RetrievalError(f"Malformed resources record: {e}") from e

    def _get(self, endpoint: str) -> Any:
        url = f"{self.base_url}/{API_VERSION}/{endpoint}"
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise RetrievalError(f"Failed to fetch {endpoint}: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and payload.get("type") == "error":
            message = payload.get("error") or f"error code {payload.get('error_code')}"
            raise RetrievalError(f"Failed to fetch {endpoint}: {message}")

        if not response.ok:
            raise RetrievalError(
                f"Failed to fetch {endpoint}: HTTP {response.status_code}"
            )

        if not isinstance(payload, dict) or "metadata" not in payload:
            raise RetrievalError(f"Failed to fetch {endpoint}: invalid response body")

        return payload["metadata"]


class MockClusterClient:
    """Canned cluster data for CEPHDISK_MOCK=1 runs."""

    def __init__(
        self,
        disks: Optional[List[ConfiguredDisk]] = None,
        resources: Optional[ResourcesStorage] = None,
    ):
        self.disks = disks if disks is not None else self._mock_disks()
        self.resources = resources if resources is not None else self._mock_resources()

    def get_disks(self) -> List[ConfiguredDisk]:
        logger.debug("MOCK: returning configured disks")
        return list(self.disks)

    def get_resources(self) -> ResourcesStorage:
        logger.debug("MOCK: returning resource report")
        return self.resources

    @staticmethod
    def _mock_disks() -> List[ConfiguredDisk]:
        return [
            ConfiguredDisk(osd=0, location="node-1", path="/dev/disk/by-id/wwn-0x5000c500a1b2c3d4"),
            ConfiguredDisk(osd=1, location="node-2", path="/dev/disk/by-id/wwn-0x5000c500e5f6a7b8"),
        ]

    @staticmethod
    def _mock_resources() -> ResourcesStorage:
        raw: Dict[str, Any] = {
            "disks": [
                {
                    "id": "sda",
                    "model": "Samsung SSD 870",
                    "type": "sata",
                    "size": 1000204886016,
                    "device_id": "ata-Samsung_SSD_870_EVO_1TB_S6PTNX0R",
                    "partitions": [
                        {"id": "sda1", "device": "8:1", "size": 536870912, "partition": 1},
                    ],
                },
                {
                    "id": "sdb",
                    "model": "ST4000NM0035",
                    "type": "sata",
                    "size": 4000787030016,
                    "device_id": "wwn-0x5000c500a1b2c3d4",
                },
                {
                    "id": "nvme0n1",
                    "model": "WD Black SN850",
                    "type": "nvme",
                    "size": 2000398934016,
                    "device_id": "nvme-WD_BLACK_SN850_2TB_21345X800123",
                },
            ],
        }
        return ResourcesStorage.from_dict(raw)
