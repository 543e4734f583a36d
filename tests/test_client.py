"""Tests for the cluster API readers."""
import json
import socket
import socketserver
import threading
from http.server import BaseHTTPRequestHandler
from unittest.mock import Mock

import pytest
import requests

from cephdisk.core.errors import RetrievalError
from cephdisk.models.disk import ConfiguredDisk
from cephdisk.services.client import ClusterClient, MockClusterClient


def _response(payload=None, status_code=200, json_error=False):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = payload
    return response


def _client(response=None, side_effect=None):
    session = Mock()
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    return ClusterClient("https://10.0.0.1:7443/", timeout=5, session=session), session


class TestGetDisks:

    def test_parses_sync_envelope(self):
        client, session = _client(_response({
            "type": "sync",
            "status_code": 200,
            "metadata": [
                {"osd": 0, "location": "node-1", "path": "/dev/disk/by-id/wwn-0x1"},
                {"osd": 1, "location": "node-2", "path": "/dev/disk/by-id/wwn-0x2"},
            ],
        }))

        disks = client.get_disks()

        assert disks == [
            ConfiguredDisk(osd=0, location="node-1", path="/dev/disk/by-id/wwn-0x1"),
            ConfiguredDisk(osd=1, location="node-2", path="/dev/disk/by-id/wwn-0x2"),
        ]
        session.get.assert_called_once_with("https://10.0.0.1:7443/1.0/disks", timeout=5)

    def test_null_metadata_is_empty(self):
        client, _ = _client(_response({"type": "sync", "metadata": None}))
        assert client.get_disks() == []

    def test_error_envelope(self):
        client, _ = _client(_response(
            {"type": "error", "error_code": 500, "error": "Database is not ready"},
            status_code=500,
        ))

        with pytest.raises(RetrievalError, match="Database is not ready"):
            client.get_disks()

    def test_http_error_without_body(self):
        client, _ = _client(_response(status_code=503, json_error=True))

        with pytest.raises(RetrievalError, match="HTTP 503"):
            client.get_disks()

    def test_connection_error(self):
        client, _ = _client(side_effect=requests.ConnectionError("connection refused"))

        with pytest.raises(RetrievalError, match="connection refused"):
            client.get_disks()

    def test_timeout(self):
        client, _ = _client(side_effect=requests.Timeout("read timed out"))

        with pytest.raises(RetrievalError, match="disks"):
            client.get_disks()

    def test_malformed_record(self):
        client, _ = _client(_response({"type": "sync", "metadata": [{"location": "node-1"}]}))

        with pytest.raises(RetrievalError, match="Malformed disk record"):
            client.get_disks()

    def test_unexpected_payload_type(self):
        client, _ = _client(_response({"type": "sync", "metadata": {"osd": 0}}))

        with pytest.raises(RetrievalError, match="Unexpected disks payload"):
            client.get_disks()

    def test_no_retry(self):
        client, session = _client(side_effect=requests.ConnectionError("down"))

        with pytest.raises(RetrievalError):
            client.get_disks()

        assert session.get.call_count == 1


class TestGetResources:

    def test_parses_storage_report(self):
        client, session = _client(_response({
            "type": "sync",
            "metadata": {
                "disks": [
                    {
                        "id": "sdb",
                        "model": "ST4000NM0035",
                        "type": "sata",
                        "size": 4000787030016,
                        "device_id": "wwn-0x5000c500a1b2c3d4",
                        "partitions": [],
                    },
                ],
                "total": 4000787030016,
            },
        }))

        storage = client.get_resources()

        assert len(storage.disks) == 1
        assert storage.disks[0].by_id_path == "/dev/disk/by-id/wwn-0x5000c500a1b2c3d4"
        session.get.assert_called_once_with("https://10.0.0.1:7443/1.0/resources", timeout=5)

    def test_missing_metadata(self):
        client, _ = _client(_response({"type": "sync"}))

        with pytest.raises(RetrievalError, match="invalid response body"):
            client.get_resources()

    def test_non_object_metadata(self):
        client, _ = _client(_response({"type": "sync", "metadata": []}))

        with pytest.raises(RetrievalError, match="Unexpected resources payload"):
            client.get_resources()


class TestMockClusterClient:

    def test_canned_data(self):
        client = MockClusterClient()

        assert len(client.get_disks()) == 2
        assert len(client.get_resources().disks) == 3

    def test_injected_data(self, configured_disks):
        client = MockClusterClient(disks=configured_disks)
        assert client.get_disks() == configured_disks


class _DaemonHandler(BaseHTTPRequestHandler):
    routes = {
        "/1.0/disks": {
            "type": "sync",
            "status_code": 200,
            "metadata": [{"osd": 4, "location": "node-1", "path": "/dev/disk/by-id/wwn-0x4"}],
        },
    }

    def do_GET(self):
        payload = self.routes.get(self.path)
        if payload is None:
            payload = {"type": "error", "error_code": 404, "error": "not found"}
        body = json.dumps(payload).encode()
        self.send_response(payload.get("status_code") or payload.get("error_code"))
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def control_socket(tmp_path):
    socket_path = str(tmp_path / "control.socket")
    server = socketserver.UnixStreamServer(socket_path, _DaemonHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield socket_path
    server.shutdown()
    server.server_close()


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="unix sockets unavailable")
class TestControlSocket:

    def test_get_disks_over_socket(self, control_socket):
        client = ClusterClient(socket_path=control_socket, timeout=5)

        assert client.get_disks() == [
            ConfiguredDisk(osd=4, location="node-1", path="/dev/disk/by-id/wwn-0x4"),
        ]

    def test_error_envelope_over_socket(self, control_socket):
        client = ClusterClient(socket_path=control_socket, timeout=5)

        with pytest.raises(RetrievalError, match="not found"):
            client.get_resources()

    def test_socket_not_listening(self, tmp_path):
        client = ClusterClient(socket_path=str(tmp_path / "control.socket"), timeout=5)

        with pytest.raises(RetrievalError, match="Failed to fetch disks"):
            client.get_disks()
