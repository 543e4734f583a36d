"""requests transport for the daemon's local control socket."""
import socket

from requests.adapters import HTTPAdapter
from urllib3.connection import HTTPConnection
from urllib3.connectionpool import HTTPConnectionPool

# Host part of URLs routed to the control socket
LOCAL_BASE_URL = "http://control.socket"


class UnixSocketConnection(HTTPConnection):
    """HTTP connection over an AF_UNIX stream socket."""

    def __init__(self, socket_path: str, timeout: float = 30.0):
        super().__init__("localhost", timeout=timeout)
        self.socket_path = socket_path

    def connect(self):
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        sock.connect(self.socket_path)
        self.sock = sock


class UnixSocketConnectionPool(HTTPConnectionPool):

    def __init__(self, socket_path: str, timeout: float = 30.0):
        super().__init__("localhost", timeout=timeout)
        self.socket_path = socket_path
        self.socket_timeout = timeout

    def _new_conn(self):
        return UnixSocketConnection(self.socket_path, self.socket_timeout)


class UnixSocketAdapter(HTTPAdapter):
    """
    Route every request of a mounted prefix to one unix socket.

    Example:
        session = requests.Session()
        session.mount(LOCAL_BASE_URL + "/", UnixSocketAdapter("/path/control.socket"))
        session.get(LOCAL_BASE_URL + "/1.0/disks")
    """

    def __init__(self, socket_path: str, timeout: float = 30.0):
        self.socket_path = socket_path
        self.timeout = timeout
        self.pool = UnixSocketConnectionPool(socket_path, timeout)
        super().__init__()

    def get_connection_with_tls_context(self, request, verify, proxies=None, cert=None):
        return self.pool

    def get_connection(self, url, proxies=None):
        return self.pool

    def request_url(self, request, proxies):
        return request.path_url

    def close(self):
        self.pool.close()
        super().close()
