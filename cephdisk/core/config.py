"""cephdisk runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cephdisk.core.errors import ConfigError

DEFAULT_STATE_DIR = "/var/snap/microceph/common/state"
CONTROL_SOCKET = "control.socket"


@dataclass
class CephDiskConfig:
    """Runtime configuration for cephdisk.

    Attributes:
        state_dir: Daemon state directory (holds the control socket)
        api_url: Explicit API endpoint, used instead of the control socket
        request_timeout: Timeout in seconds for each API request (default: 30)
        hostname: Override for the local host identity
        mock: Serve canned data instead of contacting the cluster
    """

    state_dir: str = DEFAULT_STATE_DIR
    api_url: Optional[str] = None
    request_timeout: float = 30.0
    hostname: Optional[str] = None
    mock: bool = False

    @classmethod
    def from_env(cls) -> "CephDiskConfig":
        """Create config from environment variables.

        Environment variables:
            CEPHDISK_STATE_DIR: Daemon state directory
            CEPHDISK_API_URL: API endpoint (http[s]://host:port)
            CEPHDISK_REQUEST_TIMEOUT: Request timeout in seconds
            CEPHDISK_HOSTNAME: Local host identity override
            CEPHDISK_MOCK: "1" to use canned data

        Returns:
            CephDiskConfig instance with values from environment or defaults

        Raises:
            ConfigError: CEPHDISK_REQUEST_TIMEOUT is not a number
        """
        timeout = os.getenv("CEPHDISK_REQUEST_TIMEOUT")
        try:
            request_timeout = float(timeout) if timeout else cls.request_timeout
        except ValueError as e:
            raise ConfigError(f"Invalid CEPHDISK_REQUEST_TIMEOUT: {timeout!r}") from e

        return cls(
            state_dir=os.getenv("CEPHDISK_STATE_DIR", cls.state_dir),
            api_url=os.getenv("CEPHDISK_API_URL") or None,
            request_timeout=request_timeout,
            hostname=os.getenv("CEPHDISK_HOSTNAME") or None,
            mock=os.getenv("CEPHDISK_MOCK") == "1",
        )

    def validate(self) -> None:
        """Reject configurations the client cannot start from."""
        if not self.state_dir:
            raise ConfigError("Missing state directory")
        if self.request_timeout <= 0:
            raise ConfigError(
                f"Request timeout must be positive, got {self.request_timeout}"
            )

    def control_socket(self) -> str:
        """Return the daemon's control socket path inside the state directory."""
        socket_path = Path(self.state_dir) / CONTROL_SOCKET
        if not socket_path.exists():
            raise ConfigError(
                f"No control socket at {socket_path} (is the daemon running?)"
            )
        return str(socket_path)
