"""Local host identity used to scope disk matching."""
import socket
from typing import Optional, Protocol

from cephdisk.core.errors import RetrievalError
from cephdisk.core.logger import get_logger

logger = get_logger(__name__)


class HostIdentity(Protocol):
    def get_local_hostname(self) -> str:
        ...


class LocalHostIdentity:
    """Resolves the name this node is registered under in the cluster."""

    def __init__(self, override: Optional[str] = None):
        self.override = override

    def get_local_hostname(self) -> str:
        if self.override:
            return self.override
        try:
            hostname = socket.gethostname()
        except OSError as e:
            raise RetrievalError(f"Failed to resolve local hostname: {e}") from e
        logger.debug(f"Local hostname: {hostname}")
        return hostname
