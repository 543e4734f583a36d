"""Shared utilities for cephdisk CLI modules."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console

from cephdisk.core.config import CephDiskConfig
from cephdisk.core.logger import get_logger
from cephdisk.services.client import ApiReader, ClusterClient, MockClusterClient
from cephdisk.services.host import LocalHostIdentity

logger = get_logger(__name__)


@dataclass
class CmdControl:
    """Global options shared by every subcommand."""
    state_dir: Optional[str] = None
    verbose: bool = False
    debug: bool = False
    log_file: Optional[str] = None


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from cephdisk.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def load_config(common: Optional[CmdControl] = None) -> CephDiskConfig:
    """Read the environment, apply CLI overrides and validate the result."""
    config = CephDiskConfig.from_env()
    if common is not None and common.state_dir is not None:
        config.state_dir = common.state_dir
    config.validate()
    return config


def build_reader(config: CephDiskConfig) -> ApiReader:
    """Construct the API reader for this invocation.

    The daemon is reached over its control socket unless CEPHDISK_API_URL
    names an endpoint explicitly.

    Raises:
        ConfigError: The control socket does not exist
    """
    if config.mock:
        logger.debug("Using mock cluster client")
        return MockClusterClient()

    if config.api_url:
        logger.debug(f"Using cluster API at {config.api_url}")
        return ClusterClient(config.api_url, timeout=config.request_timeout)

    socket_path = config.control_socket()
    logger.debug(f"Using control socket {socket_path}")
    return ClusterClient(socket_path=socket_path, timeout=config.request_timeout)


def build_host_identity(config: CephDiskConfig) -> LocalHostIdentity:
    return LocalHostIdentity(override=config.hostname)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output (stderr)
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    logger.debug(f"Command failed: {e}")
    console.print(f"[red]Error:[/red] {e}", highlight=False, soft_wrap=True)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)
