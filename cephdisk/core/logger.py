"""Unified logging for cephdisk with console and file output."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Logs go to stderr so JSON/YAML on stdout stays parseable
console = Console(stderr=True)

LOG_DIR = Path("/var/log/cephdisk")
LOG_FILE = LOG_DIR / "cephdisk.log"

_file_logging_configured = False


def set_verbosity(verbose: bool = False) -> None:
    """Raise the cephdisk logger to DEBUG when verbose."""
    logging.getLogger("cephdisk").setLevel(logging.DEBUG if verbose else logging.WARNING)


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Set up file logging for cephdisk operations.

    Args:
        log_file: Path to log file (defaults to /var/log/cephdisk/cephdisk.log)
        verbose: Let DEBUG records through the file handler (the logger level
            itself is set by set_verbosity)

    Note:
        Falls back to /tmp if /var/log/cephdisk is not writable.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else LOG_FILE

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target_log_file = Path("/tmp/cephdisk.log")
        target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("cephdisk")
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    _file_logging_configured = True

    root_logger.debug(f"cephdisk logging initialized: {target_log_file}")


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger with a Rich stderr handler attached

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        # Level is inherited from the "cephdisk" logger (see set_verbosity)
        logger.setLevel(logging.NOTSET)

    return logger
