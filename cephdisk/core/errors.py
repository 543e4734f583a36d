"""Exception types raised by cephdisk."""


class CephDiskError(Exception):
    """Base class for cephdisk failures."""
    pass


class RetrievalError(CephDiskError):
    """Raised when disk, resource or host data cannot be fetched."""
    pass


class FormatError(CephDiskError):
    """Raised for an unrecognized output format selector."""
    pass


class ConfigError(CephDiskError):
    """Raised when the client cannot be bootstrapped from configuration."""
    pass
