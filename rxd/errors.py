"""
Exceptions raised by rxd.
"""


class RxdError(Exception):
    """Base class for all rxd errors."""


class ConfigError(RxdError, ValueError):
    """Invalid dump configuration (zero width, zero group length, bad line count)."""


class DumpIOError(RxdError):
    """The input could not be opened or read. The OSError is kept as __cause__."""
