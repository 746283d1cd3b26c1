"""
rxd: hexadecimal dump of a file with a character sidebar.
"""

import importlib.metadata

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError:
    __version__ = None

from .data_models import DumpConfig, DumpLine
from .errors import RxdError, ConfigError, DumpIOError
from .formatter import LineFormatter, format_dump

__all__ = (
    'DumpConfig',
    'DumpLine',
    'RxdError',
    'ConfigError',
    'DumpIOError',
    'LineFormatter',
    'format_dump',
)
