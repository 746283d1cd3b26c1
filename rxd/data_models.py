"""
Data models for hex dumps.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError


def _check_positive(name: str, value, optional: bool = False):
    if optional and value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class DumpConfig:
    """
    Settings for one dump run.

    Attributes:
        line_width: Bytes per output row
        group_length: Bytes clustered together before a separator space
        line_limit: Maximum number of rows (None = whole input)
        show_control_chars: Render C0 control codes as control pictures
    """
    line_width: int = 16
    group_length: int = 1
    line_limit: Optional[int] = None
    show_control_chars: bool = False

    def __post_init__(self):
        _check_positive('line_width', self.line_width)
        _check_positive('group_length', self.group_length)
        _check_positive('line_limit', self.line_limit, optional=True)

    @property
    def groups_per_line(self) -> int:
        """Number of byte groups in a full row."""
        return -(-self.line_width // self.group_length)

    @property
    def hex_width(self) -> int:
        """Rendered width of the hex column, separators included."""
        return 2 * self.line_width + self.groups_per_line - 1


@dataclass(frozen=True)
class DumpLine:
    """One rendered row of a dump."""
    offset: int
    data: bytes
    offset_text: str
    hex_text: str
    char_text: str

    def __str__(self):
        return f"{self.offset_text}  {self.hex_text}  {self.char_text}"
