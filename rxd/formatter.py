"""
Line formatter: turns a byte stream into hex dump rows.

Each row is rendered as

    <offset>  <grouped hex bytes>  <character sidebar>

The last row of a dump may hold fewer bytes than the others; its hex
and character columns are padded with spaces so every row has the same
width.
"""

import io
import logging
from codecs import charmap_decode
from typing import BinaryIO, Iterator, List, Optional, Union

from .byte_reader import ByteReader
from .data_models import DumpConfig, DumpLine

_log = logging.getLogger(__name__)

OFFSET_DIGITS = 8
PLACEHOLDER = '.'
PRINTABLE = range(0x20, 0x7F)
C0_CONTROLS = range(0x00, 0x20)
# Unicode "Control Pictures" block: U+2400 SYMBOL FOR NULL .. U+241F SYMBOL FOR UNIT SEPARATOR
CONTROL_PICTURES_BASE = 0x2400

# Decoding tables for charmap_decode, one character per byte value
DOTTED_TABLE = ''.join(chr(b) if b in PRINTABLE else PLACEHOLDER for b in range(256))
CONTROL_PICTURE_TABLE = ''.join(
    chr(CONTROL_PICTURES_BASE + b) if b in C0_CONTROLS else DOTTED_TABLE[b]
    for b in range(256)
)


class LineFormatter:
    """Renders rows of a hex dump for one DumpConfig."""

    def __init__(self, config: Optional[DumpConfig] = None, input_size: Optional[int] = None):
        """
        Args:
            config: Dump settings (defaults to DumpConfig())
            input_size: Number of bytes that will be dumped, when known.
                Widens the offset column so the largest offset fits.
        """
        self.config = config or DumpConfig()
        self.table = CONTROL_PICTURE_TABLE if self.config.show_control_chars else DOTTED_TABLE
        self.offset_digits = self._offset_digits(input_size)

    def _offset_digits(self, input_size: Optional[int]) -> int:
        if not input_size:
            return OFFSET_DIGITS
        width = self.config.line_width
        last_offset = (input_size - 1) // width * width
        if self.config.line_limit is not None:
            last_offset = min(last_offset, (self.config.line_limit - 1) * width)
        return max(OFFSET_DIGITS, len(f"{last_offset:x}"))

    def lines(self, source: Union[BinaryIO, ByteReader]) -> Iterator[DumpLine]:
        """
        Lazily read source and yield one DumpLine per row.

        Args:
            source: ByteReader or binary file-like object with read()

        Nothing is read before iteration starts, and nothing past the
        last row once line_limit rows have been produced.
        """
        reader = source if isinstance(source, ByteReader) else ByteReader.from_stream(source)
        width = self.config.line_width
        limit = self.config.line_limit
        _log.debug("dumping %s: %s", reader.name, self.config)

        offset = 0
        rows = 0
        for chunk in reader.chunks(width):
            yield self.render_line(offset, chunk)
            offset += len(chunk)
            rows += 1
            if limit is not None and rows >= limit:
                _log.debug("line limit of %d reached at offset %#x", limit, offset)
                return

    def format_bytes(self, data: bytes) -> Iterator[DumpLine]:
        """Yield rows for an in-memory buffer."""
        return self.lines(io.BytesIO(data))

    def render_line(self, offset: int, data: bytes) -> DumpLine:
        return DumpLine(
            offset=offset,
            data=bytes(data),
            offset_text=self.render_offset(offset),
            hex_text=self.render_hex(data),
            char_text=self.render_chars(data),
        )

    def render_offset(self, offset: int) -> str:
        return f"{offset:0{self.offset_digits}x}"

    def render_hex(self, data: bytes) -> str:
        """
        Render bytes as grouped lowercase hex.

        Bytes inside a group are not separated; groups are separated by a
        single space. Missing positions of a short row become two spaces
        each, keeping the separators a full row would have.
        """
        digits = bytes(data).hex().ljust(2 * self.config.line_width)
        step = 2 * self.config.group_length
        return ' '.join(digits[i:i + step] for i in range(0, len(digits), step))

    def render_chars(self, data: bytes) -> str:
        text = charmap_decode(bytes(data), None, self.table)[0]
        return text.ljust(self.config.line_width)

    def header(self) -> List[str]:
        """
        Return a column ruler for the dump: column indexes above the hex
        column, then a dashed rule with '+' at the column separators.
        """
        width = self.config.line_width
        offset_width = len(self.render_offset(0))
        indexes = self.render_hex(bytes(i % 256 for i in range(width)))
        return [
            f"{' ' * offset_width}  {indexes}",
            f"{'-' * offset_width}-+{'-' * self.config.hex_width}-+{'-' * width}",
        ]


def format_dump(source: Union[BinaryIO, ByteReader], config: Optional[DumpConfig] = None) -> Iterator[str]:
    """Yield the printable text of each dump row read from source."""
    for line in LineFormatter(config).lines(source):
        yield str(line)
