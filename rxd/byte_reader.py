"""
Binary input reader for hex dumps.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from .errors import DumpIOError

_log = logging.getLogger(__name__)


class ByteReader:
    """Reads a binary file or stream in fixed-size chunks."""

    def __init__(self, file_path: Path):
        """
        Initialize byte reader.

        Args:
            file_path: Path to the input file
        """
        self.file_path = Path(file_path)
        self.name = str(self.file_path)
        self.file: Optional[BinaryIO] = None
        self._owns_file = True

    @classmethod
    def from_stream(cls, stream: BinaryIO, name: Optional[str] = None) -> 'ByteReader':
        """
        Wrap an already open binary stream.

        The stream is usable right away and is not closed on exit.
        """
        name = name or getattr(stream, 'name', None) or '<stream>'
        reader = cls(Path(str(name)))
        reader.name = str(name)
        reader.file = stream
        reader._owns_file = False
        return reader

    def __enter__(self):
        """Context manager entry."""
        if self.file is None:
            _log.debug("opening %s", self.name)
            try:
                self.file = open(self.file_path, 'rb')
            except OSError as e:
                raise DumpIOError(f"could not read file {self.name}: {e.strerror or e}") from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.file and self._owns_file:
            _log.debug("closing %s", self.name)
            self.file.close()
            self.file = None

    def read_chunk(self, count: int) -> bytes:
        """
        Read up to count bytes.

        Short reads are retried until count bytes are collected or the
        input ends. Returns b'' at end of input.
        """
        if not self.file:
            raise RuntimeError("File not open. Use as context manager.")
        parts = []
        remaining = count
        while remaining > 0:
            try:
                data = self.file.read(remaining)
            except OSError as e:
                raise DumpIOError(f"error reading {self.name}: {e.strerror or e}") from e
            if not data:
                break
            parts.append(bytes(data))
            remaining -= len(data)
        return b''.join(parts)

    def remaining_bytes(self) -> Optional[int]:
        """Number of bytes left to read, or None when the input is not seekable."""
        if not self.file:
            raise RuntimeError("File not open.")
        seekable = getattr(self.file, 'seekable', None)
        if seekable is None or not seekable():
            return None
        try:
            pos = self.file.tell()
            self.file.seek(0, 2)  # Seek to end
            size = self.file.tell()
            self.file.seek(pos)  # Restore position
        except OSError:
            _log.debug("size of %s unknown", self.name, exc_info=True)
            return None
        return size - pos

    def chunks(self, size: int) -> Iterator[bytes]:
        """Yield successive chunks of size bytes; the last one may be shorter."""
        while True:
            chunk = self.read_chunk(size)
            if not chunk:
                return
            yield chunk
