"""
Tests for byte reader.
"""

import io
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from rxd.byte_reader import ByteReader
from rxd.errors import DumpIOError


class TrickleStream(io.RawIOBase):
    """Stream that returns at most two bytes per read, like a slow pipe."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def readable(self):
        return True

    def read(self, size=-1):
        chunk = self.data[self.pos:self.pos + min(size, 2)]
        self.pos += len(chunk)
        return chunk


class FailingStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError(5, 'Input/output error')


def test_byte_reader_context_manager(tmp_path):
    """Test that ByteReader works as context manager."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01\x02\x03\x04')

    with ByteReader(test_file) as reader:
        assert reader.read_chunk(3) == b'\x01\x02\x03'
        assert reader.read_chunk(3) == b'\x04'
        assert reader.read_chunk(3) == b''
    assert reader.file is None


def test_read_outside_context(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01')

    with pytest.raises(RuntimeError):
        ByteReader(test_file).read_chunk(1)


def test_missing_file(tmp_path):
    """Test that open failures become DumpIOError."""
    missing = tmp_path / "missing.bin"

    with pytest.raises(DumpIOError) as excinfo:
        with ByteReader(missing):
            pass
    assert str(missing) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_short_reads_are_joined():
    """Test that chunks are filled even when the stream trickles."""
    reader = ByteReader.from_stream(TrickleStream(bytes(range(7))))

    assert list(reader.chunks(3)) == [b'\x00\x01\x02', b'\x03\x04\x05', b'\x06']


def test_stream_is_not_closed():
    stream = io.BytesIO(b'abc')

    with ByteReader.from_stream(stream, name='<test>') as reader:
        assert reader.name == '<test>'
        assert reader.read_chunk(2) == b'ab'
    assert not stream.closed


def test_read_failure():
    """Test that read errors become DumpIOError."""
    reader = ByteReader.from_stream(FailingStream(), name='<broken>')

    with pytest.raises(DumpIOError) as excinfo:
        reader.read_chunk(16)
    assert '<broken>' in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_remaining_bytes(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01\x02\x03\x04')

    with ByteReader(test_file) as reader:
        reader.read_chunk(1)
        assert reader.remaining_bytes() == 3
        # Position should not have changed
        assert reader.read_chunk(1) == b'\x02'


def test_remaining_bytes_unknown_for_pipes():
    reader = ByteReader.from_stream(TrickleStream(b'abc'))
    assert reader.remaining_bytes() is None


if __name__ == '__main__':
    pytest.main([__file__])
