"""
Command-line interface for rxd.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .byte_reader import ByteReader
from .data_models import DumpConfig
from .errors import ConfigError, RxdError
from .formatter import LineFormatter

_log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1


def positive_int(value: str) -> int:
    """argparse type for options that take a positive integer."""
    try:
        number = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='rxd', description='Hex dump of a file')
    parser.add_argument('file_path', metavar='FILE_PATH', help="input file ('-' reads standard input)")
    parser.add_argument('-l', dest='line_count', metavar='LINE_COUNT', type=positive_int, default=None,
                        help='maximum number of lines to print (default: all)')
    parser.add_argument('-w', dest='line_width', metavar='LINE_WIDTH', type=positive_int, default=16,
                        help='number of bytes per line (default: 16)')
    parser.add_argument('-g', dest='group_length', metavar='BYTE_GROUP_LENGTH', type=positive_int, default=1,
                        help='number of bytes per group (default: 1)')
    parser.add_argument('-c', dest='control_pictures', action='store_true',
                        help='display C0 control codes as characters')
    parser.add_argument('--header', action='store_true', help='print a column ruler above the dump')
    parser.add_argument('-V', '--version', action='version', version=f"%(prog)s {__version__ or 'unknown'}")
    return parser


def log_level_from_env() -> Optional[int]:
    """Level named by the LOGLEVEL environment variable, None if the name is unknown."""
    level = logging.getLevelName(os.environ.get('LOGLEVEL', 'WARNING').upper())
    return level if isinstance(level, int) else None


def setup_logging():
    level = log_level_from_env()
    logging.basicConfig(format="{levelname: <6} {name: <16} {message}",
                        level=logging.WARNING if level is None else level, style="{")
    if level is None:
        _log.warning("unknown LOGLEVEL %r, using WARNING", os.environ.get('LOGLEVEL'))


def open_input(file_path: str) -> ByteReader:
    if file_path == '-':
        return ByteReader.from_stream(sys.stdin.buffer, name='<stdin>')
    return ByteReader(file_path)


def _silence_stdout():
    # Further writes (including the flush at interpreter exit) go to devnull
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()
    # Control pictures cannot be encoded on every terminal
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(errors='replace')

    try:
        config = DumpConfig(
            line_width=args.line_width,
            group_length=args.group_length,
            line_limit=args.line_count,
            show_control_chars=args.control_pictures,
        )
        with open_input(args.file_path) as reader:
            formatter = LineFormatter(config, input_size=reader.remaining_bytes())
            if args.header:
                for line in formatter.header():
                    print(line)
            for line in formatter.lines(reader):
                print(line)
            sys.stdout.flush()
    except BrokenPipeError:
        _log.debug("output closed, stopping dump")
        _silence_stdout()
        return EXIT_IO_ERROR
    except ConfigError as e:
        parser.error(str(e))
    except RxdError as e:
        _log.debug("dump aborted", exc_info=True)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
