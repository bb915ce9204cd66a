import io
import sys
from contextlib import contextmanager

from scanner.errors import InputOpenError, OutputOpenError, OutputWriteError

STANDARD_STREAM = "-"


def _is_standard(path):
    return path is None or path == STANDARD_STREAM


@contextmanager
def open_input(path=None):
    """Yields a binary stream for the named file, or standard input."""
    if _is_standard(path):
        yield sys.stdin.buffer
        return

    try:
        f = open(path, 'rb')
    except OSError as e:
        raise InputOpenError(f"Cannot open input file {path}: {e}") from e
    with f:
        yield f


@contextmanager
def _standard_output():
    # Standard output keeps its own encoding and newline mode; write UTF-8
    # with bare '\n' through its byte buffer and detach instead of closing
    sys.stdout.flush()
    sink = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', newline='', write_through=True)
    try:
        yield sink
    finally:
        try:
            sink.detach()
        except OSError as e:
            raise OutputWriteError(f"Failed to flush output: {e}") from e


@contextmanager
def open_output(path=None):
    """Yields a UTF-8 text sink without newline translation, for the named file or standard output."""
    if _is_standard(path):
        with _standard_output() as sink:
            yield sink
        return

    try:
        f = open(path, 'w', encoding='utf-8', newline='')
    except OSError as e:
        raise OutputOpenError(f"Cannot open output file {path}: {e}") from e
    with f:
        yield f
