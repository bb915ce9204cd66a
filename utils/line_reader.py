import logging

from scanner.errors import InputReadError


class LineReader:
    """
    Decodes a binary stream into Lines.

    Records are split on '\\n'; a trailing '\\r' is dropped so CRLF input
    reads cleanly. A record that does not decode is reported on the
    diagnostic channel and skipped, and reading carries on. An I/O error
    from the stream itself leaves nothing to resume from and is fatal.
    """

    def __init__(self, stream, encoding="utf-8"):
        self.stream = stream
        self.encoding = encoding
        self.skipped = 0
        self.logger = logging.getLogger(__name__)

    def _records(self):
        records = iter(self.stream)
        number = 0
        while True:
            number += 1
            try:
                raw = next(records)
            except StopIteration:
                return
            except OSError as e:
                raise InputReadError(f"Error reading line {number}: {e}") from e
            yield number, raw

    def __iter__(self):
        for number, raw in self._records():
            if raw.endswith(b"\n"):
                raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            try:
                yield raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                self.skipped += 1
                self.logger.error(f"Error reading line {number}: {e}")


def read_lines(stream, encoding="utf-8"):
    return iter(LineReader(stream, encoding))
