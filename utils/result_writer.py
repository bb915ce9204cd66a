from scanner.errors import OutputWriteError


class ResultWriter:
    def __init__(self, sink):
        self.sink = sink
        self.written = 0

    def write_line(self, line):
        """
        Writes one line followed by exactly one newline.
        Any failure is fatal; nothing already written is taken back.
        """
        try:
            self.sink.write(line)
            self.sink.write("\n")
        except (OSError, UnicodeEncodeError) as e:
            raise OutputWriteError(f"Failed to write output line {self.written + 1}: {e}") from e
        self.written += 1

    def write_all(self, lines):
        count = 0
        for line in lines:
            self.write_line(line)
            count += 1
        return count

    def flush(self):
        try:
            self.sink.flush()
        except OSError as e:
            raise OutputWriteError(f"Failed to flush output: {e}") from e
