import logging

from config import INPUT_ENCODING
from scanner.pattern_matcher import PatternMatcher
from scanner.stream_scanner import StreamScanner
from utils.line_reader import LineReader
from utils.result_writer import ResultWriter
from utils.streams import open_input, open_output


class ScannerEngine:
    def __init__(self, encoding=INPUT_ENCODING):
        self.logger = logging.getLogger(__name__)
        self.encoding = encoding

    def run(self, args):
        """
        Runs one filtering pass described by `args` (input, output, regexp,
        before, after) and returns a summary dict.

        Patterns are compiled and the input opened before the output is
        touched, so those failures never create or truncate an output file.
        """
        patterns = list(args.regexp or [])
        matcher = PatternMatcher(patterns)
        scanner = StreamScanner(matcher, before_lines=args.before, after_lines=args.after)
        self.logger.info(f"Compiled {len(matcher)} pattern(s); before={args.before}, after={args.after}")

        with open_input(args.input) as source:
            reader = LineReader(source, encoding=self.encoding)
            with open_output(args.output) as sink:
                writer = ResultWriter(sink)
                writer.write_all(scanner.scan(reader))
                writer.flush()

        summary = dict(scanner.stats)
        summary["emitted"] = writer.written
        summary["skipped"] = reader.skipped
        self._log_summary(summary, args)
        return summary

    def _log_summary(self, summary, args):
        source = args.input or "<stdin>"
        self.logger.info(
            f"Scan of {source} complete. Lines: {summary['lines']}, matches: {summary['matches']}, "
            f"emitted: {summary['emitted']}, skipped: {summary['skipped']}"
        )
        if summary["skipped"]:
            self.logger.warning(f"{summary['skipped']} unreadable line(s) skipped in {source}")
