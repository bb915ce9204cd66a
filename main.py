import argparse
import logging
import os
import sys

from config import DEFAULT_AFTER, DEFAULT_BEFORE, LOG_FILE, LOG_LEVEL
from scanner.errors import IawkError, OutputWriteError
from scanner.scanner_engine import ScannerEngine
from utils.logger import setup_logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def log_level(value):
    level = value.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"invalid log level: '{value}' (choose from {', '.join(LOG_LEVELS)})")
    return level


def build_parser():
    parser = argparse.ArgumentParser(
        prog="iawk",
        description="Print lines matching one or more regular expressions, with surrounding context.",
    )
    parser.add_argument("-i", "--input", metavar="FILE", help="Input file (default: stdin)")
    parser.add_argument("-o", "--output", metavar="FILE", help="Output file (default: stdout)")
    parser.add_argument("-r", "--regexp", metavar="REGEXP", action="append", default=[],
                        help="Regular expression to filter on (repeatable, any may match)")
    parser.add_argument("-b", "--before", metavar="NUM", type=non_negative_int, default=DEFAULT_BEFORE,
                        help="Number of lines to include before a match")
    parser.add_argument("-a", "--after", metavar="NUM", type=non_negative_int, default=DEFAULT_AFTER,
                        help="Number of lines to include after a match")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=log_level, default=LOG_LEVEL,
                        help="Diagnostic verbosity on stderr")
    parser.add_argument("--log-file", metavar="FILE", default=LOG_FILE, help="Also write diagnostics to this file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = setup_logger(level=args.log_level, log_file=args.log_file)

    try:
        ScannerEngine().run(args)
    except OutputWriteError as e:
        logger.error(str(e))
        if isinstance(e.__cause__, BrokenPipeError):
            # Keep the interpreter from failing again when it flushes stdout on exit
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        return 1
    except IawkError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted.")
        return 130
    finally:
        logging.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
