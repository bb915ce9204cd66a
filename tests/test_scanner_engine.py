import argparse

import pytest

from scanner.errors import InputOpenError, PatternError
from scanner.scanner_engine import ScannerEngine


def make_args(**overrides):
    args = {"input": None, "output": None, "regexp": [], "before": 0, "after": 0}
    args.update(overrides)
    return argparse.Namespace(**args)


def test_file_to_file_with_context(write_input, tmp_path):
    source = write_input("x\ny\nMATCH\nz\nw")
    target = tmp_path / "out.txt"

    summary = ScannerEngine().run(make_args(
        input=str(source), output=str(target), regexp=["MATCH"], before=1, after=1,
    ))

    assert target.read_bytes() == b"y\nMATCH\nz\n"
    assert summary["lines"] == 5
    assert summary["matches"] == 1
    assert summary["emitted"] == 3
    assert summary["skipped"] == 0


def test_last_line_without_newline_gets_one(write_input, tmp_path):
    source = write_input("abc\ndef\nghi")
    target = tmp_path / "out.txt"

    ScannerEngine().run(make_args(input=str(source), output=str(target), regexp=["[hi]"]))

    assert target.read_bytes() == b"ghi\n"


def test_unreadable_records_are_skipped(write_input, tmp_path):
    source = write_input(b"match 1\n\xff match\nmatch 3\n")
    target = tmp_path / "out.txt"

    summary = ScannerEngine().run(make_args(input=str(source), output=str(target), regexp=["match"]))

    assert target.read_text(encoding="utf-8") == "match 1\nmatch 3\n"
    assert summary["skipped"] == 1


def test_invalid_pattern_fails_before_output_is_created(write_input, tmp_path):
    source = write_input("abc\n")
    target = tmp_path / "out.txt"

    with pytest.raises(PatternError):
        ScannerEngine().run(make_args(input=str(source), output=str(target), regexp=["[a]", "(unclosed"]))

    assert not target.exists()


def test_missing_input_fails_before_output_is_created(tmp_path):
    target = tmp_path / "out.txt"

    with pytest.raises(InputOpenError):
        ScannerEngine().run(make_args(input=str(tmp_path / "missing.txt"), output=str(target), regexp=["a"]))

    assert not target.exists()


def test_running_twice_gives_identical_output(write_input, tmp_path):
    source = write_input("a\nM\nb\nc\nM\nd\ne\n")
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"

    for target in (first, second):
        ScannerEngine().run(make_args(input=str(source), output=str(target), regexp=["M"], before=1, after=1))

    assert first.read_bytes() == second.read_bytes() == b"a\nM\nb\nc\nM\nd\n"
