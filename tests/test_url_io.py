"""
Tests for reading and writing URL lists.
"""

import io
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from nojunk.url_io import (
    UrlIOError,
    read_urls_from_file,
    read_urls_from_stdin,
    write_urls_to_stdout,
)


class TestLineSplitting:

    def test_lone_carriage_return_stays_in_url(self, tmp_path: Path):
        infile = tmp_path / "urls.txt"
        infile.write_bytes(b"http://a.com/x.png\rjunk\nhttp://a.com/y\n")
        assert read_urls_from_file(infile) == ["http://a.com/x.png\rjunk", "http://a.com/y"]

    def test_crlf_line_endings(self, tmp_path: Path):
        infile = tmp_path / "urls.txt"
        infile.write_bytes(b"http://a.com/a\r\nhttp://a.com/b\r\n")
        assert read_urls_from_file(infile) == ["http://a.com/a", "http://a.com/b"]

    def test_stdin_splits_on_newline_only(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"http://a.com/a\rb\n\nhttp://a.com/c\r\n"), encoding="utf-8")
        assert read_urls_from_stdin(stdin) == ["http://a.com/a\rb", "http://a.com/c"]

    def test_invalid_utf8(self, tmp_path: Path):
        infile = tmp_path / "urls.txt"
        infile.write_bytes(b"http://a.com/\xff\n")
        with pytest.raises(UrlIOError):
            read_urls_from_file(infile)


class TestStdoutWriting:

    def test_writes_one_per_line(self):
        out = io.StringIO()
        write_urls_to_stdout(["http://a.com/a", "http://a.com/b"], out)
        assert out.getvalue() == "http://a.com/a\nhttp://a.com/b\n"

    def test_os_error_wrapped(self):
        class ClosedPipe(io.StringIO):
            def flush(self) -> None:
                raise BrokenPipeError(32, "Broken pipe")

        with pytest.raises(UrlIOError) as exc_info:
            write_urls_to_stdout(["http://a.com/a"], ClosedPipe())
        assert "Error writing to stdout" in str(exc_info.value)
