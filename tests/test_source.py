"""Tests for reading log files into lines."""
import pytest

from logtree.core.errors import InputUnavailable
from logtree.source import read_lines


class TestReadLines:
    """Tests for read_lines."""

    def test_reads_lines_in_order(self, log_file, sample_lines):
        """Lines come back in file order without terminators."""
        assert read_lines(str(log_file)) == sample_lines

    def test_no_trailing_newline(self, tmp_path):
        """Last line without newline is still read."""
        path = tmp_path / "a.log"
        path.write_text("a\nb", encoding="utf-8")
        assert read_lines(str(path)) == ["a", "b"]

    def test_blank_lines_kept(self, tmp_path):
        """Blank lines in the middle are empty strings."""
        path = tmp_path / "a.log"
        path.write_text("a\n\nb\n", encoding="utf-8")
        assert read_lines(str(path)) == ["a", "", "b"]

    def test_crlf_terminators(self, tmp_path):
        """Windows line endings are stripped."""
        path = tmp_path / "a.log"
        path.write_bytes(b"a\r\nb\r\n")
        assert read_lines(str(path)) == ["a", "b"]

    def test_empty_file(self, empty_log_file):
        """Empty file has zero lines."""
        assert read_lines(str(empty_log_file)) == []

    def test_missing_file(self, tmp_path):
        """Missing file raises InputUnavailable."""
        with pytest.raises(InputUnavailable) as exc_info:
            read_lines(str(tmp_path / "missing.log"))
        assert "does not exist" in str(exc_info.value)

    def test_directory(self, tmp_path):
        """Directory path raises InputUnavailable."""
        with pytest.raises(InputUnavailable):
            read_lines(str(tmp_path))

    def test_undecodable_file(self, tmp_path):
        """Invalid UTF-8 raises InputUnavailable."""
        path = tmp_path / "bad.log"
        path.write_bytes(b"\xff\xfe\xfa\n")
        with pytest.raises(InputUnavailable):
            read_lines(str(path))
