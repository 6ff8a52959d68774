"""Unit tests for the files module and the file-to-file pipeline."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from html_table import pipeline
from html_table.config import load_settings
from html_table.errors import ResourceError, StructuralFormatError
from html_table.files import ensure_input_exists, read_lines, read_text, write_text

# ===========================================================================
# files tests
# ===========================================================================


class TestReadLines:

    def test_trailing_newline_no_extra_line(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("a b\nc d\n", encoding="utf-8")
        assert read_lines(path) == ["a b", "c d"]

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("a b\nc d", encoding="utf-8")
        assert read_lines(path) == ["a b", "c d"]

    def test_blank_line_kept(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("a\n\nb\n", encoding="utf-8")
        assert read_lines(path) == ["a", "", "b"]

    def test_crlf(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_bytes(b"a,b\r\nc\r\n")
        assert read_lines(path) == ["a,b", "c"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("", encoding="utf-8")
        assert read_lines(path) == []

    def test_utf8(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("café,naïve\n", encoding="utf-8")
        assert read_lines(path) == ["café,naïve"]


class TestResourceErrors:

    def test_missing_input(self, tmp_path):
        with pytest.raises(ResourceError, match="does not exist"):
            ensure_input_exists(tmp_path / "missing.txt")

    def test_directory_is_not_input(self, tmp_path):
        with pytest.raises(ResourceError):
            ensure_input_exists(tmp_path)

    def test_read_missing(self, tmp_path):
        with pytest.raises(ResourceError, match="Failed to read"):
            read_text(tmp_path / "missing.txt")

    def test_read_invalid_utf8(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(ResourceError):
            read_text(path)

    def test_write_into_missing_directory(self, tmp_path):
        with pytest.raises(ResourceError, match="Cannot write"):
            write_text(tmp_path / "nope" / "out.txt", "x")

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "out.txt"
        write_text(path, "<table>\n</table>\n")
        assert read_text(path) == "<table>\n</table>\n"


# ===========================================================================
# pipeline.run tests
# ===========================================================================


class TestPipelineRun:

    def test_generate_direction(self, tmp_path):
        src = tmp_path / "in.txt"
        dst = tmp_path / "out.html"
        src.write_text("a,b\nc\n", encoding="utf-8")
        warnings = pipeline.run(src, dst, load_settings(separator=","))
        assert warnings == []
        assert dst.read_text(encoding="utf-8") == "<table class='rustgen'>\n<tr>\n<td>a</td><td>b</td>\n</tr>\n<tr>\n<td>c</td>\n</tr>\n</table>\n"

    def test_reverse_direction(self, tmp_path, two_by_three_markup):
        src = tmp_path / "in.html"
        dst = tmp_path / "out.txt"
        src.write_text(f"<html><body>{two_by_three_markup}</body></html>", encoding="utf-8")
        warnings = pipeline.run(src, dst, load_settings(separator=",", reverse=True))
        assert warnings == []
        assert dst.read_text(encoding="utf-8") == "a,b,c\nd,e,f\n"

    def test_reverse_reports_skipped_rows(self, tmp_path):
        src = tmp_path / "in.html"
        dst = tmp_path / "out.txt"
        src.write_text("<table><tr><td>a</td></tr><tr><td>b</tr></table>", encoding="utf-8")
        warnings = pipeline.run(src, dst, load_settings(separator=",", reverse=True))
        assert [w.row_index for w in warnings] == [2]
        assert dst.read_text(encoding="utf-8") == "a\n"

    def test_structural_error_writes_nothing(self, tmp_path):
        src = tmp_path / "in.html"
        dst = tmp_path / "out.txt"
        src.write_text("<p>no table</p>", encoding="utf-8")
        with pytest.raises(StructuralFormatError):
            pipeline.run(src, dst, load_settings(reverse=True))
        assert not dst.exists()

    def test_missing_input_checked_first(self, tmp_path):
        dst = tmp_path / "out.html"
        with pytest.raises(ResourceError):
            pipeline.run(tmp_path / "missing.txt", dst, load_settings())
        assert not dst.exists()

    def test_file_round_trip(self, tmp_path):
        src = tmp_path / "in.txt"
        html = tmp_path / "mid.html"
        back = tmp_path / "back.txt"
        src.write_text("x;y;z\n1;;3\n", encoding="utf-8")
        pipeline.run(src, html, load_settings(separator=";"))
        pipeline.run(html, back, load_settings(separator=";", reverse=True))
        assert back.read_text(encoding="utf-8") == "x;y;z\n1;;3\n"
