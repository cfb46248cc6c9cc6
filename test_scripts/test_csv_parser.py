from __future__ import annotations

import pytest

from riceboard.interchange.csv_parser import DelimitedTextParser, parse_rows


def test_simple_rows():
    assert parse_rows("name,reach\nA,10\n") == [["name", "reach"], ["A", "10"]]


def test_final_row_without_newline():
    assert parse_rows("a,b\nc,d") == [["a", "b"], ["c", "d"]]


def test_quoted_cell_with_delimiter_and_escaped_quote():
    assert parse_rows('"a, b""c"') == [['a, b"c']]


def test_quoted_cell_with_line_break():
    assert parse_rows('name,description\nA,"line one\nline two"\n') == [
        ["name", "description"],
        ["A", "line one\nline two"],
    ]


def test_blank_lines_are_skipped():
    assert parse_rows("a,b\n\n   \nc,d\n\n") == [["a", "b"], ["c", "d"]]


def test_crlf_line_endings():
    assert parse_rows("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]


def test_carriage_return_kept_inside_quotes():
    assert parse_rows('"x\r\ny"') == [["x\r\ny"]]


def test_unquoted_cells_are_trimmed_quoted_are_not():
    assert parse_rows('  x  ,"  y  "') == [["x", "  y  "]]


def test_whitespace_before_opening_quote_is_ignored():
    assert parse_rows('a, "b,c"') == [["a", "b,c"]]


def test_text_after_closing_quote_is_appended():
    assert parse_rows('"a"b,c') == [["ab", "c"]]


def test_empty_cells_are_kept():
    assert parse_rows("a,\n,,") == [["a", ""], ["", "", ""]]


def test_unterminated_quote_runs_to_end():
    assert parse_rows('a,"open\nstill open') == [["a", "open\nstill open"]]


def test_byte_order_mark_is_stripped():
    assert parse_rows("\ufeffname,reach\n") == [["name", "reach"]]


def test_empty_input():
    assert parse_rows("") == []
    assert parse_rows("\n\n") == []


def test_custom_delimiter():
    assert DelimitedTextParser(";").parse("a;b,c\n") == [["a", "b,c"]]


@pytest.mark.parametrize("delimiter", ["", ";;", '"', "\n"])
def test_invalid_delimiter(delimiter):
    with pytest.raises(ValueError):
        DelimitedTextParser(delimiter)
