"""Tests for loading tables from streams and files."""

import io
import itertools

import pytest

from csvview.core.parser import CsvViewError, FileAccessError, from_filepath, from_stream


def test_short_row_scenario(make_table):
    table = make_table("a,b\n1,2\n3\n")

    assert table.header_names() == ["a", "b"]
    assert table.rows[0].to_strings() == ["1", "2"]
    assert table.rows[1].to_strings() == ["3"]
    assert table.num_cols == 2
    assert table.header.row_id == -1


def test_empty_header_field_is_named(make_table):
    table = make_table("x,,z\n")

    assert table.header_names() == ["x", "col:1", "z"]
    assert table.num_rows() == 0


def test_empty_header_padded_to_widest_row(make_table):
    table = make_table("\n1,2,3\n4\n")

    assert table.header_names() == ["col:0", "col:1", "col:2"]
    assert table.num_cols == 3


def test_only_blank_lines_after_header(make_table):
    table = make_table("a,b,c\n\n\n\n")

    assert table.num_rows() == 0
    assert table.num_cols == 3


def test_empty_stream_yields_single_synthesized_column(make_table):
    table = make_table("")

    assert table.header_names() == ["col:0"]
    assert table.num_cols == 1
    assert table.num_rows() == 0


def test_blank_lines_are_skipped_but_whitespace_lines_are_rows(make_table):
    table = make_table("a\n1\n\n   \n2\n")

    assert [row.to_strings() for row in table.rows] == [["1"], [""], ["2"]]
    assert [row.row_id for row in table.rows] == [0, 1, 2]


def test_crlf_line_endings(make_table):
    table = make_table("a,b\r\n1,2\r\n\r\n3,4\r\n")

    assert table.header_names() == ["a", "b"]
    assert [row.to_strings() for row in table.rows] == [["1", "2"], ["3", "4"]]


def test_last_line_without_newline(make_table):
    table = make_table("a\n1\n2")

    assert [row.to_strings() for row in table.rows] == [["1"], ["2"]]


@pytest.mark.parametrize("widths", list(itertools.permutations([1, 3, 5])))
def test_header_matches_num_cols_for_any_row_widths(widths):
    lines = ["h1,h2"] + [",".join(str(i) for i in range(width)) for width in widths]
    table = from_stream(io.StringIO("\n".join(lines) + "\n"))

    assert table.num_cols == 5
    assert table.header.num_cols() == table.num_cols
    assert all(name for name in table.header_names())


def test_from_filepath_reads_file(sample_csv):
    table = from_filepath(sample_csv)

    assert table.header_names() == ["name", "city", "age"]
    assert [row.to_strings() for row in table.rows] == [
        ["alice", "Paris", "34"],
        ["bob", "Lyon", "9"],
        ["carol", "Nice"],
    ]


def test_from_filepath_missing_file_raises_file_access_error(tmp_path):
    missing = tmp_path / "does-not-exist.csv"

    with pytest.raises(FileAccessError) as excinfo:
        from_filepath(missing)

    error = excinfo.value
    assert isinstance(error, CsvViewError)
    assert error.filepath == str(missing)
    assert isinstance(error.why, FileNotFoundError)
    assert f"could not open '{missing}'" in str(error)


def test_from_filepath_directory_raises_file_access_error(tmp_path):
    with pytest.raises(FileAccessError):
        from_filepath(tmp_path)


def test_from_filepath_decode_error_propagates(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_bytes(b"a,b\n\xff\xfe,1\n")

    with pytest.raises(UnicodeDecodeError):
        from_filepath(bad)
