import pytest

from sigmoidnet.csvdata import count_columns, count_lines, read_row


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,target\n1,2.5,3\n-4,5e-1,6\n", encoding="utf-8")
    return path


def test_count_lines(sample):
    assert count_lines(sample) == 3


def test_count_lines_without_final_newline(tmp_path):
    path = tmp_path / "x.csv"
    path.write_text("1\n2", encoding="utf-8")
    assert count_lines(path) == 2


def test_read_row_values(sample):
    assert read_row(sample, 1) == [1.0, 2.5, 3.0]
    assert read_row(sample, 2) == [-4.0, 0.5, 6.0]


def test_read_row_header_skips_text(sample):
    assert read_row(sample, 0) == []


def test_read_row_past_end_is_empty(sample):
    assert read_row(sample, 10) == []


def test_read_row_skips_bad_cells(tmp_path):
    path = tmp_path / "x.csv"
    path.write_text("1,,x,2\n", encoding="utf-8")
    assert read_row(path, 0) == [1.0, 2.0]


def test_read_row_uses_numeric_prefix(tmp_path):
    path = tmp_path / "x.csv"
    path.write_text(" 7,3abc\n", encoding="utf-8")
    assert read_row(path, 0) == [7.0, 3.0]


def test_count_columns(sample):
    assert count_columns(sample) == 3


def test_count_columns_ignores_trailing_comma(tmp_path):
    path = tmp_path / "x.csv"
    path.write_text("a,b,\n", encoding="utf-8")
    assert count_columns(path) == 2


def test_count_columns_empty_file_raises(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        count_columns(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_lines(tmp_path / "missing.csv")