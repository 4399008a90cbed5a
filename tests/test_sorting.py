import io

import pytest

from csvtreesort.sorting import (
    SortError,
    SortOptions,
    collect_input_files,
    parse_rows,
    read_sources,
    require_csv_name,
    sort_and_write,
    sort_rows,
    tree_sort_rows,
)


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize("name", ["data.csv", "DATA.CSV", "dir/x.y.csv"])
def test_require_csv_name_accepts(name):
    assert require_csv_name(name) == name


@pytest.mark.parametrize("name", ["data.txt", "noextension", "data.Csv"])
def test_require_csv_name_rejects(name):
    with pytest.raises(SortError, match="Output file name must be .csv!"):
        require_csv_name(name, "Output")


def test_parse_rows_splits_and_strips_line_ends():
    rows = list(parse_rows(["b,1\n", "a,2\r\n", "c,3"], 1))
    assert rows == [["b", "1"], ["a", "2"], ["c", "3"]]


def test_parse_rows_stops_at_empty_line():
    rows = list(parse_rows(["x,1\n", "\n", "y,2\n"], 0))
    assert rows == [["x", "1"]]


def test_parse_rows_rejects_changing_width():
    with pytest.raises(SortError, match="Error of count values!"):
        list(parse_rows(["a,b", "a,b,c"], 0))


def test_parse_rows_rejects_missing_column():
    with pytest.raises(SortError, match="Error of count values!"):
        list(parse_rows(["a,b"], 2))


def test_sort_rows_is_lexical():
    assert sort_rows([["9"], ["10"]], 0) == [["10"], ["9"]]


def test_sort_rows_reverse_is_mirror_for_distinct_keys():
    rows = [["c", "1"], ["a", "2"], ["b", "3"]]
    forward = sort_rows(rows, 0)
    backward = sort_rows(rows, 0, reverse=True)
    assert backward == list(reversed(forward))
    assert [row[0] for row in forward] == ["a", "b", "c"]


def test_tree_sort_matches_list_sort():
    rows = [[f"k{n % 7}", str(n)] for n in range(30)]
    assert tree_sort_rows(rows, 0) == sort_rows(rows, 0)
    keys = [row[0] for row in tree_sort_rows(rows, 0, reverse=True)]
    assert keys == sorted(keys, reverse=True)


def test_collect_input_files_console_when_empty():
    assert collect_input_files("", "") == []


def test_collect_input_files_rejects_both():
    with pytest.raises(SortError):
        collect_input_files("dir", "file.csv")


def test_collect_input_files_walks_in_lexical_order(tmp_path):
    _write(tmp_path / "b.csv", "x\n")
    (tmp_path / "a").mkdir()
    _write(tmp_path / "a" / "z.csv", "x\n")
    _write(tmp_path / "c.csv", "x\n")
    found = collect_input_files(str(tmp_path), "")
    assert found == [tmp_path / "a" / "z.csv", tmp_path / "b.csv", tmp_path / "c.csv"]


def test_collect_input_files_single_file(tmp_path):
    target = _write(tmp_path / "one.csv", "x\n")
    assert collect_input_files("", str(target)) == [target]


def test_collect_input_files_missing(tmp_path):
    with pytest.raises(SortError):
        collect_input_files(str(tmp_path / "absent"), "")


def test_options_reject_negative_column():
    with pytest.raises(SortError):
        SortOptions(sort_number=-1)


def test_read_sources_keeps_first_header_only(tmp_path):
    _write(tmp_path / "1.csv", "name,age\nbob,3\n")
    _write(tmp_path / "2.csv", "other,head\namy,4\n")
    header, rows = read_sources(SortOptions(header=True, directory=str(tmp_path)))
    assert header == ["name", "age"]
    assert rows == [["bob", "3"], ["amy", "4"]]


def test_read_sources_rejects_non_csv_file(tmp_path):
    _write(tmp_path / "data.txt", "a\n")
    with pytest.raises(SortError, match="Input file name must be .csv!"):
        read_sources(SortOptions(directory=str(tmp_path)))


def test_read_sources_from_console_writes_prompt():
    prompt = io.StringIO()
    header, rows = read_sources(SortOptions(), stdin=io.StringIO("b\na\n\nz\n"), prompt=prompt)
    assert prompt.getvalue() == "Enter data:\n"
    assert header is None
    assert rows == [["b"], ["a"]]


@pytest.mark.parametrize("use_tree", [True, False])
def test_sort_and_write_to_stream(use_tree):
    out = io.StringIO()
    count = sort_and_write(
        SortOptions(header=True, sort_number=1, use_tree=use_tree),
        stdin=io.StringIO("h1,h2\nx,b\ny,a\nz,c\n"),
        stdout=out,
    )
    assert count == 3
    assert out.getvalue() == "Enter data:\nh1,h2\ny,a\nx,b\nz,c\n"


def test_sort_and_write_to_file(tmp_path):
    source = _write(tmp_path / "in.csv", "b\nc\na\n")
    target = tmp_path / "out.csv"
    out = io.StringIO()
    sort_and_write(SortOptions(reverse=True, input_file=str(source), output_file=str(target)),
                   stdout=out)
    assert target.read_text(encoding="utf-8") == "c\nb\na\n"
    assert out.getvalue() == ""


def test_sort_and_write_rejects_bad_output_name(tmp_path):
    source = _write(tmp_path / "in.csv", "a\n")
    with pytest.raises(SortError, match="Output file name must be .csv!"):
        sort_and_write(SortOptions(input_file=str(source), output_file=str(tmp_path / "o.txt")),
                       stdout=io.StringIO())