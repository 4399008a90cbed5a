"""Read CSV rows from files or standard input, sort them by one column and write them out."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from csvtreesort.tree import BinaryTree, stringify_row

logger = logging.getLogger(__name__)

PROMPT = "Enter data:\n"


class SortError(Exception):
    """Raised when input, output or options make sorting impossible."""


@dataclass(frozen=True)
class SortOptions:
    """Settings for one sorting run."""

    sort_number: int = 0
    header: bool = False
    reverse: bool = False
    use_tree: bool = True
    input_file: str = ""
    directory: str = ""
    output_file: str = ""

    def __post_init__(self) -> None:
        if self.sort_number < 0:
            raise SortError("Column number must not be negative!")
        if self.input_file and self.directory:
            raise SortError("Don't use 2 options -i and -d!!!")


def _walk(path: Path) -> Iterator[Path]:
    if not path.is_dir():
        yield path
        return
    for name in sorted(os.listdir(path)):
        yield from _walk(path / name)


def collect_input_files(directory: str = "", input_file: str = "") -> list[Path]:
    """Return every regular file under ``directory`` or ``input_file``, in lexical order.

    An empty list means that input comes from the console.
    """
    if directory and input_file:
        raise SortError("Don't use 2 options -i and -d!!!")
    root = directory or input_file
    if not root:
        return []
    path = Path(root)
    if not path.exists():
        raise SortError(f"No such file or directory: {root}")
    try:
        return list(_walk(path))
    except OSError as exc:
        raise SortError(str(exc)) from exc


def require_csv_name(name: str, what: str = "Input") -> str:
    """Return ``name`` if its extension is csv or CSV, otherwise raise SortError."""
    extension = str(name).split(".")[-1]
    if extension not in ("csv", "CSV"):
        raise SortError(f"{what} file name must be .csv!")
    return name


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_rows(lines: Iterable[str], sort_number: int = 0) -> Iterator[list[str]]:
    """Split lines into fields until the first empty line.

    Every row must have as many fields as the first one and hold the sort column.
    """
    width: Optional[int] = None
    for raw in lines:
        line = _strip_eol(raw)
        if line == "":
            break
        row = line.split(",")
        if (width is not None and width != len(row)) or len(row) - 1 < sort_number:
            raise SortError("Error of count values!")
        width = len(row)
        yield row


def sort_rows(rows: Iterable[Sequence[str]], sort_number: int = 0,
              reverse: bool = False) -> list[list[str]]:
    """Sort rows by the text of one column."""
    return sorted((list(row) for row in rows),
                  key=lambda row: row[sort_number], reverse=reverse)


def tree_sort_rows(rows: Iterable[Sequence[str]], sort_number: int = 0,
                   reverse: bool = False) -> list[list[str]]:
    """Sort rows by one column through a binary search tree."""
    tree = BinaryTree(sort_number)
    for row in rows:
        tree.insert(row)
    return list(tree.rows(reverse))


def _read_stream(stream: TextIO, options: SortOptions,
                 header: Optional[list[str]], rows: list[list[str]]) -> Optional[list[str]]:
    lines = iter(stream)
    if options.header:
        first = next(lines, None)
        if header is None and first is not None:
            header = _strip_eol(first).split(",")
    try:
        for row in parse_rows(lines, options.sort_number):
            rows.append(row)
    except KeyboardInterrupt:
        logger.info("Input interrupted; sorting what was read")
    return header


def read_sources(options: SortOptions, stdin: Optional[TextIO] = None,
                 prompt: Optional[TextIO] = None) -> tuple[Optional[list[str]], list[list[str]]]:
    """Read the header (if wanted) and all rows from the configured inputs.

    With no input file or directory, rows come from ``stdin``; the prompt is
    written to ``prompt`` first when one is given. Only the first header is kept.
    """
    paths = collect_input_files(options.directory, options.input_file)
    header: Optional[list[str]] = None
    rows: list[list[str]] = []
    if not paths:
        stream = sys.stdin if stdin is None else stdin
        if prompt is not None:
            prompt.write(PROMPT)
        header = _read_stream(stream, options, header, rows)
        return header, rows

    for path in paths:
        require_csv_name(str(path), "Input")
        try:
            handle = open(path, encoding="utf-8", newline="")
        except OSError as exc:
            raise SortError(str(exc)) from exc
        with handle:
            header = _read_stream(handle, options, header, rows)
    return header, rows


def _emit(out: TextIO, header: Optional[list[str]], rows: Iterable[Sequence[str]]) -> None:
    if header is not None:
        out.write(stringify_row(header))
    for row in rows:
        out.write(stringify_row(row))


def sort_and_write(options: SortOptions, stdin: Optional[TextIO] = None,
                   stdout: Optional[TextIO] = None) -> int:
    """Read, sort and write rows as ``options`` describe; return the number of rows sorted."""
    out = sys.stdout if stdout is None else stdout
    if options.output_file:
        require_csv_name(options.output_file, "Output")

    header, rows = read_sources(options, stdin=stdin, prompt=out)
    sorter = tree_sort_rows if options.use_tree else sort_rows
    ordered = sorter(rows, options.sort_number, options.reverse)

    if options.output_file:
        try:
            handle = open(options.output_file, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise SortError(str(exc)) from exc
        with handle:
            _emit(handle, header, ordered)
    else:
        _emit(out, header, ordered)
    return len(ordered)