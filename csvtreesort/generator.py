"""Generate a large sample CSV file for sorting experiments."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_FILE_NAME = "GeneratedFile.csv"
COUNT_LINES = 1_000_000


def generate_lines(count: int) -> Iterator[str]:
    """Yield ``count`` lines of the form ``f<i>,s<i>,t<i>``."""
    if count < 0:
        raise ValueError("count must not be negative")
    for i in range(count):
        yield f"f{i},s{i},t{i}"


def write_lines(path: str | os.PathLike[str], lines: Iterable[str]) -> None:
    """Write each line followed by a newline to ``path``."""
    with open(path, "w", encoding="utf-8", newline="") as out:
        for line in lines:
            out.write(line + "\n")


def generate_file(path: str | os.PathLike[str] = DEFAULT_FILE_NAME,
                  count: int = COUNT_LINES) -> int:
    """Write a generated file and return its size in bytes."""
    write_lines(path, generate_lines(count))
    return Path(path).stat().st_size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a sample CSV file.")
    parser.add_argument("-o", "--output", default=DEFAULT_FILE_NAME,
                        help="name of the file to write")
    parser.add_argument("-n", "--count", type=int, default=COUNT_LINES,
                        help="number of lines to generate")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("count must not be negative")
    print(generate_file(args.output, args.count))
    return 0