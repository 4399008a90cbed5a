"""Command line front end for sorting CSV rows."""

from __future__ import annotations

import argparse
import sys

from csvtreesort.sorting import SortError, SortOptions, sort_and_write


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvtreesort",
        description="Sort CSV lines by one column.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-i", dest="input_file", default="",
                        help="use the file with this name as input")
    parser.add_argument("-o", dest="output_file", default="",
                        help="use the file with this name as output")
    parser.add_argument("-h", dest="header", action="store_true",
                        help="the first line is a header that is not sorted but is written out")
    parser.add_argument("-r", dest="reverse", action="store_true",
                        help="sort lines in reverse order")
    parser.add_argument("-f", dest="sort_number", type=int, default=0,
                        help="sort lines by value number N")
    parser.add_argument("-a", dest="algorithm", type=int, default=2,
                        help="1 sorts a list of rows, 2 uses tree sort")
    parser.add_argument("-d", dest="directory", default="",
                        help="read every file in this directory as input")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.algorithm not in (1, 2):
        print("Bad flag 'a'", file=sys.stderr)
        return 1
    if args.directory and args.input_file:
        print("Don't use 2 options -i and -d!!!", file=sys.stderr)
        return 1

    try:
        options = SortOptions(
            sort_number=args.sort_number,
            header=args.header,
            reverse=args.reverse,
            use_tree=args.algorithm == 2,
            input_file=args.input_file,
            directory=args.directory,
            output_file=args.output_file,
        )
        sort_and_write(options)
    except SortError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())