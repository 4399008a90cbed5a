# csvtreesort

Sort comma-separated rows by one of their columns. Rows come from standard
input, from a single `.csv` file, or from every file under a directory. The
sorted result goes to standard output or to a `.csv` file.

There are two algorithms to choose from:

1. the standard library sort;
2. a binary tree sort (the default).

## Installation

```
pip install .
```

## Usage

```
csvtreesort [-i FILE | -d DIR] [-o FILE] [-h] [-r] [-f N] [-a N] [--help]
```

| Option | Meaning |
| ------ | ------- |
| `-i FILE` | Read rows from `FILE`, which must end in `.csv` or `.CSV`. |
| `-d DIR` | Read rows from every file under `DIR`, subdirectories included, in lexical order. Every file must end in `.csv` or `.CSV`. Cannot be used together with `-i`. |
| `-o FILE` | Write the sorted rows to `FILE`, which must end in `.csv` or `.CSV`. Standard output is used when this is missing. |
| `-h` | The first line of each input is a header. It is kept out of the sort; the first header read is written before the rows. |
| `-r` | Sort in reverse order. |
| `-f N` | Sort by column `N`, counted from 0. The default is 0. |
| `-a N` | `1` uses the library sort and `2` uses the tree sort. The default is 2. Any other value is an error. |
| `--help` | Show the help text and exit. |

When there is neither `-i` nor `-d`, the program prints `Enter data:` to
standard output and reads lines from standard input until it reaches an empty
line or the end of input. Pressing Ctrl-C while rows are being read stops the
input, and the rows read so far are sorted and written.

Columns are compared as plain strings. Every row must have the same number of
fields, and that number must be large enough to hold column `N`. Otherwise the
program prints an error to standard error and exits with status 1; the same
happens for a wrong file extension, a missing file, or `-i` and `-d` used
together.

### Example

```
$ printf 'name,age\nbob,31\nalice,27\n' > people.csv
$ csvtreesort -i people.csv -h -f 0
name,age
alice,27
bob,31
```

## Generating test data

```
csvtreesort-generate [-o FILE] [-n COUNT]
```

This writes `COUNT` rows shaped like `f0,s0,t0`, `f1,s1,t1`, ... to `FILE` and
prints the file's size in bytes. By default it writes 1,000,000 rows to
`GeneratedFile.csv`. Use it to measure how the two algorithms perform.

## Use as a library

```python
from csvtreesort.tree import BinaryTree, stringify_row
from csvtreesort.sorted_list import SortedRowList
from csvtreesort.sorting import SortOptions, sort_and_write, sort_rows, tree_sort_rows

rows = [["b", "2"], ["a", "1"]]
tree_sort_rows(rows, 0, False)   # [["a", "1"], ["b", "2"]]
sort_rows(rows, 1, True)         # [["b", "2"], ["a", "1"]]
stringify_row(["a", "1"])        # "a,1\n"

tree = BinaryTree(0)
for row in rows:
    tree.insert(row)
list(tree.rows(reverse=True))    # [["b", "2"], ["a", "1"]]

ordered = SortedRowList(0)
ordered.extend(rows)
list(ordered)                    # [["a", "1"], ["b", "2"]]

sort_and_write(SortOptions(input_file="people.csv", header=True))
```

- `BinaryTree` keeps rows with equal keys in insertion order for an ascending
  walk.
- `SortedRowList` keeps its rows sorted as they are added; a new row goes before
  existing rows with an equal key.
- `sort_and_write` raises `SortError` where the command prints an error, and
  returns the number of rows sorted.
- `csvtreesort.generator` offers `generate_lines`, `write_lines` and
  `generate_file` for producing sample data.