# pdftoolkit

A small command-line toolkit for working with simple PDF files: inspect a
document, merge several into one, extract, remove, rotate or reorder pages,
split a file into parts, set title and author, and create blank pages.

It has no dependencies beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

This installs the `pdf` command.

## Usage

Inspect a file. The report gives the header version, the number of page
objects, whether an `/Encrypt` entry is present, and the title and author:

```
pdf info report.pdf
pdf info report.pdf --format json
```

Merge two or more files in order, optionally with a leading index page:

```
pdf merge a.pdf b.pdf -o merged.pdf
pdf merge a.pdf b.pdf --index -o merged-index.pdf
pdf merge a.pdf b.pdf --index --links=false --outlines=false -o merged-min.pdf
```

`--links` and `--outlines` take `true` or `false` (both default to `true`)
and only take effect together with `--index`. With `--index`, the output
records one index entry and one destination per input file, labelled with the
file name (`(` and `)` become `[` and `]`, `|` becomes `_`), plus link and
outline entries when those are switched on. Page rotations of the inputs are
kept.

Work with pages. A page selection is a comma-separated list of page numbers
and inclusive ranges such as `1,3-5,8`. Pages start at 1, may not exceed the
document's page count, and a page listed more than once counts only the first
time:

```
pdf extract-pages input.pdf --pages 2,4-5 -o subset.pdf
pdf remove-pages input.pdf --pages 2,4 -o trimmed.pdf
pdf rotate-pages input.pdf --pages 1-2 --deg 90 -o rotated.pdf
pdf reorder-pages input.pdf --order 4,2,1,3 -o reordered.pdf
```

Rotation accepts 90, 180 or 270 degrees. Removing every page is refused.

Split a file into `part-1.pdf`, `part-2.pdf`, … inside a directory, which is
created if needed. The mode name is case-insensitive:

```
pdf split input.pdf --by single --output-dir parts
pdf split input.pdf --by range:1-2,4-5 --output-dir parts
pdf split input.pdf --by chunk:3 --output-dir parts
```

Set metadata (at least one of `--title` and `--author`; a field not given
keeps its existing value):

```
pdf set-meta input.pdf --title "Quarterly Report" --author "Example Author" -o out.pdf
```

Create a blank single-page document, sized `A4`, `Letter` (either in any
case) or `WxH` in points with positive integers:

```
pdf create blank --size A4 -o blank.pdf
pdf create blank --size 400x300 -o custom.pdf
```

Every command prints `key=value` lines by default, starting with `status=ok`
and `command=<name>`, or a single JSON object with `--format json`.

## Interactive shell

Running `pdf` with no arguments opens an interactive shell. Type any of the
commands above without the leading `pdf`, `help` for a short summary, and
`quit` or `exit` (or end of input) to leave. A failing command prints
`error[shell_dispatch]: <message>` and the shell carries on.

## Errors

On failure a command exits with status 1 and prints a line of the form
`error[<code>]: <message>` on standard error, for example
`error[open_pdf]: failed to open PDF at ...` or
`error[invalid_split_mode]: invalid split mode ...`. Invalid command-line
arguments print a usage message and exit with status 2.

## Library use

The operations are also available from Python:

```python
from pdftoolkit.inspect import inspect_pdf
from pdftoolkit.ranges import parse_page_ranges
from pdftoolkit.merge import merge_pdfs
from pdftoolkit.writer import write_simple_pdf

with open("three-pages.pdf", "wb") as handle:
    handle.write(write_simple_pdf(3, "1.5"))

info = inspect_pdf("three-pages.pdf")
print(info.version, info.page_count)  # 1.5 3

print(parse_page_ranges("1,3-5,8", 10))  # [1, 3, 4, 5, 8]

merge_pdfs(["a.pdf", "b.pdf"], "merged.pdf")
```

The modules are `inspect` (`inspect_pdf`, `PdfInfo`), `ranges`
(`parse_page_ranges`), `merge` (`merge_pdfs`, `merge_pdfs_with_index`,
`merge_pdfs_with_options`), `ops` (`extract_pages`, `remove_pages`,
`rotate_pages`, `reorder_pages`, `set_metadata`, `create_blank`), `split`
(`split_pdf`), `writer` and `navigation` for the generated documents, and
`cli` for the command line.

Failures raise subclasses of `pdftoolkit.errors.PdfError`, whose `code()`
method returns the same stable code the command line prints.

## What it does not do

This is not a general PDF library. Files are read by scanning their text for
the header, `/Type /Page` objects, `/Title (...)`, `/Author (...)`,
`/Rotate` and `/Encrypt`; there is no parsing of object streams, compressed
data or cross-reference tables, and no decryption.

Every file it writes is a freshly generated document of blank 200×200 pages
(or one blank page of the chosen size for `create blank`). Page content,
fonts and images are not copied: extract, remove, reorder and split produce
the right number of blank pages, rotate and merge carry over page rotations,
and set-meta appends title and author entries. The index, link and outline
entries written by `merge --index` are plain text markers, not real PDF
annotations or outlines.