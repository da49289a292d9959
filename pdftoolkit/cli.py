"""Command-line interface and interactive shell for the PDF toolkit."""

from __future__ import annotations

import argparse
import json
import shlex
import sys
from collections.abc import Callable, Sequence
from typing import Any, Optional, TextIO

from .errors import PdfError
from .inspect import inspect_pdf
from .merge import merge_pdfs_with_options
from .ops import (
    create_blank,
    extract_pages,
    remove_pages,
    reorder_pages,
    rotate_pages,
    set_metadata,
)
from .split import split_pdf

Fields = list[tuple[str, Any]]
Outcome = tuple[str, Fields]

_PROMPT = "\x1b[1;36mpdf>\x1b[0m "
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_MERGE_EPILOG = (
    "Examples:\n"
    "  pdf merge a.pdf b.pdf -o merged.pdf\n"
    "  pdf merge a.pdf b.pdf --index -o merged-index.pdf\n"
    "  pdf merge a.pdf b.pdf --index --links=false --outlines=false -o merged-min.pdf\n"
    "\n"
    "Note: --links/--outlines are only effective when --index is enabled."
)
_SPLIT_EPILOG = (
    "Examples:\n"
    "  pdf split input.pdf --by single --output-dir parts\n"
    "  pdf split input.pdf --by range:1-2,4-5 --output-dir parts\n"
    "  pdf split input.pdf --by chunk:3 --output-dir parts"
)


class _UsageError(ValueError):
    """Raised instead of exiting when command-line arguments are invalid."""

    def __init__(self, parser: argparse.ArgumentParser, message: str) -> None:
        super().__init__(message)
        self.parser = parser


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(self, message)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise argparse.ArgumentTypeError(
        f"invalid value '{text}': expected 'true' or 'false'"
    )


def _parse_i32(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in '{text}'") from None
    if not _I32_MIN <= value <= _I32_MAX:
        raise argparse.ArgumentTypeError(f"number '{text}' is out of range")
    return value


# Command handlers: each performs its operation and returns the reported fields.


def _info(args: argparse.Namespace) -> Outcome:
    info = inspect_pdf(args.input)
    return "info", [
        ("version", info.version),
        ("pages", info.page_count),
        ("encrypted", info.encrypted),
        ("title", info.title or ""),
        ("author", info.author or ""),
    ]


def _merge(args: argparse.Namespace) -> Outcome:
    links = args.links if args.index else False
    outlines = args.outlines if args.index else False
    merge_pdfs_with_options(args.inputs, args.output, args.index, links, outlines)
    return "merge", [
        ("merged_pages_source_count", len(args.inputs)),
        ("index", args.index),
        ("links", links),
        ("outlines", outlines),
        ("output", args.output),
    ]


def _extract_pages(args: argparse.Namespace) -> Outcome:
    extract_pages(args.input, args.pages, args.output)
    return "extract-pages", [("extracted_pages", args.pages), ("output", args.output)]


def _remove_pages(args: argparse.Namespace) -> Outcome:
    remove_pages(args.input, args.pages, args.output)
    return "remove-pages", [("removed_pages", args.pages), ("output", args.output)]


def _rotate_pages(args: argparse.Namespace) -> Outcome:
    rotate_pages(args.input, args.pages, args.deg, args.output)
    return "rotate-pages", [
        ("rotated_pages", args.pages),
        ("degrees", args.deg),
        ("output", args.output),
    ]


def _create_blank(args: argparse.Namespace) -> Outcome:
    create_blank(args.size, args.output)
    return "create-blank", [
        ("created", "blank"),
        ("size", args.size),
        ("output", args.output),
    ]


def _set_meta(args: argparse.Namespace) -> Outcome:
    set_metadata(args.input, args.title, args.author, args.output)
    return "set-meta", [("set_meta", True), ("output", args.output)]


def _reorder_pages(args: argparse.Namespace) -> Outcome:
    reorder_pages(args.input, args.order, args.output)
    return "reorder-pages", [("reordered_pages", args.order), ("output", args.output)]


def _split(args: argparse.Namespace) -> Outcome:
    parts = split_pdf(args.input, args.by, args.output_dir)
    return "split", [
        ("split_by", args.by),
        ("parts", parts),
        ("output_dir", args.output_dir),
    ]


def _add_format(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=("text", "json"), default="text")


def _add_output(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--output", required=True)


def _add_command(
    subparsers: Any,
    name: str,
    summary: str,
    handler: Optional[Callable[[argparse.Namespace], Outcome]],
    epilog: Optional[str] = None,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        name,
        help=summary,
        description=summary,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    if handler is not None:
        parser.set_defaults(handler=handler)
    return parser


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all toolkit commands."""
    parser = _Parser(prog="pdf", description="Spec-driven PDF toolkit")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    info = _add_command(commands, "info", "Inspect a PDF file", _info)
    info.add_argument("input")
    _add_format(info)

    merge = _add_command(
        commands, "merge", "Merge PDF files in order", _merge, _MERGE_EPILOG
    )
    merge.add_argument("inputs", nargs="*")
    merge.add_argument("--index", action="store_true", default=False)
    merge.add_argument("--links", type=_parse_bool, default=True, metavar="BOOL")
    merge.add_argument("--outlines", type=_parse_bool, default=True, metavar="BOOL")
    _add_output(merge)
    _add_format(merge)

    extract = _add_command(
        commands, "extract-pages", "Extract a page subset into a new PDF", _extract_pages
    )
    extract.add_argument("input")
    extract.add_argument("--pages", required=True)
    _add_output(extract)
    _add_format(extract)

    remove = _add_command(
        commands, "remove-pages", "Remove selected pages from a PDF", _remove_pages
    )
    remove.add_argument("input")
    remove.add_argument("--pages", required=True)
    _add_output(remove)
    _add_format(remove)

    rotate = _add_command(
        commands, "rotate-pages", "Rotate selected pages in a PDF", _rotate_pages
    )
    rotate.add_argument("input")
    rotate.add_argument("--pages", required=True)
    rotate.add_argument("--deg", type=_parse_i32, required=True)
    _add_output(rotate)
    _add_format(rotate)

    create = _add_command(commands, "create", "PDF creation commands", None)
    create_commands = create.add_subparsers(
        dest="create_command", metavar="COMMAND", required=True
    )
    blank = _add_command(
        create_commands, "blank", "Create a blank single-page PDF", _create_blank
    )
    blank.add_argument("--size", required=True)
    _add_output(blank)
    _add_format(blank)

    meta = _add_command(
        commands, "set-meta", "Set metadata fields on a PDF", _set_meta
    )
    meta.add_argument("input")
    meta.add_argument("--title")
    meta.add_argument("--author")
    _add_output(meta)
    _add_format(meta)

    reorder = _add_command(
        commands,
        "reorder-pages",
        "Reorder pages according to provided order list/ranges",
        _reorder_pages,
    )
    reorder.add_argument("input")
    reorder.add_argument("--order", required=True)
    _add_output(reorder)
    _add_format(reorder)

    split = _add_command(
        commands, "split", "Split PDF into multiple parts", _split, _SPLIT_EPILOG
    )
    split.add_argument("input")
    split.add_argument("--by", required=True)
    split.add_argument("--output-dir", dest="output_dir", required=True)
    _add_format(split)

    return parser


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _emit(command: str, fields: Fields, output_format: str) -> None:
    if output_format == "json":
        payload = {"status": "ok", "command": command, **dict(fields)}
        print(
            json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        )
        return
    print("status=ok")
    print(f"command={command}")
    for key, value in fields:
        print(f"{key}={_text(value)}")


def _run(args: argparse.Namespace) -> None:
    handler = getattr(args, "handler", None)
    if handler is None:
        return
    command, fields = handler(args)
    _emit(command, fields, args.format)


def execute(argv: Sequence[str]) -> None:
    """Parse ``argv`` (without the program name) and run the command it names.

    Raises the toolkit's errors; invalid arguments raise ``ValueError``.
    """
    _run(build_parser().parse_args(list(argv)))


def _print_banner() -> None:
    print("\x1b[1;35m┌──────────────────────────┐\x1b[0m")
    print("\x1b[1;35m│\x1b[0m  ✨ PDF Toolkit Shell ✨  \x1b[1;35m│\x1b[0m")
    print("\x1b[1;35m└──────────────────────────┘\x1b[0m")


def _print_shell_help() -> None:
    print("Shell commands:")
    print("  help        Show this help")
    print("  run <pdf-command>  Execute a command explicitly")
    print("              (plain command input also works)")
    print("  quit, exit  Leave the interactive shell")


def _dispatch_shell_line(line: str) -> None:
    try:
        parts = shlex.split(line)
    except ValueError:
        raise ValueError("failed to parse command line") from None
    if parts:
        execute(parts)


def run_interactive_shell(stdin: Optional[TextIO] = None) -> None:
    """Read commands line by line from ``stdin`` until EOF, ``quit`` or ``exit``."""
    stream = sys.stdin if stdin is None else stdin
    _print_banner()
    print("Type `help` for shell commands, or `quit` to exit.")
    print("Try: info <file.pdf>  |  merge a.pdf b.pdf -o out.pdf")

    while True:
        print(_PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            break
        command = line.strip()
        if not command:
            continue
        if command == "help":
            _print_shell_help()
        elif command in ("exit", "quit"):
            print("Bye!")
            break
        else:
            try:
                _dispatch_shell_line(command)
            except SystemExit:
                continue
            except (PdfError, ValueError) as exc:
                print(f"error[shell_dispatch]: {exc}")
                print("Tip: type `help` for shell commands.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the toolkit; with no command, start the interactive shell."""
    parser = build_parser()
    try:
        args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    except _UsageError as exc:
        exc.parser.print_usage(sys.stderr)
        print(f"{exc.parser.prog}: error: {exc}", file=sys.stderr)
        return 2
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    try:
        if args.command is None:
            run_interactive_shell(sys.stdin)
        else:
            _run(args)
    except PdfError as exc:
        print(f"error[{exc.code()}]: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error[internal]: {exc}", file=sys.stderr)
        return 1
    return 0