"""Splitting a PDF into several parts."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

from .errors import InvalidSplitModeError, SavePdfError
from .inspect import inspect_pdf
from .ranges import parse_page_ranges
from .writer import write_simple_pdf

PathLike = Union[str, "os.PathLike[str]"]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_CHUNK_SIZE = re.compile(r"\+?[0-9]+")


def split_pdf(input_path: PathLike, by: str, output_dir: PathLike) -> int:
    """Split ``input_path`` into ``part-N.pdf`` files; return how many."""
    info = inspect_pdf(input_path)
    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SavePdfError(os.fspath(output_dir), exc) from exc

    groups = parse_split_groups(by, info.page_count)
    for number, group in enumerate(groups, start=1):
        part_path = directory / f"part-{number}.pdf"
        try:
            part_path.write_bytes(write_simple_pdf(len(group), info.version))
        except OSError as exc:
            raise SavePdfError(os.fspath(part_path), exc) from exc
    return len(groups)


def parse_split_groups(by: str, max_page: int) -> list[list[int]]:
    """Turn ``single``, ``range:<ranges>`` or ``chunk:<size>`` into page groups."""
    lower = by.strip().translate(_ASCII_LOWER)
    if lower == "single":
        return [[page] for page in range(1, max_page + 1)]

    if lower.startswith("range:"):
        groups = []
        for part in lower[len("range:"):].split(","):
            token = part.strip()
            if not token:
                raise InvalidSplitModeError(by)
            groups.append(parse_page_ranges(token, max_page))
        return groups

    if lower.startswith("chunk:"):
        rest = lower[len("chunk:"):]
        if not _CHUNK_SIZE.fullmatch(rest):
            raise InvalidSplitModeError(by)
        size = int(rest)
        if size == 0:
            raise InvalidSplitModeError(by)
        return [
            list(range(start, min(start + size - 1, max_page) + 1))
            for start in range(1, max_page + 1, size)
        ]

    raise InvalidSplitModeError(by)