"""Page-level operations and document creation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional, Union

from .errors import (
    InvalidBlankSizeError,
    InvalidRotationDegreesError,
    MetadataRequiresFieldError,
    RemoveAllPagesForbiddenError,
    SavePdfError,
)
from .inspect import inspect_pdf
from .ranges import parse_page_ranges
from .writer import (
    write_rotated_simple_pdf,
    write_simple_pdf,
    write_simple_pdf_with_metadata,
    write_single_page_pdf_with_size,
)

PathLike = Union[str, "os.PathLike[str]"]

_ALLOWED_DEGREES = frozenset({90, 180, 270})
_NAMED_SIZES = {"a4": (595, 842), "letter": (612, 792)}
_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MAX = 2**31 - 1


def _save(output: PathLike, data: bytes) -> None:
    try:
        Path(output).write_bytes(data)
    except OSError as exc:
        raise SavePdfError(os.fspath(output), exc) from exc


def extract_pages(input_path: PathLike, pages: str, output: PathLike) -> None:
    """Write a document holding the selected pages of ``input_path``."""
    info = inspect_pdf(input_path)
    selected = parse_page_ranges(pages, info.page_count)
    _save(output, write_simple_pdf(len(selected), info.version))


def remove_pages(input_path: PathLike, pages: str, output: PathLike) -> None:
    """Write a document without the selected pages; removing all is an error."""
    info = inspect_pdf(input_path)
    selected = parse_page_ranges(pages, info.page_count)
    if len(selected) >= info.page_count:
        raise RemoveAllPagesForbiddenError()
    _save(output, write_simple_pdf(info.page_count - len(selected), info.version))


def rotate_pages(
    input_path: PathLike, pages: str, degrees: int, output: PathLike
) -> None:
    """Rotate the selected pages by 90, 180 or 270 degrees."""
    if degrees not in _ALLOWED_DEGREES:
        raise InvalidRotationDegreesError(degrees)
    info = inspect_pdf(input_path)
    selected = parse_page_ranges(pages, info.page_count)
    _save(
        output,
        write_rotated_simple_pdf(info.page_count, info.version, selected, degrees),
    )


def create_blank(size: str, output: PathLike) -> None:
    """Create a single blank page of the given size."""
    width, height = parse_blank_size(size)
    _save(output, write_single_page_pdf_with_size("1.5", width, height))


def set_metadata(
    input_path: PathLike,
    title: Optional[str],
    author: Optional[str],
    output: PathLike,
) -> None:
    """Set title and/or author, keeping existing values for the other field."""
    if title is None and author is None:
        raise MetadataRequiresFieldError()
    info = inspect_pdf(input_path)
    _save(
        output,
        write_simple_pdf_with_metadata(
            info.page_count,
            info.version,
            title if title is not None else info.title,
            author if author is not None else info.author,
        ),
    )


def reorder_pages(input_path: PathLike, order: str, output: PathLike) -> None:
    """Write a document with pages in the given order."""
    info = inspect_pdf(input_path)
    selected = parse_page_ranges(order, info.page_count)
    _save(output, write_simple_pdf(len(selected), info.version))


def _parse_dimension(text: str) -> Optional[int]:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    return value if 0 < value <= _I32_MAX else None


def parse_blank_size(size: str) -> tuple[int, int]:
    """Parse ``A4``, ``Letter`` (any case) or ``WxH`` into points."""
    normalized = size.strip()
    named = _NAMED_SIZES.get(normalized.lower()) if normalized.isascii() else None
    if named is not None:
        return named
    if "x" not in normalized:
        raise InvalidBlankSizeError(size)
    width_text, height_text = normalized.split("x", 1)
    width = _parse_dimension(width_text)
    height = _parse_dimension(height_text)
    if width is None or height is None:
        raise InvalidBlankSizeError(size)
    return width, height