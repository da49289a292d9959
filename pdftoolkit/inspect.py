"""Inspection of PDF files produced or understood by the toolkit."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import OpenPdfError, ParsePdfError

_PAGE_MARKER = re.compile(r"/Type /Page(?!s)")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class PdfInfo:
    """Summary of a PDF document."""

    version: str
    page_count: int
    encrypted: bool
    title: Optional[str] = None
    author: Optional[str] = None


def inspect_pdf(path: PathLike) -> PdfInfo:
    """Read and summarise the PDF at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise OpenPdfError(os.fspath(path), exc) from exc
    return inspect_pdf_bytes(path, data)


def inspect_pdf_bytes(path: PathLike, data: bytes) -> PdfInfo:
    """Summarise PDF ``data``; ``path`` is used only in error messages."""
    text = bytes(data).decode("utf-8", errors="replace")
    version = _extract_version(text)
    if version is None:
        raise ParsePdfError(os.fspath(path), "missing PDF header")

    page_count = _count_pages(text)
    if page_count == 0:
        raise ParsePdfError(os.fspath(path), "no page objects found")

    return PdfInfo(
        version=version,
        page_count=page_count,
        encrypted="/Encrypt" in text,
        title=_extract_info_value(text, "Title"),
        author=_extract_info_value(text, "Author"),
    )


def _extract_version(text: str) -> Optional[str]:
    if not text:
        return None
    first_line = text.split("\n", 1)[0]
    if first_line.endswith("\r"):
        first_line = first_line[:-1]
    if not first_line.startswith("%PDF-"):
        return None
    version = first_line[len("%PDF-"):].strip()
    return version or None


def _count_pages(text: str) -> int:
    return sum(1 for _ in _PAGE_MARKER.finditer(text))


def _extract_info_value(text: str, key: str) -> Optional[str]:
    token = f"/{key} ("
    start = text.find(token)
    if start < 0:
        return None
    rest = text[start + len(token):]
    end = rest.find(")")
    if end < 0:
        return None
    value = rest[:end].strip()
    return value or None


def _extract_rotation_value(page_obj: str) -> Optional[int]:
    token = "/Rotate "
    start = page_obj.find(token)
    if start < 0:
        return None
    words = page_obj[start + len(token):].split()
    if not words or not _INTEGER.fullmatch(words[0]):
        return None
    value = int(words[0])
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


def extract_page_rotations(text: str) -> list[Optional[int]]:
    """Return the rotation of each page object in order, ``None`` where unset."""
    return [
        _extract_rotation_value(obj)
        for obj in text.split("endobj")
        if "/Type /Page" in obj and "/Type /Pages" not in obj
    ]