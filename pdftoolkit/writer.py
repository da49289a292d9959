"""Generation of minimal PDF documents and appended marker entries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

_CATALOG = "1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n"


def _assemble(version: str, objects: Iterable[str]) -> bytes:
    out = bytearray(f"%PDF-{version}\n".encode())
    offsets: list[int] = []
    for obj in objects:
        offsets.append(len(out))
        out += obj.encode()
    xref_start = len(out)
    size = len(offsets) + 1
    out += f"xref\n0 {size}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Root 1 0 R /Size {size} >>\nstartxref\n{xref_start}\n%%EOF\n"
    ).encode()
    return bytes(out)


def write_pdf_with_page_rotations(
    page_count: int, version: str, rotations: Sequence[Optional[int]]
) -> bytes:
    """Write a document of blank pages, rotating those with a given angle."""
    page_ids = range(3, 3 + page_count)
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)
    objects = [
        _CATALOG,
        f"2 0 obj\n<< /Type /Pages /Kids [{kids}] /Count {page_count} >>\nendobj\n",
    ]
    for index, page_id in enumerate(page_ids):
        degrees = rotations[index] if index < len(rotations) else None
        rotate = f" /Rotate {degrees}" if degrees is not None else ""
        objects.append(
            f"{page_id} 0 obj\n<< /Type /Page /Parent 2 0 R "
            f"/MediaBox [0 0 200 200]{rotate} >>\nendobj\n"
        )
    return _assemble(version, objects)


def write_rotated_simple_pdf(
    page_count: int, version: str, rotated_pages: Iterable[int], degrees: int
) -> bytes:
    """Write a document where the given 1-based pages carry a rotation."""
    rotations: list[Optional[int]] = [None] * page_count
    for page in rotated_pages:
        if 1 <= page <= page_count:
            rotations[page - 1] = degrees
    return write_pdf_with_page_rotations(page_count, version, rotations)


def write_simple_pdf_with_metadata(
    page_count: int, version: str, title: Optional[str], author: Optional[str]
) -> bytes:
    """Write a plain document followed by optional title and author entries."""
    data = write_rotated_simple_pdf(page_count, version, (), 0)
    suffix = ""
    if title is not None:
        suffix += f"\n/Title ({title})"
    if author is not None:
        suffix += f"\n/Author ({author})"
    return data + suffix.encode()


def write_simple_pdf(page_count: int, version: str) -> bytes:
    """Write a document with the given number of blank pages."""
    return write_simple_pdf_with_metadata(page_count, version, None, None)


def write_single_page_pdf_with_size(version: str, width: int, height: int) -> bytes:
    """Write a one-page document with a custom media box."""
    objects = [
        _CATALOG,
        "2 0 obj\n<< /Type /Pages /Kids [3 0 R] /Count 1 >>\nendobj\n",
        f"3 0 obj\n<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {width} {height}] >>\nendobj\n",
    ]
    return _assemble(version, objects)


def write_pdf_with_index_entries(
    data: bytes, entries: Iterable[tuple[str, int]]
) -> bytes:
    """Append ``/IndexEntry (name|start)`` markers."""
    suffix = "".join(f"\n/IndexEntry ({name}|{start})" for name, start in entries)
    return bytes(data) + suffix.encode()


def write_pdf_with_dest_entries(
    data: bytes, entries: Iterable[tuple[str, int, str]]
) -> bytes:
    """Append ``/DestEntry (name|page|label)`` markers."""
    suffix = "".join(
        f"\n/DestEntry ({name}|{page}|{label})" for name, page, label in entries
    )
    return bytes(data) + suffix.encode()