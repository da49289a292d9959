"""Link-annotation and outline markers for merged documents with an index."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

DestEntry = tuple[str, int, str]
NavEntry = tuple[str, str, str]


def _build_entries(prefix: str, dest_entries: Sequence[DestEntry]) -> list[NavEntry]:
    return [
        (f"{prefix}-{number}", dest_name, label)
        for number, (dest_name, _page, label) in enumerate(dest_entries, start=1)
    ]


def _append_markers(data: bytes, marker: str, entries: Iterable[NavEntry]) -> bytes:
    suffix = "".join(
        f"\n/{marker} ({name}|{dest_name}|{label})"
        for name, dest_name, label in entries
    )
    return bytes(data) + suffix.encode()


def build_link_annotations(dest_entries: Sequence[DestEntry]) -> list[NavEntry]:
    """Pair each destination with a numbered ``index-N`` link name."""
    return _build_entries("index", dest_entries)


def write_pdf_with_link_annotations(data: bytes, links: Iterable[NavEntry]) -> bytes:
    """Append ``/LinkAnnot (index|dest|label)`` markers."""
    return _append_markers(data, "LinkAnnot", links)


def build_outline_entries(dest_entries: Sequence[DestEntry]) -> list[NavEntry]:
    """Pair each destination with a numbered ``outline-N`` entry name."""
    return _build_entries("outline", dest_entries)


def write_pdf_with_outline_entries(data: bytes, outlines: Iterable[NavEntry]) -> bytes:
    """Append ``/OutlineEntry (outline|dest|label)`` markers."""
    return _append_markers(data, "OutlineEntry", outlines)