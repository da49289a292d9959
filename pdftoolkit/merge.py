"""Merging several PDF documents, optionally with an index page."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .errors import (
    MergeIndexRequiredForNavOptionsError,
    MergeRequiresMultipleInputsError,
    OpenPdfError,
    SavePdfError,
)
from .inspect import extract_page_rotations, inspect_pdf_bytes
from .navigation import (
    build_link_annotations,
    build_outline_entries,
    write_pdf_with_link_annotations,
    write_pdf_with_outline_entries,
)
from .writer import (
    write_pdf_with_dest_entries,
    write_pdf_with_index_entries,
    write_pdf_with_page_rotations,
)

PathLike = Union[str, "os.PathLike[str]"]

_DEFAULT_VERSION = "1.5"
_LABEL_TRANSLATION = str.maketrans({"(": "[", ")": "]", "|": "_"})


@dataclass
class _MergePlan:
    include_index: bool
    page_total: int = 0
    output_version: str = _DEFAULT_VERSION
    rotations: list[Optional[int]] = field(default_factory=list)
    index_entries: list[tuple[str, int]] = field(default_factory=list)
    dest_entries: list[tuple[str, int, str]] = field(default_factory=list)


def merge_pdfs(inputs: Iterable[PathLike], output: PathLike) -> None:
    """Merge ``inputs`` in order into ``output``."""
    merge_pdfs_with_options(inputs, output, False, False, False)


def merge_pdfs_with_index(
    inputs: Iterable[PathLike], output: PathLike, index: bool
) -> None:
    """Merge with an index page, links and outlines all switched by ``index``."""
    merge_pdfs_with_options(inputs, output, index, index, index)


def merge_pdfs_with_options(
    inputs: Iterable[PathLike],
    output: PathLike,
    index: bool,
    links: bool,
    outlines: bool,
) -> None:
    """Merge ``inputs`` into ``output``; links and outlines require ``index``."""
    if (links or outlines) and not index:
        raise MergeIndexRequiredForNavOptionsError()

    plan = _collect_merge_plan(list(inputs), index)
    data = write_pdf_with_page_rotations(
        plan.page_total, plan.output_version, plan.rotations
    )
    if plan.include_index:
        data = write_pdf_with_index_entries(data, plan.index_entries)
        data = write_pdf_with_dest_entries(data, plan.dest_entries)
        if links:
            data = write_pdf_with_link_annotations(
                data, build_link_annotations(plan.dest_entries)
            )
        if outlines:
            data = write_pdf_with_outline_entries(
                data, build_outline_entries(plan.dest_entries)
            )
    try:
        Path(output).write_bytes(data)
    except OSError as exc:
        raise SavePdfError(os.fspath(output), exc) from exc


def _collect_merge_plan(inputs: list[PathLike], include_index: bool) -> _MergePlan:
    if len(inputs) < 2:
        raise MergeRequiresMultipleInputsError()

    plan = _MergePlan(include_index=include_index)
    running_start = 2 if include_index else 1
    for number, path in enumerate(inputs, start=1):
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise OpenPdfError(os.fspath(path), exc) from exc
        info = inspect_pdf_bytes(path, data)

        if include_index:
            label = _sanitize_marker_label(_input_display_name(path))
            plan.index_entries.append((label, running_start))
            plan.dest_entries.append((f"dest-{number}", running_start, label))
        plan.page_total += info.page_count
        running_start += info.page_count
        if plan.output_version == _DEFAULT_VERSION:
            plan.output_version = info.version

        text = data.decode("utf-8", errors="replace")
        plan.rotations.extend(extract_page_rotations(text))

    if include_index:
        plan.page_total += 1
        plan.rotations.insert(0, None)
    return plan


def _input_display_name(path: PathLike) -> str:
    return Path(path).name or os.fspath(path)


def _sanitize_marker_label(label: str) -> str:
    return label.translate(_LABEL_TRANSLATION)