import pytest

from pdftoolkit.errors import (
    MergeIndexRequiredForNavOptionsError,
    MergeRequiresMultipleInputsError,
    OpenPdfError,
    SavePdfError,
)
from pdftoolkit.inspect import inspect_pdf
from pdftoolkit.merge import merge_pdfs, merge_pdfs_with_index, merge_pdfs_with_options
from pdftoolkit.ops import rotate_pages
from pdftoolkit.writer import write_simple_pdf


def write_pdf_pages(path, pages, version="1.5"):
    path.write_bytes(write_simple_pdf(pages, version))
    return path


def test_merge_two_single_page_pdfs(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    b = write_pdf_pages(tmp_path / "b.pdf", 1)
    output = tmp_path / "merged.pdf"
    merge_pdfs([a, b], output)
    assert inspect_pdf(output).page_count == 2


def test_merge_fails_when_any_input_is_missing(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    missing = tmp_path / "missing.pdf"
    output = tmp_path / "merged.pdf"
    with pytest.raises(OpenPdfError) as info:
        merge_pdfs([a, missing], output)
    assert info.value.code() == "open_pdf"
    assert not output.exists()


def test_merge_requires_two_inputs(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    with pytest.raises(MergeRequiresMultipleInputsError):
        merge_pdfs([a], tmp_path / "merged.pdf")


def test_merge_preserves_page_rotation(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    b_raw = write_pdf_pages(tmp_path / "b-raw.pdf", 1)
    b = tmp_path / "b-rotated.pdf"
    rotate_pages(b_raw, "1", 90, b)
    output = tmp_path / "merged.pdf"
    merge_pdfs([a, b], output)
    assert "/Rotate 90" in output.read_text()


def test_merge_with_index_prepends_index_page_and_entries(tmp_path):
    a = write_pdf_pages(tmp_path / "chapter-a.pdf", 2)
    b = write_pdf_pages(tmp_path / "chapter-b.pdf", 1)
    output = tmp_path / "merged-index.pdf"
    merge_pdfs_with_options([a, b], output, True, True, True)
    merged = output.read_text()
    assert inspect_pdf(output).page_count == 4
    assert "/IndexEntry (chapter-a.pdf|2)" in merged
    assert "/IndexEntry (chapter-b.pdf|4)" in merged
    assert "/DestEntry (dest-1|2|chapter-a.pdf)" in merged
    assert "/DestEntry (dest-2|4|chapter-b.pdf)" in merged
    assert "/LinkAnnot (index-1|dest-1|chapter-a.pdf)" in merged
    assert "/LinkAnnot (index-2|dest-2|chapter-b.pdf)" in merged
    assert "/OutlineEntry (outline-1|dest-1|chapter-a.pdf)" in merged
    assert "/OutlineEntry (outline-2|dest-2|chapter-b.pdf)" in merged


def test_merge_with_index_helper_enables_everything(tmp_path):
    a = write_pdf_pages(tmp_path / "chapter-a.pdf", 2)
    b = write_pdf_pages(tmp_path / "chapter-b.pdf", 1)
    output = tmp_path / "merged.pdf"
    merge_pdfs_with_index([a, b], output, True)
    merged = output.read_text()
    assert "/LinkAnnot (index-1|dest-1|chapter-a.pdf)" in merged
    assert "/OutlineEntry (outline-2|dest-2|chapter-b.pdf)" in merged


def test_merge_with_index_links_and_outlines_can_be_disabled(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    b = write_pdf_pages(tmp_path / "b.pdf", 1)
    output = tmp_path / "merged-index-basic.pdf"
    merge_pdfs_with_options([a, b], output, True, False, False)
    merged = output.read_text()
    assert "/IndexEntry (a.pdf|2)" in merged
    assert "/DestEntry (dest-1|2|a.pdf)" in merged
    assert "/LinkAnnot (index-1|dest-1|a.pdf)" not in merged
    assert "/OutlineEntry (outline-1|dest-1|a.pdf)" not in merged


def test_merge_without_index_has_no_markers(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    b = write_pdf_pages(tmp_path / "b.pdf", 1)
    output = tmp_path / "merged.pdf"
    merge_pdfs_with_index([a, b], output, False)
    merged = output.read_text()
    assert "/IndexEntry" not in merged
    assert "/DestEntry" not in merged
    assert inspect_pdf(output).page_count == 2


def test_merge_with_index_sanitizes_marker_labels(tmp_path):
    a = write_pdf_pages(tmp_path / "chap(1)|a.pdf", 1)
    b = write_pdf_pages(tmp_path / "b).pdf", 1)
    output = tmp_path / "merged-sanitized.pdf"
    merge_pdfs_with_index([a, b], output, True)
    merged = output.read_text()
    assert "/IndexEntry (chap[1]_a.pdf|2)" in merged
    assert "/DestEntry (dest-1|2|chap[1]_a.pdf)" in merged
    assert "/LinkAnnot (index-1|dest-1|chap[1]_a.pdf)" in merged
    assert "/OutlineEntry (outline-1|dest-1|chap[1]_a.pdf)" in merged


@pytest.mark.parametrize("links,outlines", [(True, False), (False, True), (True, True)])
def test_nav_options_require_index(tmp_path, links, outlines):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    b = write_pdf_pages(tmp_path / "b.pdf", 1)
    with pytest.raises(MergeIndexRequiredForNavOptionsError):
        merge_pdfs_with_options([a, b], tmp_path / "out.pdf", False, links, outlines)


def test_merge_adopts_first_non_default_version(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1, "1.5")
    b = write_pdf_pages(tmp_path / "b.pdf", 1, "1.7")
    output = tmp_path / "merged.pdf"
    merge_pdfs([a, b], output)
    assert inspect_pdf(output).version == "1.7"


def test_merge_reports_save_failure(tmp_path):
    a = write_pdf_pages(tmp_path / "a.pdf", 1)
    b = write_pdf_pages(tmp_path / "b.pdf", 1)
    with pytest.raises(SavePdfError) as info:
        merge_pdfs([a, b], tmp_path / "no-such-dir" / "merged.pdf")
    assert info.value.code() == "save_pdf"


def test_legacy_merge_smoke_case(tmp_path):
    inputs = [write_pdf_pages(tmp_path / f"in{n}.pdf", 1) for n in range(3)]
    output = tmp_path / "merged.pdf"
    merge_pdfs(inputs, output)
    assert inspect_pdf(output).page_count == len(inputs)