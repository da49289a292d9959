"""Error types raised by the PDF toolkit, each carrying a stable code."""

from __future__ import annotations


def _describe_os_error(source: BaseException) -> str:
    strerror = getattr(source, "strerror", None)
    return strerror if strerror else str(source)


class PdfError(Exception):
    """Base class for every toolkit error."""

    _code = "pdf_error"

    def code(self) -> str:
        """Return the stable machine-readable error code."""
        return self._code


class OpenPdfError(PdfError):
    _code = "open_pdf"

    def __init__(self, path: str, source: BaseException) -> None:
        self.path = path
        self.source = source
        super().__init__(
            f"failed to open PDF at `{path}`: {_describe_os_error(source)}"
        )


class ParsePdfError(PdfError):
    _code = "parse_pdf"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to parse PDF at `{path}`: {reason}")


class MergeRequiresMultipleInputsError(PdfError):
    _code = "merge_requires_multiple_inputs"

    def __init__(self) -> None:
        super().__init__("merge requires at least two input files")


class SavePdfError(PdfError):
    _code = "save_pdf"

    def __init__(self, path: str, source: BaseException) -> None:
        self.path = path
        self.source = source
        super().__init__(
            f"failed to save merged PDF to `{path}`: {_describe_os_error(source)}"
        )


class InvalidPageRangeError(PdfError):
    _code = "invalid_page_range"

    def __init__(self, text: str, reason: str) -> None:
        self.input = text
        self.reason = reason
        super().__init__(f"invalid page range `{text}`: {reason}")


class RemoveAllPagesForbiddenError(PdfError):
    _code = "remove_all_pages_forbidden"

    def __init__(self) -> None:
        super().__init__("remove-pages would remove all pages from the document")


class InvalidRotationDegreesError(PdfError):
    _code = "invalid_rotation_degrees"

    def __init__(self, degrees: int) -> None:
        self.degrees = degrees
        super().__init__(
            f"invalid rotation degrees `{degrees}`: allowed values are 90, 180, 270"
        )


class InvalidBlankSizeError(PdfError):
    _code = "invalid_blank_size"

    def __init__(self, size: str) -> None:
        self.size = size
        super().__init__(
            f"invalid blank page size `{size}`; expected A4, Letter, or WxH (e.g., 400x300)"
        )


class MetadataRequiresFieldError(PdfError):
    _code = "metadata_requires_field"

    def __init__(self) -> None:
        super().__init__(
            "set-meta requires at least one metadata field (title or author)"
        )


class InvalidSplitModeError(PdfError):
    _code = "invalid_split_mode"

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(
            f"invalid split mode `{mode}`; expected `single`, `range:<ranges>`, or `chunk:<size>`"
        )


class MergeIndexRequiredForNavOptionsError(PdfError):
    _code = "merge_index_required_for_nav_options"

    def __init__(self) -> None:
        super().__init__("merge options `--links` or `--outlines` require `--index`")