"""Parsing of page-range expressions such as ``1,3-5,8``."""

from __future__ import annotations

import re

from .errors import InvalidPageRangeError

_PAGE_NUMBER = re.compile(r"\+?[0-9]+")


def _parse_positive_page(token: str, text: str) -> int:
    if not _PAGE_NUMBER.fullmatch(token):
        raise InvalidPageRangeError(text, f"`{token}` is not a positive page number")
    page = int(token)
    if page == 0:
        raise InvalidPageRangeError(text, "page numbers must start at 1")
    return page


def _check_bound(page: int, max_page: int, text: str) -> None:
    if page > max_page:
        raise InvalidPageRangeError(text, f"page {page} exceeds max page {max_page}")


def parse_page_ranges(text: str, max_page: int) -> list[int]:
    """Parse a comma-separated list of pages and ranges.

    Pages are 1-based, duplicates are dropped keeping first-seen order.
    """
    trimmed = text.strip()
    if not trimmed:
        raise InvalidPageRangeError(text, "range cannot be empty")
    if max_page == 0:
        raise InvalidPageRangeError(text, "max page must be greater than zero")

    result: list[int] = []
    seen: set[int] = set()

    def add(page: int) -> None:
        if page not in seen:
            seen.add(page)
            result.append(page)

    for part in trimmed.split(","):
        token = part.strip()
        if not token:
            raise InvalidPageRangeError(text, "contains empty segment")

        if "-" in token:
            start_s, end_s = token.split("-", 1)
            start = _parse_positive_page(start_s.strip(), text)
            end = _parse_positive_page(end_s.strip(), text)
            if start > end:
                raise InvalidPageRangeError(text, "range start must be <= end")
            _check_bound(end, max_page, text)
            for page in range(start, end + 1):
                add(page)
        else:
            page = _parse_positive_page(token, text)
            _check_bound(page, max_page, text)
            add(page)

    return result