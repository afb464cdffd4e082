"""
Cursor pagination for endpoints that hand out one page per call.

ClassCharts pages with a `last_id` cursor: the id of the last item already seen.
A page without items marks the end of the collection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Optional, TypeVar

__all__ = ["paginate", "paginate_all"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def paginate(
    fetch_page: Callable[[Optional[str]], list[T]],
    cursor_of: Callable[[T], str],
    max_pages: int | None = None,
) -> Iterator[T]:
    """
    Iterate through every page of a cursor paginated endpoint.

    Args:
        fetch_page: Fetches one page given the cursor (None for the first page)
        cursor_of: Returns the cursor to send after the given item
        max_pages: Stop after this many non-empty pages. None keeps going until an
            empty page is returned, which never happens if the upstream keeps
            repeating its cursor.

    Yields:
        Items from all pages, in order. Nothing is de-duplicated.

    """
    if max_pages is not None and max_pages < 1:
        raise ValueError("max_pages must be a positive integer if provided.")

    cursor: str | None = None
    pages = 0

    while True:
        page = fetch_page(cursor)
        logger.debug(f"Fetched page {pages + 1} with cursor {cursor!r}: {len(page)} items")

        if not page:
            break

        yield from page
        pages += 1
        cursor = cursor_of(page[-1])

        if max_pages is not None and pages >= max_pages:
            logger.warning(f"Stopped paginating after {pages} pages, the collection may be incomplete.")
            break


def paginate_all(
    fetch_page: Callable[[Optional[str]], list[T]],
    cursor_of: Callable[[T], str],
    max_pages: int | None = None,
) -> list[T]:
    """Fetch all items of a cursor paginated endpoint into a list."""
    return list(paginate(fetch_page, cursor_of, max_pages))
