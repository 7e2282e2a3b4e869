"""Pagination helpers."""

from typing import Any, Callable, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from querypage.core.exceptions import InvalidArgumentError
from querypage.core.logging import get_logger
from querypage.sources.base import PageSource

T = TypeVar("T")
U = TypeVar("U")

log = get_logger(__name__)


class PagedResult(BaseModel, Generic[T]):
    """One page of items plus paging metadata. Snapshot, never mutated."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    page_pos: int  # 1-based, echoed from the request
    page_count: int
    total_item_count: int

    @property
    def has_next(self) -> bool:
        return self.page_pos < self.page_count

    @property
    def has_prev(self) -> bool:
        return self.page_pos > 1

    def map(self, func: Callable[[T], U]) -> "PagedResult[U]":
        """Transform items, keeping the paging metadata."""
        return PagedResult(
            items=[func(item) for item in self.items],
            page_pos=self.page_pos,
            page_count=self.page_count,
            total_item_count=self.total_item_count,
        )


def _check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise InvalidArgumentError(
            "page_size must be a positive integer",
            details={"page_size": page_size},
        )


def ceil_div(total: int, size: int) -> int:
    """Number of pages needed for `total` items, `size` per page."""
    _check_page_size(size)
    return (total + size - 1) // size


def page_offset(page_pos: int, page_size: int) -> int:
    """0-based index of the first item of page `page_pos`.

    Positions below 1 clamp to the first page.
    """
    _check_page_size(page_size)
    return max(0, (page_pos - 1) * page_size)


async def paginate(source: PageSource[T], page_pos: int, page_size: int) -> PagedResult[T]:
    """Fetch page `page_pos` of `source`.

    count() and fetch() are separate calls with no snapshot between them, so
    a store written to concurrently may report a total that does not match
    the returned window.
    """
    offset = page_offset(page_pos, page_size)
    total_item_count = await source.count()
    items = list(await source.fetch(offset, page_size))
    page_count = ceil_div(total_item_count, page_size)

    log.debug(
        "paginate",
        page_pos=page_pos,
        page_size=page_size,
        offset=offset,
        total_item_count=total_item_count,
        returned=len(items),
    )
    return PagedResult(
        items=items,
        page_pos=page_pos,
        page_count=page_count,
        total_item_count=total_item_count,
    )


async def paginate_with_prefix(
    source: PageSource[T],
    prefix: Sequence[T],
    page_pos: int,
    page_size: int,
) -> PagedResult[T]:
    """Paginate `prefix` followed by `source` as one sequence.

    The source is only queried for the part of the window the prefix
    does not cover.
    """
    offset = page_offset(page_pos, page_size)
    prefix_len = len(prefix)
    total_item_count = prefix_len + await source.count()

    items: list[Any] = []
    prefix_take = max(0, min(prefix_len - offset, page_size))
    if prefix_take > 0:
        items.extend(prefix[offset : offset + prefix_take])

    source_take = page_size - prefix_take
    source_skip = max(0, offset - prefix_len)
    if source_take > 0:
        items.extend(await source.fetch(source_skip, source_take))

    page_count = ceil_div(total_item_count, page_size)

    log.debug(
        "paginate_with_prefix",
        page_pos=page_pos,
        page_size=page_size,
        offset=offset,
        prefix_len=prefix_len,
        prefix_take=prefix_take,
        source_skip=source_skip,
        source_take=source_take,
        total_item_count=total_item_count,
        returned=len(items),
    )
    return PagedResult(
        items=items,
        page_pos=page_pos,
        page_count=page_count,
        total_item_count=total_item_count,
    )
