"""Offset pagination over counted, range-readable sources."""

from querypage.core.exceptions import AppError, InvalidArgumentError, SourceUnavailableError
from querypage.core.pagination import PagedResult, ceil_div, page_offset, paginate, paginate_with_prefix
from querypage.sources.base import PageSource
from querypage.sources.memory import MemorySource

__all__ = [
    "AppError",
    "InvalidArgumentError",
    "MemorySource",
    "PageSource",
    "PagedResult",
    "SourceUnavailableError",
    "ceil_div",
    "page_offset",
    "paginate",
    "paginate_with_prefix",
]
