"""Shared FastAPI dependencies."""

from fastapi import Query
from pydantic import BaseModel, ConfigDict

from querypage.core.config import get_settings
from querypage.core.exceptions import InvalidArgumentError


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    page_size: int


def page_request(
    page: int = Query(default=1, description="1-based page position"),
    page_size: int | None = Query(default=None, gt=0, description="Items per page"),
) -> PageRequest:
    """Dependency: read `page`/`page_size`, applying configured default and cap."""
    settings = get_settings()
    if page_size is None:
        page_size = settings.default_page_size
    if page_size > settings.max_page_size:
        raise InvalidArgumentError(
            f"page_size must not exceed {settings.max_page_size}",
            details={"page_size": page_size, "max_page_size": settings.max_page_size},
        )
    return PageRequest(page=page, page_size=page_size)
