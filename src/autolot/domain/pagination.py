from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from autolot.domain.vehicle import Paging

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageMeta:
    total_records: int
    total_pages: int
    current_page: int
    page_size: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def for_total(cls, total_records: int, paging: Paging) -> PageMeta:
        # Ceiling division; zero records means zero pages
        total_pages = -(-total_records // paging.page_size)
        return cls(
            total_records=total_records,
            total_pages=total_pages,
            current_page=paging.page,
            page_size=paging.page_size,
            has_next_page=paging.page < total_pages,
            has_previous_page=paging.page > 1,
        )

    @classmethod
    def empty(cls, paging: Paging | None = None) -> PageMeta:
        """Zeroed metadata used for failed responses."""
        paging = paging or Paging()
        return cls(
            total_records=0,
            total_pages=0,
            current_page=paging.page,
            page_size=paging.page_size,
            has_next_page=False,
            has_previous_page=False,
        )


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T]
    meta: PageMeta


def paginate(items: Sequence[T], paging: Paging) -> Page[T]:
    """
    Slice one page out of an already filtered and sorted sequence.

    Precondition: paging has been validated by the caller.
    Pages past the end yield an empty slice, not an error.
    """
    start = paging.offset
    end = start + paging.page_size
    return Page(items=list(items[start:end]), meta=PageMeta.for_total(len(items), paging))
