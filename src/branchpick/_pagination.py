"""lay branches out across numbered pages"""

import math
from collections.abc import Sequence

from branchpick.types import BranchInfo, BranchPage, PageEntry

PAGE_SIZE = 9


def total_pages(branches: Sequence[BranchInfo], page_size: int = PAGE_SIZE) -> int:
    """number of pages, counted over the full branch list"""
    return math.ceil(len(branches) / page_size)


def render_page(
    branches: Sequence[BranchInfo],
    default_name: str,
    page: int,
    page_size: int = PAGE_SIZE,
) -> list[PageEntry]:
    """entries shown on a 0-based page

    page 0 pins the default branch to label 1 when it is in the list. later
    pages window the branches other than the default, shifted back by one
    slot for the one the default took on page 0. `total_pages` still counts
    the full list, so when the default is absent the last page can come up
    short or empty.
    """
    others = [b for b in branches if b.name != default_name]

    if page == 0:
        default = next((b for b in branches if b.name == default_name), None)
        if default is None:
            return _number(others[:page_size])
        entries = [PageEntry(label=1, name=default.name, is_default=True)]
        entries.extend(_number(others[: page_size - 1], start=2))
        return entries

    start = page * page_size - 1
    if start >= len(others):
        return []
    return _number(others[start : start + page_size])


def build_page(
    branches: Sequence[BranchInfo],
    default_name: str,
    page: int,
    page_size: int = PAGE_SIZE,
) -> BranchPage:
    return BranchPage(
        page=page,
        total_pages=total_pages(branches, page_size),
        entries=render_page(branches, default_name, page, page_size),
    )


def _number(branches: Sequence[BranchInfo], start: int = 1) -> list[PageEntry]:
    return [
        PageEntry(label=i, name=b.name) for i, b in enumerate(branches, start=start)
    ]
