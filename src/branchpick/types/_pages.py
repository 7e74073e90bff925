"""pagination types"""

from pydantic import BaseModel


class PageEntry(BaseModel):
    """one numbered line of a branch page"""

    label: int
    name: str
    is_default: bool = False


class BranchPage(BaseModel):
    """a rendered page of branches

    `page` is 0-based; labels inside `entries` start at 1
    """

    page: int
    total_pages: int
    entries: list[PageEntry]
