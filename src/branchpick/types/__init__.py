"""public types API for branchpick"""

from branchpick.types._branches import (
    BranchInfo,
    CommitInfo,
    DefaultBranchResult,
    ListBranchesResult,
)
from branchpick.types._common import RepoIdentifier, RepoTarget
from branchpick.types._pages import BranchPage, PageEntry
from branchpick.types._repos import RepoInfo

__all__ = [
    "BranchInfo",
    "BranchPage",
    "CommitInfo",
    "DefaultBranchResult",
    "ListBranchesResult",
    "PageEntry",
    "RepoIdentifier",
    "RepoInfo",
    "RepoTarget",
]
