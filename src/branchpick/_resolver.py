"""default branch fallback"""

from collections.abc import Sequence

from branchpick.types import BranchInfo

# returned when no branch can be determined at all
UNKNOWN_BRANCH = "unknown"

FALLBACK_NAMES = ("main", "master")


def find_fallback_default_branch(branches: Sequence[BranchInfo]) -> str:
    """pick a default locally when the host cannot tell us

    `main`, then `master` (both case-insensitive), then the first branch,
    then `UNKNOWN_BRANCH` for an empty list
    """
    for wanted in FALLBACK_NAMES:
        for branch in branches:
            if branch.name.lower() == wanted:
                return branch.name
    if branches:
        return branches[0].name
    return UNKNOWN_BRANCH
