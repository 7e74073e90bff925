"""github API client"""

from branchpick._github._client import (
    create_http_client,
    fetch_branches,
    fetch_default_branch_name,
    make_github_request,
)

__all__ = [
    "create_http_client",
    "fetch_branches",
    "fetch_default_branch_name",
    "make_github_request",
]
