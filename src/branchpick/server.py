"""branchpick MCP server - exposes branch listing and default resolution as tools"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from branchpick._messages import LoggingReporter, detect_language
from branchpick._pagination import PAGE_SIZE
from branchpick._session import BranchSession
from branchpick.settings import settings
from branchpick.types import BranchPage, DefaultBranchResult, ListBranchesResult

branchpick_mcp = FastMCP("branchpick MCP server")

RepoParam = Annotated[
    str,
    Field(
        description="repository identifier in 'owner/repo' format (e.g., 'octocat/hello-world')"
    ),
]


def _session(repo: str) -> BranchSession:
    language = settings.language or detect_language()
    return BranchSession(repo, reporter=LoggingReporter(language))


# resources - read-only operations
@branchpick_mcp.resource("branchpick://settings")
def branchpick_settings() -> dict[str, str | int]:
    """show the API endpoint and paging in use"""
    return {
        "github_api_url": settings.github_api_url,
        "page_size": PAGE_SIZE,
        "language": (settings.language or detect_language()).value,
    }


# tools - read-only queries against the host
@branchpick_mcp.tool
def list_repo_branches(repo: RepoParam) -> ListBranchesResult:
    """list branches for a repository

    Args:
        repo: repository identifier in 'owner/repo' format

    Returns:
        branches in host order; empty if they could not be fetched
    """
    with _session(repo) as session:
        return ListBranchesResult(
            repo=session.target.full_name, branches=session.all_branches()
        )


@branchpick_mcp.tool
def get_default_branch(repo: RepoParam) -> DefaultBranchResult:
    """get the default branch of a repository

    falls back to main, master or the first branch when the host
    cannot be asked; `from_host` tells which happened

    Args:
        repo: repository identifier in 'owner/repo' format

    Returns:
        DefaultBranchResult with name and clickable url
    """
    with _session(repo) as session:
        return session.default_branch()


@branchpick_mcp.tool
def get_branch_page(
    repo: RepoParam,
    page: Annotated[int, Field(ge=1, description="page number, starting at 1")] = 1,
) -> BranchPage:
    """show one page of branches, default branch first

    Args:
        repo: repository identifier in 'owner/repo' format
        page: page number starting at 1

    Returns:
        BranchPage with numbered entries and the total page count
    """
    with _session(repo) as session:
        return session.page(page - 1)
