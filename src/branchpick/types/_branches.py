"""branch-related types"""

from typing import Any

from pydantic import BaseModel, ConfigDict, computed_field

from branchpick.types._common import RepoIdentifier


def _github_branch_url(repo: RepoIdentifier, branch: str) -> str:
    """construct clickable github.com URL"""
    return f"https://github.com/{repo}/tree/{branch}"


class CommitInfo(BaseModel):
    """commit a branch points at"""

    model_config = ConfigDict(frozen=True)

    sha: str | None = None
    url: str | None = None


class BranchInfo(BaseModel):
    """branch information"""

    model_config = ConfigDict(frozen=True)

    name: str
    commit: CommitInfo | None = None

    @property
    def sha(self) -> str | None:
        return self.commit.sha if self.commit else None


class ListBranchesResult(BaseModel):
    """result of listing branches"""

    repo: RepoIdentifier
    branches: list[BranchInfo]

    @classmethod
    def from_api_response(
        cls, repo: str, response: list[dict[str, Any]]
    ) -> "ListBranchesResult":
        """construct from raw API response

        Args:
            repo: repository identifier in 'owner/repo' format
            response: raw response from the github branches endpoint:
                [
                    {"name": "main", "commit": {"sha": "abc123", "url": "..."}},
                    ...
                ]
                fields other than `name` and `commit` are ignored

        Returns:
            ListBranchesResult with parsed branches
        """
        return cls(
            repo=repo, branches=[BranchInfo.model_validate(b) for b in response]
        )


class DefaultBranchResult(BaseModel):
    """resolved default branch of a repository"""

    repo: RepoIdentifier
    name: str
    # False when the host lookup failed and the name was picked locally
    from_host: bool

    @computed_field
    @property
    def url(self) -> str:
        """construct clickable github.com URL"""
        return _github_branch_url(self.repo, self.name)
