"""shared types and validators"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def normalize_repo_identifier(v: str) -> str:
    """normalize repo identifier to owner/repo format

    strips an `@` owner prefix, a github.com URL prefix and a `.git` suffix
    """
    v = v.strip()
    if not v.isprintable() or any(c.isspace() for c in v):
        raise ValueError(f"invalid repo format: {v!r}. expected 'owner/repo'")
    for prefix in ("https://github.com/", "http://github.com/", "github.com/"):
        if v.startswith(prefix):
            v = v[len(prefix) :]
            break
    v = v.rstrip("/").removesuffix(".git")

    if v.count("/") != 1:
        raise ValueError(f"invalid repo format: '{v}'. expected 'owner/repo'")
    owner, repo_name = v.split("/", 1)
    # strip @ from owner if present
    owner = owner.lstrip("@")
    if not owner or not repo_name:
        raise ValueError(f"invalid repo format: '{v}'. expected 'owner/repo'")
    return f"{owner}/{repo_name}"


RepoIdentifier = Annotated[str, AfterValidator(normalize_repo_identifier)]


class RepoTarget(BaseModel):
    """coordinates of a repository on the host"""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str

    @classmethod
    def parse(cls, identifier: str) -> "RepoTarget":
        """construct from an 'owner/repo' identifier

        Raises:
            ValueError: if the identifier is not in 'owner/repo' format
        """
        owner, repo = normalize_repo_identifier(identifier).split("/", 1)
        return cls(owner=owner, repo=repo)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
