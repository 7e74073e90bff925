"""repository metadata types"""

from pydantic import BaseModel


class RepoInfo(BaseModel):
    """repository metadata, only the fields branchpick reads"""

    default_branch: str
