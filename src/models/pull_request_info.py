"""PullRequestInfo model"""

from typing import Optional

from pydantic import BaseModel


class PullRequestInfo(BaseModel):
    """The parts of a Pull Request the override command needs"""

    number: int
    head_sha: str
    base_ref: Optional[str] = None
    author: Optional[str] = None
