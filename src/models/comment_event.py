"""CommentEvent model"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CommentAction(Enum):
    """Lifecycle actions of an issue comment"""

    CREATED = "created"
    EDITED = "edited"
    DELETED = "deleted"


class CommentEvent(BaseModel):
    """A comment made in an issue or pull request"""

    model_config = ConfigDict(frozen=True)

    org: str
    repo: str
    number: int
    author: str
    body: str
    action: CommentAction = CommentAction.CREATED
    is_pull_request: bool = True
    state: str = "open"
    url: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Return the repository full name, org/repo"""
        return f"{self.org}/{self.repo}"
