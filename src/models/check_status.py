"""CheckStatus model"""

from enum import Enum

from pydantic import BaseModel


class StatusState(Enum):
    """Commit status states"""

    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"
    ERROR = "error"


class CheckStatus(BaseModel):
    """The status of one context in a commit. The context is the identity key."""

    context: str
    state: StatusState
    description: str = ""
