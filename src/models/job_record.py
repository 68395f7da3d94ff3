"""JobRecord model"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class JobState(Enum):
    """JobState enum"""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class JobRecord(BaseModel):
    """A finished CI job created to back an overridden context"""

    model_config = ConfigDict(frozen=True)

    name: str
    context: str
    state: JobState = JobState.SUCCESS
    description: str = ""
    org: str
    repo: str
    pull_number: int
    pull_author: Optional[str] = None
    head_sha: str
    base_ref: Optional[str] = None
    base_sha: Optional[str] = None
    url: Optional[str] = None
