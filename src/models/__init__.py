from src.models.check_status import CheckStatus, StatusState
from src.models.comment_event import CommentAction, CommentEvent
from src.models.job_record import JobRecord, JobState
from src.models.override_request import OverrideRequest
from src.models.presubmit import PresubmitDefinition
from src.models.pull_request_info import PullRequestInfo

__all__ = [
    "CheckStatus",
    "CommentAction",
    "CommentEvent",
    "JobRecord",
    "JobState",
    "OverrideRequest",
    "PresubmitDefinition",
    "PullRequestInfo",
    "StatusState",
]
