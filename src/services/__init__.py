"""Services the override command talks to. Each one can fail on its own."""

from src.services.job_service import CheckRunJobService, JobService
from src.services.presubmit_service import ConfigPresubmitService, PresubmitService
from src.services.scm_service import GithubScmService, ScmService

__all__ = [
    "CheckRunJobService",
    "ConfigPresubmitService",
    "GithubScmService",
    "JobService",
    "PresubmitService",
    "ScmService",
]
