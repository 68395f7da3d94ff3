"""
Job service

Creates the records of CI jobs. In GitHub a finished job is a completed check run.
"""

from abc import ABC, abstractmethod

from github import Github

from src.helpers import repository_helper
from src.models import JobRecord, JobState


class JobService(ABC):
    """Interface of the job service"""

    @abstractmethod
    def create_job(self, job: JobRecord) -> JobRecord:
        """Create the job. Only jobs already in the success state are accepted."""


class CheckRunJobService(JobService):
    """JobService that records the jobs as GitHub check runs"""

    def __init__(self, gh: Github):
        self.gh = gh

    def create_job(self, job: JobRecord) -> JobRecord:
        if job.state != JobState.SUCCESS:
            raise ValueError(f"Bad job state: {job.state.value}")
        repository = repository_helper.get_repository(self.gh, job.repo, job.org)
        if repository is None:
            raise LookupError(f"Repository {job.org}/{job.repo} not found")
        check_run = repository.create_check_run(
            name=job.context,
            head_sha=job.head_sha,
            external_id=job.name,
            status="completed",
            conclusion=job.state.value,
            output={"title": job.description, "summary": job.description},
        )
        return job.model_copy(update={"url": check_run.html_url})
