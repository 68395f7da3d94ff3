"""Method to create the jobs backing the overridden contexts"""

import logging
from typing import Optional

from githubapp.exceptions import GithubAppRuntimeException

from src.helpers import text_helper
from src.models import CommentEvent, JobRecord, JobState, PullRequestInfo
from src.services import JobService, PresubmitService, ScmService

logger = logging.getLogger(__name__)


def create_jobs(
    scm: ScmService,
    job_service: JobService,
    presubmit_service: PresubmitService,
    event: CommentEvent,
    pull_request: PullRequestInfo,
    contexts: list[str],
) -> list[JobRecord]:
    """
    Create a successful job for each overridden context that has a presubmit.
    The contexts without presubmit are only overridden in the status.

    :raises GithubAppRuntimeException: if the base ref or a job could not be created.
    """
    jobs = []
    base_sha: Optional[str] = None
    base_resolved = False
    for context in contexts:
        if (presubmit := presubmit_service.lookup_presubmit(context)) is None:
            continue
        if not base_resolved:
            base_sha = _get_base_sha(scm, event, pull_request)
            base_resolved = True
        job = JobRecord(
            name=presubmit.name,
            context=context,
            state=JobState.SUCCESS,
            description=text_helper.override_description(event.author),
            org=event.org,
            repo=event.repo,
            pull_number=pull_request.number,
            pull_author=pull_request.author,
            head_sha=pull_request.head_sha,
            base_ref=pull_request.base_ref,
            base_sha=base_sha,
        )
        try:
            jobs.append(job_service.create_job(job))
        except Exception as err:
            logger.error("Cannot create the job %s for %s in %s: %s", job.name, context, event.full_name, err)
            raise GithubAppRuntimeException from err
        logger.info("Job %s created for %s in %s", job.name, context, event.full_name)
    return jobs


def _get_base_sha(scm: ScmService, event: CommentEvent, pull_request: PullRequestInfo) -> Optional[str]:
    if not pull_request.base_ref:
        return None
    ref = f"heads/{pull_request.base_ref}"
    try:
        return scm.get_ref(event.org, event.repo, ref)
    except Exception as err:
        logger.error("Cannot get the ref %s in %s: %s", ref, event.full_name, err)
        raise GithubAppRuntimeException from err
