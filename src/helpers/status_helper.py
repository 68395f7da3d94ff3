"""Method to helps with the commit statuses of a Pull Request"""

import logging
from typing import NamedTuple

from githubapp.exceptions import GithubAppRuntimeException

from src.helpers import text_helper
from src.models import CheckStatus, CommentEvent, PullRequestInfo, StatusState
from src.services import ScmService

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The pull request or its statuses could not be read"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Classification(NamedTuple):
    """The requested contexts split by existing in the commit or not"""

    known: dict[str, CheckStatus]
    unknown: list[str]


def fetch(scm: ScmService, event: CommentEvent) -> tuple[PullRequestInfo, list[CheckStatus]]:
    """
    Get the pull request and the statuses of its head commit.

    :raises FetchError: with the message to reply with, if any of them could not be read.
    """
    try:
        pull_request = scm.get_pull_request(event.org, event.repo, event.number)
    except Exception as err:
        logger.warning("Cannot get PR %s#%d: %s", event.full_name, event.number, err)
        raise FetchError(
            text_helper.cannot_get_pull_request_message(event.full_name, event.number)
        ) from err

    try:
        statuses = scm.list_statuses(event.org, event.repo, pull_request.head_sha)
    except Exception as err:
        logger.warning(
            "Cannot get commit statuses for %s@%s: %s", event.full_name, pull_request.head_sha, err
        )
        raise FetchError(
            text_helper.cannot_get_statuses_message(event.full_name, event.number)
        ) from err
    return pull_request, statuses


def classify(contexts: list[str], statuses: list[CheckStatus]) -> Classification:
    """Split the requested contexts in the ones with a status in the commit and the unknown ones"""
    existing = {status.context: status for status in statuses}
    known = {}
    unknown = []
    for context in contexts:
        if context in existing:
            known[context] = existing[context]
        else:
            unknown.append(context)
    return Classification(known, unknown)


def override(
    scm: ScmService,
    event: CommentEvent,
    head_sha: str,
    statuses: dict[str, CheckStatus],
) -> list[str]:
    """
    Set the statuses to success with a description naming the event author.
    The statuses already in success are kept as they are.
    There is no rollback, the statuses written before a failure stay written.

    :return: The overridden contexts.
    :raises GithubAppRuntimeException: if a status could not be written.
    """
    overridden = []
    description = text_helper.override_description(event.author)
    for context, status in statuses.items():
        if status.state == StatusState.SUCCESS:
            logger.info("%s is already passing in %s@%s", context, event.full_name, head_sha)
            continue
        new_status = CheckStatus(context=context, state=StatusState.SUCCESS, description=description)
        try:
            scm.create_status(event.org, event.repo, head_sha, new_status)
        except Exception as err:
            logger.error(
                "Cannot update the status %s in %s@%s: %s", context, event.full_name, head_sha, err
            )
            raise GithubAppRuntimeException from err
        logger.info("%s overridden in %s@%s by %s", context, event.full_name, head_sha, event.author)
        overridden.append(context)
    return overridden
