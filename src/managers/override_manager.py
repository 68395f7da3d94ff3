"""This module contains the logic of the /override command."""

import logging
from functools import lru_cache
from typing import Optional

import github
from githubapp import Config
from githubapp.events import (
    IssueCommentCreatedEvent,
    IssueCommentDeletedEvent,
    IssueCommentEditedEvent,
    IssueCommentEvent,
)
from githubapp.webhook_handler import _get_auth

from src.helpers import authorization_helper, command_helper, job_helper, status_helper, text_helper
from src.helpers.notification_helper import notify
from src.models import CommentAction, CommentEvent, OverrideRequest
from src.services import (
    CheckRunJobService,
    ConfigPresubmitService,
    GithubScmService,
    JobService,
    PresubmitService,
    ScmService,
)

logger = logging.getLogger(__name__)

EVENT_ACTIONS = {
    IssueCommentCreatedEvent: CommentAction.CREATED,
    IssueCommentEditedEvent: CommentAction.EDITED,
    IssueCommentDeletedEvent: CommentAction.DELETED,
}


@Config.call_if("override_manager.enabled")
def manage(event: IssueCommentEvent) -> None:
    """Handle the /override command of an issue comment event"""
    gh = _get_gh(event.hook_installation_target_id, event.installation_id)
    handle(
        GithubScmService(gh),
        CheckRunJobService(gh),
        ConfigPresubmitService(),
        comment_event_from(event),
        role=Config.override_manager.role,
    )


def comment_event_from(event: IssueCommentEvent) -> CommentEvent:
    """Create a CommentEvent from the githubapp event"""
    repository = event.repository
    issue = event.issue
    issue_comment = event.issue_comment
    action = next(
        (action for clazz, action in EVENT_ACTIONS.items() if isinstance(event, clazz)),
        None,
    )
    return CommentEvent(
        org=repository.owner.login,
        repo=repository.name,
        number=issue.number,
        author=issue_comment.user.login,
        body=issue_comment.body or "",
        action=action or CommentAction.EDITED,
        is_pull_request=issue.pull_request is not None,
        state=issue.state,
        url=issue_comment.html_url,
    )


def get_override_request(event: CommentEvent) -> Optional[OverrideRequest]:
    """Return the override request if the event is a new comment with /override in an open Pull Request"""
    if event.action != CommentAction.CREATED:
        return None
    if not event.is_pull_request or event.state != "open":
        return None
    return command_helper.get_override_request(event.body)


def handle(
    scm: ScmService,
    job_service: JobService,
    presubmit_service: PresubmitService,
    event: CommentEvent,
    role: str = authorization_helper.ADMIN_ROLE,
) -> None:
    """
    Override the statuses requested in the comment, replying with the outcome.
    The problems with the request or reading the Pull Request are answered in a comment.

    :raises GithubAppRuntimeException: if a status or a job could not be written.
    """
    if (override_request := get_override_request(event)) is None:
        return

    if override_request.missing_target or not override_request.contexts:
        notify(scm, event, text_helper.missing_target_message())
        return

    if not authorization_helper.authorized(scm, event.org, event.repo, event.author, role):
        logger.info("%s is not authorized to override in %s", event.author, event.full_name)
        notify(scm, event, text_helper.unauthorized_message(event.author))
        return

    try:
        pull_request, statuses = status_helper.fetch(scm, event)
    except status_helper.FetchError as err:
        notify(scm, event, err.message)
        return

    classification = status_helper.classify(override_request.contexts, statuses)
    if classification.unknown:
        notify(
            scm,
            event,
            text_helper.unknown_contexts_message(
                classification.unknown, [status.context for status in statuses]
            ),
        )
        return

    overridden = status_helper.override(scm, event, pull_request.head_sha, classification.known)
    job_helper.create_jobs(scm, job_service, presubmit_service, event, pull_request, overridden)

    if overridden:
        notify(scm, event, text_helper.overridden_message(event.author, overridden))


@lru_cache
def _get_gh(hook_installation_target_id: int, installation_id: int) -> github.Github:
    """Get the Github object for the given installation, cached"""
    return github.Github(auth=_get_auth(hook_installation_target_id, installation_id))
