"""Helper to reply to the /override comments"""

import logging

from src.helpers import text_helper
from src.helpers.exception_helper import extract_error
from src.models import CommentEvent
from src.services import ScmService

logger = logging.getLogger(__name__)


def notify(scm: ScmService, event: CommentEvent, message: str) -> bool:
    """
    Reply to the comment in the event.
    A failure to comment is only logged, it never undoes or blocks anything.

    :return: If the comment was created.
    """
    body = text_helper.format_response(event.author, message, event.body, event.url)
    try:
        scm.create_comment(event.org, event.repo, event.number, body)
    except Exception as err:
        logger.error(
            "Failed to comment in %s#%d: %s", event.full_name, event.number, extract_error(err)
        )
        return False
    return True
