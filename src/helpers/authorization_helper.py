"""Helper to check who can override statuses"""

import logging

from src.services import ScmService

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def authorized(scm: ScmService, org: str, repo: str, user: str, role: str = ADMIN_ROLE) -> bool:
    """
    Return if the user has the role in the repository.
    Fails closed, any error checking the permission means not authorized.
    """
    try:
        has_permission = scm.has_permission(org, repo, user, role)
    except Exception:
        logger.exception("Failed to check if %s has the %s role in %s/%s", user, role, org, repo)
        return False
    return has_permission is True
