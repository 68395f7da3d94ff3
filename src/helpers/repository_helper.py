""" Repository helper functions."""

from functools import lru_cache
from typing import Optional

from github import Github, UnknownObjectException
from github.Repository import Repository


@lru_cache
def get_repository(gh: Github, repository_name: str, repository_owner_login: str = None) -> Optional[Repository]:
    """
    Get the repository by the full name or by owner and name.
    If the repository is not found, return None.
    """
    if repository_owner_login:
        repository_name = f"{repository_owner_login}/{repository_name}"
    try:
        return gh.get_repo(repository_name)
    except UnknownObjectException:
        return None
