"""
Source control service

Everything the override command reads from or writes to the repository:
comments, commit statuses, pull requests, permissions and refs.
"""

from abc import ABC, abstractmethod

from github import Github
from github.Repository import Repository

from src.helpers import repository_helper
from src.models import CheckStatus, PullRequestInfo, StatusState


class ScmService(ABC):
    """Interface of the source control service"""

    @abstractmethod
    def create_comment(self, org: str, repo: str, number: int, body: str) -> None:
        """Create a comment in the issue or pull request"""

    @abstractmethod
    def create_status(self, org: str, repo: str, ref: str, status: CheckStatus) -> None:
        """Create (or replace) the status of `status.context` in the commit `ref`"""

    @abstractmethod
    def list_statuses(self, org: str, repo: str, ref: str) -> list[CheckStatus]:
        """List the current statuses of the commit `ref`, one per context"""

    @abstractmethod
    def get_pull_request(self, org: str, repo: str, number: int) -> PullRequestInfo:
        """Get the pull request"""

    @abstractmethod
    def has_permission(self, org: str, repo: str, user: str, role: str) -> bool:
        """Return if the user has the role in the repository"""

    @abstractmethod
    def get_ref(self, org: str, repo: str, ref: str) -> str:
        """Return the commit sha that `ref` (e.g. heads/main) points to"""


class GithubScmService(ScmService):
    """ScmService backed by the GitHub API"""

    def __init__(self, gh: Github):
        self.gh = gh

    def _repository(self, org: str, repo: str) -> Repository:
        if repository := repository_helper.get_repository(self.gh, repo, org):
            return repository
        raise LookupError(f"Repository {org}/{repo} not found")

    def create_comment(self, org: str, repo: str, number: int, body: str) -> None:
        self._repository(org, repo).get_issue(number).create_comment(body)

    def create_status(self, org: str, repo: str, ref: str, status: CheckStatus) -> None:
        self._repository(org, repo).get_commit(ref).create_status(
            state=status.state.value,
            description=status.description,
            context=status.context,
        )

    def list_statuses(self, org: str, repo: str, ref: str) -> list[CheckStatus]:
        statuses = {}
        # newest first, the first status of each context is the current one
        for status in self._repository(org, repo).get_commit(ref).get_statuses():
            if status.context not in statuses:
                statuses[status.context] = CheckStatus(
                    context=status.context,
                    state=StatusState(status.state),
                    description=status.description or "",
                )
        return list(statuses.values())

    def get_pull_request(self, org: str, repo: str, number: int) -> PullRequestInfo:
        pull_request = self._repository(org, repo).get_pull(number)
        return PullRequestInfo(
            number=pull_request.number,
            head_sha=pull_request.head.sha,
            base_ref=pull_request.base.ref,
            author=pull_request.user.login if pull_request.user else None,
        )

    def has_permission(self, org: str, repo: str, user: str, role: str) -> bool:
        return self._repository(org, repo).get_collaborator_permission(user) == role

    def get_ref(self, org: str, repo: str, ref: str) -> str:
        return self._repository(org, repo).get_git_ref(ref).object.sha
