from unittest.mock import Mock

import pytest

from config import default_configs
from src.models import CommentAction, CommentEvent, PullRequestInfo
from tests.fakes import (
    ADMIN_USER,
    FAKE_ORG,
    FAKE_PR,
    FAKE_REPO,
    FAKE_SHA,
    FakeJobService,
    FakePresubmitService,
    FakeScmService,
)

default_configs()


@pytest.fixture
def scm():
    return FakeScmService()


@pytest.fixture
def job_service():
    return FakeJobService()


@pytest.fixture
def presubmit_service():
    return FakePresubmitService()


@pytest.fixture
def make_event():
    def _make_event(body="/override broken-test", **kwargs):
        attributes = dict(
            org=FAKE_ORG,
            repo=FAKE_REPO,
            number=FAKE_PR,
            author=ADMIN_USER,
            body=body,
            action=CommentAction.CREATED,
            is_pull_request=True,
            state="open",
            url="https://github.com/fake-org/fake-repo/pull/33#issuecomment-1",
        )
        attributes.update(kwargs)
        return CommentEvent(**attributes)

    return _make_event


@pytest.fixture
def event(make_event):
    return make_event()


@pytest.fixture
def pull_request_info():
    return PullRequestInfo(number=FAKE_PR, head_sha=FAKE_SHA, base_ref="master", author="author")


@pytest.fixture
def gh():
    return Mock()


@pytest.fixture
def repository_mock(gh):
    repository = Mock(full_name=f"{FAKE_ORG}/{FAKE_REPO}")
    gh.get_repo.return_value = repository
    return repository


@pytest.fixture(autouse=True)
def clear_repository_cache():
    from src.helpers import repository_helper

    yield
    repository_helper.get_repository.cache_clear()
