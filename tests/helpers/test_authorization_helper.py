from unittest.mock import Mock

import pytest

from src.helpers.authorization_helper import authorized
from tests.fakes import ADMIN_USER, FAKE_ORG, FAKE_REPO


@pytest.mark.parametrize(
    "user,expected",
    [("fail", False), ("random", False), (ADMIN_USER, True)],
    ids=["fail closed", "reject rando", "accept admin"],
)
def test_authorized(user, expected, scm):
    assert authorized(scm, FAKE_ORG, FAKE_REPO, user) is expected


def test_authorized_only_trusts_true():
    scm = Mock()
    scm.has_permission.return_value = "admin"
    assert authorized(scm, FAKE_ORG, FAKE_REPO, ADMIN_USER) is False


def test_authorized_with_role():
    scm = Mock()
    scm.has_permission.return_value = True
    assert authorized(scm, FAKE_ORG, FAKE_REPO, ADMIN_USER, "maintain") is True
    scm.has_permission.assert_called_once_with(FAKE_ORG, FAKE_REPO, ADMIN_USER, "maintain")
