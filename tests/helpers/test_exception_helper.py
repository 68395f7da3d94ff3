import pytest
from github import GithubException

from src.helpers.exception_helper import extract_error, extract_message_from_error


@pytest.mark.parametrize(
    "error_dict,expected_return",
    [
        ({"message": "Error Message"}, "Error Message"),
        ({"field": "Field", "code": "Code"}, "Field Code"),
        ({"data": "any_data"}, "{'data': 'any_data'}"),
    ],
)
def test_extract_message_from_error(error_dict, expected_return):
    assert expected_return == extract_message_from_error(error_dict)


@pytest.mark.parametrize(
    "exception,expected_return",
    [
        (GithubException(422, {"errors": [{"message": "Error Message"}]}), "Error Message"),
        (GithubException(404, {"message": "Not Found"}), "Not Found"),
        (RuntimeError("Any error"), "Any error"),
    ],
    ids=["github errors", "github message", "other exception"],
)
def test_extract_error(exception, expected_return):
    assert extract_error(exception) == expected_return
