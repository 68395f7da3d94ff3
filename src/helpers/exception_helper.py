"""Module to help with GithubExceptions"""

from github import GithubException


def extract_message_from_error(error: dict[str, str]) -> str:
    """Extract the message from error"""
    if message := error.get("message"):
        return message

    if (field := error.get("field")) and (code := error.get("code")):
        return f"{field} {code}"

    return str(error)


def extract_error(exception: Exception) -> str:
    """Extract a readable message from any exception, using the GitHub error data when present"""
    if isinstance(exception, GithubException) and isinstance(exception.data, dict):
        if errors := exception.data.get("errors"):
            return extract_message_from_error(errors[0])
        return extract_message_from_error(exception.data)
    return str(exception)
