"""Texts of the comments the bot replies with"""

from typing import Iterable, Optional

OVERRIDE_USAGE = "/override requires a failed status context to operate on"


def markdown_list(items: Iterable[str]) -> str:
    """Returns a sorted markdown list"""
    return "\n".join(f"- {item}" for item in sorted(items))


def quote(text: str) -> str:
    """Returns the text as a markdown quote"""
    return "\n".join(f"> {line}" for line in text.replace("\r\n", "\n").split("\n"))


def format_response(author: str, message: str, body: str, url: Optional[str] = None) -> str:
    """Format a reply to `author`, quoting the comment that is being answered"""
    in_response_to = f"[this]({url})" if url else "this"
    return f"""@{author}: {message}

<details>

In response to {in_response_to}:

{quote(body)}
</details>"""


def override_description(user: str) -> str:
    """Description of the statuses overridden by `user`"""
    return f"Overridden by {user}"


def unauthorized_message(user: str) -> str:
    """Reply to users without the role to override"""
    return f"{user} unauthorized: /override is restricted to repo administrators"


def missing_target_message() -> str:
    """Reply to an /override without context"""
    return f"{OVERRIDE_USAGE}, but none was given"


def unknown_contexts_message(unknown: Iterable[str], known: Iterable[str]) -> str:
    """Reply listing the unknown contexts given and the contexts that exist, both sorted"""
    return f"""{OVERRIDE_USAGE}.
The following unknown contexts were given:
{markdown_list(unknown)}

Only the following contexts were expected:
{markdown_list(known)}"""


def cannot_get_pull_request_message(full_name: str, number: int) -> str:
    """Reply when the Pull Request could not be read"""
    return f"Cannot get PR #{number} in {full_name}"


def cannot_get_statuses_message(full_name: str, number: int) -> str:
    """Reply when the commit statuses could not be read"""
    return f"Cannot get commit statuses for PR #{number} in {full_name}"


def overridden_message(user: str, contexts: Iterable[str]) -> str:
    """Returns "Overrode contexts on behalf of <user>: <context>, <context>" with sorted contexts"""
    return f"Overrode contexts on behalf of {user}: {', '.join(sorted(contexts))}"
