from src.helpers.text_helper import (
    format_response,
    markdown_list,
    overridden_message,
    override_description,
    unknown_contexts_message,
)


def test_markdown_list():
    assert markdown_list(["b", "a"]) == "- a\n- b"


def test_format_response():
    assert (
        format_response("user", "Message", "/override job\r\nflaky", "comment.url")
        == """@user: Message

<details>

In response to [this](comment.url):

> /override job
> flaky
</details>"""
    )


def test_format_response_without_url():
    assert "In response to this:" in format_response("user", "Message", "body")


def test_override_description():
    assert override_description("admin-user") == "Overridden by admin-user"


def test_overridden_message():
    assert (
        overridden_message("admin-user", ["hung-test", "broken-test"])
        == "Overrode contexts on behalf of admin-user: broken-test, hung-test"
    )


def test_unknown_contexts_message():
    assert unknown_contexts_message(["whatever"], ["z-test", "a-test"]) == (
        "/override requires a failed status context to operate on.\n"
        "The following unknown contexts were given:\n"
        "- whatever\n"
        "\n"
        "Only the following contexts were expected:\n"
        "- a-test\n"
        "- z-test"
    )
