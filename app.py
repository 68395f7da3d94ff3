"""This module contains the main application logic."""

import logging
import os
import sys
from typing import NoReturn

import markdown
import sentry_sdk
from flask import Flask
from flask.cli import load_dotenv
from githubapp import webhook_handler
from githubapp.events import (
    IssueCommentCreatedEvent,
    IssueCommentDeletedEvent,
    IssueCommentEditedEvent,
    IssueCommentEvent,
)

from config import default_configs
from src.managers import override_manager

logging.basicConfig(
    stream=sys.stdout,
    format="%(levelname)s:%(module)s:%(funcName)s:%(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def sentry_init() -> NoReturn:  # pragma: no cover
    """Initialize sentry only if SENTRY_DSN is present"""
    if sentry_dsn := os.getenv("SENTRY_DSN"):
        # Initialize Sentry SDK for error logging
        sentry_sdk.init(
            dsn=sentry_dsn,
            # Set traces_sample_rate to 1.0 to capture 100%
            # of transactions for performance monitoring.
            traces_sample_rate=1.0,
            profiles_sample_rate=1.0,
        )
        logger.info("Sentry initialized")


app = Flask(__name__)
sentry_init()
webhook_handler.handle_with_flask(
    app, use_default_index=False, config_file=".override-bot.yaml"
)

load_dotenv()
default_configs()


@webhook_handler.add_handler(IssueCommentCreatedEvent)
@webhook_handler.add_handler(IssueCommentEditedEvent)
@webhook_handler.add_handler(IssueCommentDeletedEvent)
def handle_issue_comment(event: IssueCommentEvent) -> NoReturn:
    """
    handle the Issue Comment Created, Edited and Deleted events
    Calling the Override Manager to:
    - Override the commit statuses requested with /override
    - Create the successful jobs for the overridden presubmits
    """
    override_manager.manage(event)


@app.route("/", methods=["GET"])
def index() -> str:  # pragma: no cover
    """Return the index homepage"""
    with open("README.md") as f:
        md = f.read()
    return markdown.markdown(md)
