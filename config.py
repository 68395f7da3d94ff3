"""Module to create the githubapp Configs"""

from githubapp import Config


def default_configs() -> None:
    """Create the default configs"""
    Config.BOT_NAME = "override-bot[bot]"

    Config.create_config(
        "override_manager",
        enabled=True,
        role="admin",
        presubmits=[],
    )
