"""
Presubmit service

Tells which contexts are reported by a configured presubmit job.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from githubapp import Config

from src.models import PresubmitDefinition

logger = logging.getLogger(__name__)


class PresubmitService(ABC):
    """Interface of the presubmit service"""

    @abstractmethod
    def lookup_presubmit(self, context: str) -> Optional[PresubmitDefinition]:
        """Return the presubmit that reports to `context`, if any"""


class ConfigPresubmitService(PresubmitService):
    """
    PresubmitService reading the `override_manager.presubmits` config.
    Each entry is a job name or a mapping with `name` and, optionally, `context`.
    The context defaults to the name. Entries without a name are ignored.
    """

    def __init__(self, presubmits: list[Union[str, dict[str, str]]] = None):
        if presubmits is None:
            presubmits = Config.override_manager.presubmits
        self.presubmits = {}
        for entry in presubmits or []:
            if isinstance(entry, str):
                entry = {"name": entry}
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str) or not entry["name"]:
                logger.warning("Ignoring invalid presubmit config: %r", entry)
                continue
            context = entry.get("context")
            if not isinstance(context, str) or not context:
                context = entry["name"]
            presubmit = PresubmitDefinition(name=entry["name"], context=context)
            self.presubmits[presubmit.context] = presubmit

    def lookup_presubmit(self, context: str) -> Optional[PresubmitDefinition]:
        return self.presubmits.get(context)
