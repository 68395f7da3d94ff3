"""Helper to find the /override commands in comments"""

import re
from typing import Optional

from src.models import OverrideRequest

OVERRIDE_COMMAND = "/override"
OVERRIDE_PATTERN = re.compile(r"^" + OVERRIDE_COMMAND + r"(?:\s+(\S+).*)?$")


def get_override_request(text: str) -> Optional[OverrideRequest]:
    """
    Retrieve the override request from a comment body.
    Each command must be in its own line, in the format `/override <context> [explanation]`.

    :param text: The comment body. Both "\\n" and "\\r\\n" line endings are accepted.
    :return: The OverrideRequest, or None if there is no /override line.
    """
    override_request = None
    for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        if match := OVERRIDE_PATTERN.match(line.rstrip()):
            override_request = override_request or OverrideRequest()
            if context := match.group(1):
                override_request.add(context)
            else:
                override_request.missing_target = True
    return override_request
