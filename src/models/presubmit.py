"""PresubmitDefinition model"""

from pydantic import BaseModel


class PresubmitDefinition(BaseModel):
    """A configured presubmit job that reports to `context`"""

    name: str
    context: str
