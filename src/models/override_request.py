"""OverrideRequest model"""

from pydantic import BaseModel, Field


class OverrideRequest(BaseModel):
    """
    The contexts requested by the /override lines of a comment.
    `missing_target` is set when some /override line names no context.
    """

    contexts: list[str] = Field(default_factory=list)
    missing_target: bool = False

    def add(self, context: str) -> None:
        """Add a context keeping the first occurrence order"""
        if context not in self.contexts:
            self.contexts.append(context)
