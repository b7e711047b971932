"""Error types raised by the parameter validator."""

from typing import List, Optional


class ParameterValidationError(Exception):
    """
    Raised when one or more parameter validation rules fail.

    The combined message joins every individual failure with a single
    space, in the order the failures were found.

    Attributes:
        message: Combined human-readable message
        messages: Individual failure messages
        code: Stable discriminator for callers that branch on error kind
    """

    code = "PARAMETER_VALIDATION_ERROR"

    def __init__(self, message: str, messages: Optional[List[str]] = None):
        self.message = message
        self.messages = list(messages) if messages else [message]
        super().__init__(message)

    @classmethod
    def from_messages(cls, messages: List[str]) -> "ParameterValidationError":
        """Build one aggregate error from individual failure messages."""
        return cls(" ".join(messages), messages)

    def to_dict(self):
        return {
            "code": self.code,
            "message": self.message,
            "messages": list(self.messages),
        }
