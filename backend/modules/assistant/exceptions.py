"""
Assistant module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class EmptyPromptError(ValidationError):
    """Raised when the conversation does not end with a non-empty user message."""

    def __init__(self):
        super().__init__(
            "Last message must be a non-empty user message",
            code="EMPTY_PROMPT",
        )


class StreamNotFoundError(NotFoundError):
    """Raised when stopping a stream that is unknown, finished, or not the caller's."""

    def __init__(self, stream_id: str):
        super().__init__(
            f"Stream not found: {stream_id}",
            code="STREAM_NOT_FOUND",
            details={"stream_id": stream_id},
        )
