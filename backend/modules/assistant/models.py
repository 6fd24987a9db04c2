"""
Assistant module data models.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """A single message in the conversation."""

    role: ChatRole
    content: str = Field(..., max_length=10000)


class ChatRequest(BaseModel):
    """Conversation so far. The last message is the prompt to answer."""

    messages: list[ChatMessage] = Field(..., min_length=1, max_length=200)


class QuickPrompt(BaseModel):
    """Canned prompt offered beside the chat."""

    id: str
    label: str
    text: str


class PromptsResponse(BaseModel):
    """Quick prompts plus the greeting shown in an empty chat."""

    prompts: list[QuickPrompt]
    starter: ChatMessage


class ChatEventType(str, Enum):
    """Types of events emitted while streaming a response."""

    RESPONSE_STARTED = "response_started"
    TOKEN = "token"
    RESPONSE_COMPLETED = "response_completed"
    RESPONSE_CANCELLED = "response_cancelled"


class ChatEvent(BaseModel):
    """
    Event emitted during response streaming.

    Sent via SSE; RESPONSE_STARTED carries the stream_id the client uses
    to stop the stream.
    """

    type: ChatEventType = Field(..., description="Event type")
    stream_id: str = Field(..., description="Stream ID")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Event timestamp",
    )
    content: Optional[str] = Field(
        None,
        description="Chunk for token events; full text so far for terminal events",
    )
