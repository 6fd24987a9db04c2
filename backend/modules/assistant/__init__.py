"""
Assistant module.

A placeholder chat assistant that streams a scripted response. It keeps
the streaming and stop contract a real inference backend would use.

Public API:
- AssistantService: Simulated response streaming
- CancellationToken, StreamRegistry: Stop control
- ChatRequest, ChatEvent, ChatEventType: Request and SSE event models
"""

from .cancellation import CancellationToken, StreamRegistry
from .models import (
    ChatEvent,
    ChatEventType,
    ChatMessage,
    ChatRequest,
    ChatRole,
    PromptsResponse,
    QuickPrompt,
)
from .exceptions import EmptyPromptError, StreamNotFoundError
from .service import AssistantService

__all__ = [
    "AssistantService",
    "CancellationToken",
    "StreamRegistry",
    "ChatEvent",
    "ChatEventType",
    "ChatMessage",
    "ChatRequest",
    "ChatRole",
    "PromptsResponse",
    "QuickPrompt",
    "EmptyPromptError",
    "StreamNotFoundError",
]
