"""
Assistant API endpoints.

Provides quick prompts, an SSE response stream, and a stop control.
"""

from typing import AsyncIterator

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from api.dependencies import get_assistant_service, get_stream_registry
from api.middleware.auth import get_current_user
from api.models.errors import ErrorResponse
from shared.models import AuthenticatedUser

from .cancellation import StreamRegistry
from .models import ChatRequest, PromptsResponse
from .service import AssistantService

router = APIRouter(
    responses={401: {"model": ErrorResponse, "description": "Not signed in"}},
)


@router.get("/prompts", response_model=PromptsResponse)
async def get_prompts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: AssistantService = Depends(get_assistant_service),
) -> PromptsResponse:
    """Quick prompts and the starter message."""
    return service.get_prompts()


async def event_generator(
    owner_id: str,
    request: ChatRequest,
    service: AssistantService,
    registry: StreamRegistry,
) -> AsyncIterator[dict]:
    """
    Generate SSE events for one response.

    The stream is registered on the first iteration and unregistered when
    the generator finishes, including when the client disconnects and the
    generator is closed early. A generator that is never started leaves
    nothing in the registry.
    """
    stream_id, token = registry.register(owner_id)
    try:
        async for event in service.stream_response(stream_id, request, token):
            yield {
                "event": event.type.value,
                "data": event.model_dump_json(exclude_none=True),
            }
    finally:
        registry.unregister(stream_id)


@router.post(
    "/stream",
    responses={400: {"model": ErrorResponse, "description": "No prompt to answer"}},
)
async def stream_response(
    request: ChatRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: AssistantService = Depends(get_assistant_service),
    registry: StreamRegistry = Depends(get_stream_registry),
):
    """
    Stream an assistant response via SSE.

    Event types:
    - response_started: carries the stream_id used by the stop endpoint
    - token: one content chunk
    - response_completed: all tokens sent
    - response_cancelled: stopped early; content holds the partial text
    """
    service.latest_prompt(request)
    return EventSourceResponse(
        event_generator(user.id, request, service, registry),
        media_type="text/event-stream",
    )


@router.post(
    "/streams/{stream_id}/stop",
    responses={404: {"model": ErrorResponse, "description": "No such in-flight stream"}},
)
async def stop_stream(
    stream_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    registry: StreamRegistry = Depends(get_stream_registry),
) -> dict:
    """Stop one of the caller's in-flight streams."""
    registry.cancel(stream_id, user.id)
    return {"ok": True}
