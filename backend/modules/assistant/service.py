"""
Assistant service.

There is no inference backend yet. Responses are a fixed script emitted
token by token at a fixed interval, with a cancellation check between
tokens.
"""

import logging
from typing import AsyncIterator, Sequence

from .cancellation import CancellationToken
from .exceptions import EmptyPromptError
from .models import (
    ChatEvent,
    ChatEventType,
    ChatMessage,
    ChatRequest,
    ChatRole,
    QuickPrompt,
    PromptsResponse,
)

logger = logging.getLogger(__name__)


QUICK_PROMPTS: tuple[QuickPrompt, ...] = (
    QuickPrompt(
        id="comp-ideas",
        label="Competition ideas",
        text="Brainstorm FBLA competition ideas tailored for our chapter.",
    ),
    QuickPrompt(
        id="event-plan",
        label="Plan a meeting",
        text="Draft a 45-minute meeting agenda for new members.",
    ),
    QuickPrompt(
        id="email",
        label="Polish an email",
        text="Improve this outreach email to a sponsor for Hack Forsyth.",
    ),
    QuickPrompt(
        id="rules",
        label="Rules Q&A",
        text="Answer top questions about FBLA membership, dues, and timelines.",
    ),
)

STARTER_MESSAGE = ChatMessage(
    role=ChatRole.ASSISTANT,
    content=(
        "Hey! I'm SparkAI. Ask me anything about FBLA, competitions, events, "
        "or chapter ops. Try a quick prompt to get started."
    ),
)

SIMULATED_TOKENS: tuple[str, ...] = (
    "Here's a polished outline to get you rolling.\n\n",
    "1) Kickoff & icebreaker (5 min)\n",
    "2) What is FBLA? (10 min)\n",
    "3) Competition tracks (10 min)\n",
    "4) Team breakout & next steps (15 min)\n",
)


class AssistantService:
    """
    Simulated chat assistant.

    Args:
        token_interval: Seconds to wait before each token
        tokens: Script to emit; defaults to SIMULATED_TOKENS
    """

    def __init__(
        self,
        token_interval: float = 0.35,
        tokens: Sequence[str] = SIMULATED_TOKENS,
    ):
        self._token_interval = token_interval
        self._tokens = tuple(tokens)

    def get_prompts(self) -> PromptsResponse:
        return PromptsResponse(prompts=list(QUICK_PROMPTS), starter=STARTER_MESSAGE)

    def latest_prompt(self, request: ChatRequest) -> str:
        """
        Return the prompt to answer.

        Raises:
            EmptyPromptError: If the last message is not a non-empty user message
        """
        last = request.messages[-1]
        if last.role != ChatRole.USER or not last.content.strip():
            raise EmptyPromptError()
        return last.content.strip()

    async def stream_response(
        self,
        stream_id: str,
        request: ChatRequest,
        token: CancellationToken,
    ) -> AsyncIterator[ChatEvent]:
        """
        Stream a response as events.

        Yields RESPONSE_STARTED, one TOKEN per chunk, then either
        RESPONSE_COMPLETED or RESPONSE_CANCELLED with the text emitted so far.
        """
        prompt = self.latest_prompt(request)
        logger.debug(f"Stream {stream_id} answering {len(prompt)} char prompt")

        yield ChatEvent(type=ChatEventType.RESPONSE_STARTED, stream_id=stream_id)

        emitted: list[str] = []
        for chunk in self._tokens:
            if await token.wait(self._token_interval):
                logger.info(f"Stream {stream_id} cancelled after {len(emitted)} tokens")
                yield ChatEvent(
                    type=ChatEventType.RESPONSE_CANCELLED,
                    stream_id=stream_id,
                    content="".join(emitted),
                )
                return

            emitted.append(chunk)
            yield ChatEvent(type=ChatEventType.TOKEN, stream_id=stream_id, content=chunk)

        yield ChatEvent(
            type=ChatEventType.RESPONSE_COMPLETED,
            stream_id=stream_id,
            content="".join(emitted),
        )
