"""
Cooperative cancellation for assistant streams.
"""

import asyncio
import uuid
from dataclasses import dataclass

from .exceptions import StreamNotFoundError


class CancellationToken:
    """
    One-shot cancellation signal checked at each suspension point of a
    response loop.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self, timeout: float) -> bool:
        """
        Suspend for up to timeout seconds, returning early on cancellation.

        Returns:
            True if the token was cancelled before or during the wait.
        """
        if self._event.is_set():
            return True
        try:
            await asyncio.wait_for(self._event.wait(), timeout)
        except asyncio.TimeoutError:
            return self._event.is_set()
        return True


@dataclass
class _Entry:
    owner_id: str
    token: CancellationToken


class StreamRegistry:
    """Tracks in-flight streams so a later request can stop them."""

    def __init__(self) -> None:
        self._streams: dict[str, _Entry] = {}

    def register(self, owner_id: str) -> tuple[str, CancellationToken]:
        """Create a token for a new stream owned by owner_id."""
        stream_id = str(uuid.uuid4())
        token = CancellationToken()
        self._streams[stream_id] = _Entry(owner_id=owner_id, token=token)
        return stream_id, token

    def cancel(self, stream_id: str, owner_id: str) -> None:
        """
        Cancel a stream.

        Raises:
            StreamNotFoundError: If the stream is not registered or belongs
                to someone else.
        """
        entry = self._streams.get(stream_id)
        if entry is None or entry.owner_id != owner_id:
            raise StreamNotFoundError(stream_id)
        entry.token.cancel()

    def unregister(self, stream_id: str) -> None:
        self._streams.pop(stream_id, None)

    def __contains__(self, stream_id: str) -> bool:
        return stream_id in self._streams

    def __len__(self) -> int:
        return len(self._streams)
