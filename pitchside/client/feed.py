"""
Match feed client.

Async consumer for the ``/ws/match`` feed. Reconnects with bounded
exponential backoff when the connection drops, and stops cleanly when the
connection is closed normally (close code 1000).
"""

import asyncio
import inspect
import json
import logging
from typing import Any, Awaitable, Callable, Optional, Union

import websockets
from pydantic import ValidationError
from websockets.exceptions import ConnectionClosed, InvalidHandshake

from pitchside.api.schemas.match import MatchUpdateMessage
from pitchside.exceptions import ReconnectExhaustedError
from pitchside.simulation import ControlAction

logger = logging.getLogger(__name__)


NORMAL_CLOSURE = 1000
ABNORMAL_CLOSURE = 1006

UpdateHandler = Callable[[MatchUpdateMessage], Union[None, Awaitable[None]]]


def reconnect_delay(attempt: int, base_delay: float = 1.0, max_delay: float = 5.0) -> float:
    """Delay before reconnect attempt ``attempt`` (1-based): 1s, 2s, 4s, then capped."""
    return min(base_delay * (2 ** (attempt - 1)), max_delay)


def _close_code(error: ConnectionClosed) -> int:
    if error.rcvd is not None:
        return error.rcvd.code
    return ABNORMAL_CLOSURE


class MatchFeedClient:
    """
    Client for the live match feed.

    Usage:
        client = MatchFeedClient("ws://127.0.0.1:8080/ws/match", on_update=print)
        await client.run()  # Returns after a normal close
    """

    def __init__(
        self,
        url: str,
        on_update: Optional[UpdateHandler] = None,
        base_delay: float = 1.0,
        max_delay: float = 5.0,
        max_attempts: int = 5,
        connect: Callable[[str], Any] = websockets.connect,
    ):
        """
        Initialize the feed client.

        Args:
            url: WebSocket URL of the match feed.
            on_update: Called with every decoded match update.
            base_delay: Delay before the first reconnect attempt.
            max_delay: Upper bound on any reconnect delay.
            max_attempts: Reconnect attempts allowed after a drop.
            connect: Connection factory (``websockets.connect`` by default).
        """
        self.url = url
        self.on_update = on_update
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.max_attempts = max_attempts
        self._connect = connect

        self._ws = None
        self._closing = False
        self.attempts = 0
        self.updates_received = 0
        self.last_update: Optional[MatchUpdateMessage] = None

    @property
    def is_connected(self) -> bool:
        return self._ws is not None

    async def run(self) -> None:
        """
        Consume the feed until it is closed normally.

        Raises:
            ReconnectExhaustedError: If the connection keeps dropping after
                ``max_attempts`` reconnects.
        """
        while True:
            try:
                close_code = await self._consume()
            except (OSError, InvalidHandshake, asyncio.TimeoutError) as e:
                logger.warning("Could not connect to %s: %s", self.url, e)
                close_code = ABNORMAL_CLOSURE

            if close_code == NORMAL_CLOSURE or self._closing:
                logger.info("Match feed closed normally")
                return

            self.attempts += 1
            if self.attempts > self.max_attempts:
                raise ReconnectExhaustedError(
                    f"Gave up on {self.url} after {self.max_attempts} reconnect attempts",
                    attempts=self.max_attempts,
                )

            delay = reconnect_delay(self.attempts, self.base_delay, self.max_delay)
            logger.warning(
                "Match feed dropped (code %s), reconnecting in %.1fs (attempt %d)",
                close_code, delay, self.attempts,
            )
            await asyncio.sleep(delay)

    async def _consume(self) -> int:
        """Read one connection until it closes; return its close code."""
        async with self._connect(self.url) as ws:
            self._ws = ws
            self.attempts = 0
            logger.info("Connected to %s", self.url)
            try:
                while True:
                    raw = await ws.recv()
                    await self._handle(raw)
            except ConnectionClosed as e:
                return _close_code(e)
            finally:
                self._ws = None

    async def _handle(self, raw: Union[str, bytes]) -> None:
        try:
            update = MatchUpdateMessage.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Skipping malformed match update: %s", e.errors()[0]["msg"])
            return

        self.updates_received += 1
        self.last_update = update
        if self.on_update is not None:
            result = self.on_update(update)
            if inspect.isawaitable(result):
                await result

    async def send_control(self, action: ControlAction) -> bool:
        """
        Send a control command to the server.

        Returns:
            False if not connected
        """
        if self._ws is None:
            return False
        await self._ws.send(json.dumps({"type": "control", "action": action.value}))
        return True

    async def close(self) -> None:
        """Close the connection normally, ending ``run``."""
        self._closing = True
        if self._ws is not None:
            await self._ws.close(code=NORMAL_CLOSURE, reason="Client closed")
