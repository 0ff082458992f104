"""Match service running one simulated match per WebSocket connection."""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from fastapi import WebSocket, WebSocketDisconnect
from fastapi.websockets import WebSocketState

from pitchside.api.schemas.match import MatchUpdateMessage
from pitchside.simulation import ControlAction, MatchOrchestrator, MatchSnapshot, MatchState

logger = logging.getLogger(__name__)


DEFAULT_TICK_INTERVAL = 0.1  # 100ms = 10 ticks per second


class MatchService:
    """
    Owns one match and pushes a snapshot to its WebSocket every tick.

    The tick loop checks the connection before each tick and skips the
    tick entirely when the socket is no longer connected. Send failures
    are logged and not retried.
    """

    def __init__(
        self,
        websocket: Optional[WebSocket] = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        seed: Optional[int] = None,
    ) -> None:
        self.rng = random.Random(seed)
        self.state = MatchState.kickoff(self.rng)
        self.orchestrator = MatchOrchestrator(self.state, rng=self.rng)
        self.tick_interval = tick_interval
        self._websocket = websocket
        self._is_running = False
        self._tick_task: Optional[asyncio.Task] = None
        self.ticks_sent = 0
        self.ticks_skipped = 0

    @property
    def is_running(self) -> bool:
        """Check if tick loop is running."""
        return self._is_running

    @property
    def is_connected(self) -> bool:
        ws = self._websocket
        return (
            ws is not None
            and ws.client_state == WebSocketState.CONNECTED
            and ws.application_state == WebSocketState.CONNECTED
        )

    async def start(self) -> None:
        """Start the tick loop."""
        if self._is_running:
            return

        self._is_running = True
        self._tick_task = asyncio.create_task(self._tick_loop())

    async def stop(self) -> None:
        """Stop the tick loop."""
        self._is_running = False
        if self._tick_task:
            self._tick_task.cancel()
            try:
                await self._tick_task
            except asyncio.CancelledError:
                pass
            self._tick_task = None

    async def _tick_loop(self) -> None:
        """Main tick loop - one simulation step per interval."""
        while self._is_running:
            try:
                await self.run_tick()
                await asyncio.sleep(self.tick_interval)
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("Match tick loop failed at %.1fs", self.state.time_elapsed)
                self._is_running = False
                break

    async def run_tick(self) -> Optional[MatchSnapshot]:
        """
        Run one tick and send its snapshot.

        Returns:
            The snapshot, or None if the tick was skipped because the
            connection is not live
        """
        if not self.is_connected:
            self.ticks_skipped += 1
            return None

        snapshot = self.orchestrator.tick()
        await self._send_snapshot(snapshot)
        return snapshot

    async def _send_snapshot(self, snapshot: MatchSnapshot) -> None:
        message = MatchUpdateMessage.from_snapshot(snapshot)
        try:
            await self._websocket.send_json(message.model_dump(mode="json"))
            self.ticks_sent += 1
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            logger.warning("Dropped match update at %.1fs: %s", snapshot.time, e)

    def detach_websocket(self) -> None:
        """Detach the WebSocket."""
        self._websocket = None

    # === Controls ===

    def apply_control(self, action: ControlAction) -> None:
        self.orchestrator.apply_control(action)


@dataclass
class MatchSession:
    """A connected client and the match it is watching."""

    session_id: UUID
    service: MatchService
    websocket: Optional[WebSocket] = None
    created_at: datetime = field(default_factory=datetime.now)

    async def start(self) -> None:
        """Start the session."""
        await self.service.start()

    async def stop(self) -> None:
        """Stop the session."""
        await self.service.stop()


class MatchSessionManager:
    """Manages active match sessions, one per connection."""

    def __init__(
        self,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        seed: Optional[int] = None,
    ) -> None:
        self.tick_interval = tick_interval
        self.seed = seed
        self._sessions: dict[UUID, MatchSession] = {}

    async def create_session(self, websocket: WebSocket) -> MatchSession:
        """Create a session with a freshly kicked-off match and start its tick loop."""
        service = MatchService(
            websocket=websocket,
            tick_interval=self.tick_interval,
            seed=self.seed,
        )
        session = MatchSession(session_id=uuid4(), service=service, websocket=websocket)

        self._sessions[session.session_id] = session
        await session.start()

        logger.info(
            "Match session %s started (%s kicks off)",
            session.session_id, service.state.possession.value,
        )
        return session

    def get_session(self, session_id: UUID) -> Optional[MatchSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    async def remove_session(self, session_id: UUID) -> None:
        """Remove and stop a session."""
        session = self._sessions.pop(session_id, None)
        if session:
            await session.stop()
            session.service.detach_websocket()
            session.websocket = None
            logger.info(
                "Match session %s closed after %d ticks",
                session_id, session.service.ticks_sent,
            )

    @property
    def active_sessions(self) -> list[UUID]:
        """Get list of active session IDs."""
        return list(self._sessions.keys())

    async def cleanup_all(self) -> None:
        """Stop all sessions."""
        for session_id in list(self._sessions):
            await self.remove_session(session_id)
