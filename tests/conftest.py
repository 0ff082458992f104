"""Shared pytest fixtures for Pitchside tests."""

import random

import pytest
from fastapi.websockets import WebSocketState

from pitchside.simulation import (
    BallMotionEngine,
    EventGenerator,
    MatchOrchestrator,
    MatchState,
    Side,
)
from pitchside.simulation import ball as ball_module
from pitchside.simulation import orchestrator as orchestrator_module


# =============================================================================
# Simulation Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for repeatable runs."""
    return random.Random(1234)


@pytest.fixture
def state() -> MatchState:
    """Fresh match with the home side on the ball."""
    return MatchState(possession=Side.HOME)


@pytest.fixture
def events(rng) -> EventGenerator:
    return EventGenerator(rng)


@pytest.fixture
def engine(rng, events) -> BallMotionEngine:
    return BallMotionEngine(events=events, rng=rng)


@pytest.fixture
def orchestrator(state, rng) -> MatchOrchestrator:
    return MatchOrchestrator(state, rng=rng)


@pytest.fixture
def no_possession_flips(monkeypatch):
    """Disable random possession changes during build-up play."""
    monkeypatch.setattr(ball_module, "POSSESSION_FLIP_CHANCE", 0.0)


@pytest.fixture
def no_incidents(monkeypatch):
    """Disable random fouls, corners and substitutions."""
    monkeypatch.setattr(orchestrator_module, "INCIDENT_CHANCE", 0.0)


# =============================================================================
# Transport Fixtures
# =============================================================================


class FakeWebSocket:
    """Stand-in for a FastAPI WebSocket that records what is sent."""

    def __init__(self, fail_sends: bool = False) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail_sends = fail_sends
        self.sent: list[dict] = []

    async def send_json(self, data: dict) -> None:
        if self.fail_sends:
            raise RuntimeError('Cannot call "send" once a close message has been sent.')
        self.sent.append(data)

    def disconnect(self) -> None:
        self.client_state = WebSocketState.DISCONNECTED
        self.application_state = WebSocketState.DISCONNECTED


@pytest.fixture
def fake_websocket() -> FakeWebSocket:
    return FakeWebSocket()


@pytest.fixture
def make_websocket():
    """Factory for extra fake WebSockets."""
    return FakeWebSocket
