"""Tests for the match clock and orchestrator."""

import random

import pytest

from pitchside.simulation import orchestrator as orchestrator_module
from pitchside.simulation.events import (
    CornerEvent,
    FoulEvent,
    PossessionChangeEvent,
    SubstitutionEvent,
)
from pitchside.simulation.formations import Side, outfield_ids, striker_ids
from pitchside.simulation.orchestrator import ControlAction, MatchOrchestrator
from pitchside.simulation.pitch import Point
from pitchside.simulation.state import MatchState, Score, Shot


class TestTick:
    """Tests for MatchOrchestrator.tick()."""

    def test_scenario_a_thousand_ticks(self, orchestrator, state):
        """1000 ticks from kickoff: ball stays on the pitch, clock reads 100s."""
        for _ in range(1000):
            snapshot = orchestrator.tick()
            assert 0 <= snapshot.ball.x <= 105
            assert 0 <= snapshot.ball.y <= 68
            assert 0 <= state.attack_phase <= 100

        assert snapshot.time == 100.0
        assert state.time_elapsed == 100.0
        assert orchestrator.tick_count == 1000

    def test_clock_capped_at_full_time(self, orchestrator, state):
        state.time_elapsed = 5399.95
        orchestrator.tick()
        assert state.time_elapsed == 5400.0
        orchestrator.tick()
        assert state.time_elapsed == 5400.0

    def test_snapshot_contents(self, orchestrator):
        snapshot = orchestrator.tick()
        data = snapshot.to_dict()

        assert data["type"] == "match_update"
        assert data["time"] == 0.1
        assert data["score"] == {"home": 0, "away": 0}
        assert data["possession"] in ("home", "away")
        assert len(data["players"]) == 22
        assert set(data["ball"]) == {"x", "y"}
        assert "event" in data

    def test_snapshot_is_detached_from_state(self, orchestrator, state):
        snapshot = orchestrator.tick()
        state.ball.x = 1.0
        state.score.home = 9
        assert snapshot.ball.x != 1.0
        assert snapshot.score.home == 0

    def test_event_sent_once_then_cleared(self, orchestrator, state, monkeypatch, no_incidents):
        from pitchside.simulation import ball as ball_module

        monkeypatch.setattr(ball_module, "POSSESSION_FLIP_CHANCE", 1.0)
        snapshot = orchestrator.tick()

        assert isinstance(snapshot.event, PossessionChangeEvent)
        assert state.last_event is None
        assert snapshot.to_dict()["event"]["type"] == "possession_change"

    def test_quiet_tick_has_no_event(self, orchestrator, no_possession_flips, no_incidents):
        snapshot = orchestrator.tick()
        assert snapshot.event is None
        assert snapshot.to_dict()["event"] is None


class TestPause:
    """Tests for the pause/play controls."""

    def test_scenario_c_pause_freezes_clock(self, orchestrator, state):
        orchestrator.tick()
        orchestrator.apply_control(ControlAction.PAUSE)
        assert state.is_playing is False

        for _ in range(20):
            snapshot = orchestrator.tick()
        assert snapshot.time == 0.1

    def test_ball_keeps_moving_while_paused(self, orchestrator, state, no_possession_flips):
        orchestrator.apply_control(ControlAction.PAUSE)
        start = state.ball.copy()
        orchestrator.tick()
        assert state.ball != start

    def test_play_resumes_clock(self, orchestrator, state):
        orchestrator.apply_control(ControlAction.PAUSE)
        orchestrator.tick()
        orchestrator.apply_control(ControlAction.PLAY)
        orchestrator.tick()
        assert state.is_playing is True
        assert state.time_elapsed == 0.1


class TestReset:
    """Tests for reset controls."""

    def test_scenario_d_reset(self, orchestrator, state):
        for _ in range(50):
            orchestrator.tick()
        state.score = Score(home=2, away=1)
        state.shot = Shot(target=Point(105, 34), speed=3.0)
        state.attack_phase = 75

        orchestrator.apply_control(ControlAction.RESET)

        assert state.score == Score(0, 0)
        assert state.time_elapsed == 0.0
        assert state.ball == Point(52.5, 34)
        assert not state.shot_in_progress
        assert state.attack_phase == 0

    def test_reset_keeps_pause(self, orchestrator, state):
        orchestrator.apply_control(ControlAction.PAUSE)
        orchestrator.apply_control(ControlAction.RESET)
        orchestrator.tick()
        assert state.time_elapsed == 0.0


class TestIncidents:
    """Tests for fouls, corners and substitutions."""

    @pytest.fixture
    def always_incident(self, monkeypatch, no_possession_flips):
        monkeypatch.setattr(orchestrator_module, "INCIDENT_CHANCE", 1.0)

    def test_foul_or_corner_for_side_in_possession(self, orchestrator, state, always_incident):
        for _ in range(30):
            snapshot = orchestrator.tick()
            event = snapshot.event
            assert isinstance(event, (FoulEvent, CornerEvent))
            assert event.team is state.possession
            if isinstance(event, FoulEvent):
                assert event.player_id in striker_ids(state.possession)

    def test_substitution_only_on_five_minute_mark(self, always_incident):
        seen = []
        for seed in range(60):
            state = MatchState(possession=Side.HOME, time_elapsed=299.9)
            snapshot = MatchOrchestrator(state, rng=random.Random(seed)).tick()
            assert state.time_elapsed == 300.0
            if isinstance(snapshot.event, SubstitutionEvent):
                seen.append(snapshot.event)

        assert seen
        for event in seen:
            assert event.player_out in outfield_ids(Side.HOME)
            assert 23 <= event.player_in <= 30

    def test_ball_event_takes_precedence(self, orchestrator, state, monkeypatch):
        from pitchside.simulation import ball as ball_module

        monkeypatch.setattr(ball_module, "POSSESSION_FLIP_CHANCE", 1.0)
        monkeypatch.setattr(orchestrator_module, "INCIDENT_CHANCE", 1.0)

        snapshot = orchestrator.tick()
        assert isinstance(snapshot.event, PossessionChangeEvent)

    @pytest.mark.parametrize(
        ("start", "playing"),
        [(300.0, False), (5400.0, True)],
        ids=["paused-on-mark", "capped-at-full-time"],
    )
    def test_one_substitution_per_mark(self, rng, always_incident, start, playing):
        state = MatchState(possession=Side.HOME, time_elapsed=start, is_playing=playing)
        orchestrator = MatchOrchestrator(state, rng=rng)

        events = [orchestrator.tick().event for _ in range(200)]

        assert state.time_elapsed == start
        substitutions = [e for e in events if isinstance(e, SubstitutionEvent)]
        assert len(substitutions) == 1

    def test_reset_makes_mark_eligible_again(self, orchestrator, state, always_incident):
        state.time_elapsed = 300.0
        state.is_playing = False
        orchestrator._last_substitution_mark = 300.0

        orchestrator.apply_control(ControlAction.RESET)

        assert orchestrator._last_substitution_mark is None
