"""Tests for the event generator."""

import pytest

from pitchside.exceptions import UnknownEventTypeError
from pitchside.simulation.events import (
    CornerEvent,
    EventType,
    FoulEvent,
    GoalEvent,
    PossessionChangeEvent,
    ShotEvent,
    SubstitutionEvent,
)
from pitchside.simulation.formations import Side


class TestGenerate:
    """Tests for EventGenerator.generate()."""

    def test_goal(self, events, state):
        event = events.generate(state, EventType.GOAL, team=Side.AWAY, player_id=21, x=0.0, y=30.0)

        assert isinstance(event, GoalEvent)
        assert event.message == "Goal! Away team scores!"
        assert (event.x, event.y) == (0.0, 30.0)
        assert event.player_id == 21

    def test_goal_does_not_change_score(self, events, state):
        events.generate(state, EventType.GOAL, team=Side.HOME, player_id=10, x=105.0, y=34.0)
        assert state.score.home == 0

    def test_timestamp_is_match_time(self, events, state):
        state.time_elapsed = 42.5
        event = events.generate(state, EventType.POSSESSION_CHANGE, team=Side.AWAY)
        assert event.timestamp == 42.5

    def test_foul_coordinates_in_range(self, events, state):
        for _ in range(200):
            event = events.generate(state, EventType.FOUL, team=Side.HOME, player_id=10)
            assert isinstance(event, FoulEvent)
            assert event.message == "Foul committed"
            assert 20 <= event.x <= 85
            assert 10 <= event.y <= 58

    def test_corner_on_attacked_goal_line(self, events, state):
        home = events.generate(state, EventType.CORNER, team=Side.HOME)
        away = events.generate(state, EventType.CORNER, team=Side.AWAY)

        assert isinstance(home, CornerEvent)
        assert home.message == "Corner kick"
        assert home.x == 105.0
        assert away.x == 0.0
        assert 10 <= home.y <= 58

    def test_corner_uses_supplied_y(self, events, state):
        event = events.generate(state, EventType.CORNER, team=Side.AWAY, y=3.0)
        assert event.y == 3.0

    def test_shot_uses_supplied_coordinates(self, events, state):
        event = events.generate(state, EventType.SHOT, team=Side.HOME, player_id=11, x=90.0, y=33.0)
        assert isinstance(event, ShotEvent)
        assert event.message == "Shot on goal!"
        assert (event.x, event.y) == (90.0, 33.0)

    def test_shot_random_coordinates_near_goal_mouth(self, events, state):
        event = events.generate(state, EventType.SHOT, team=Side.HOME, player_id=11)
        assert 20 <= event.x <= 85
        assert 24 <= event.y <= 44

    def test_substitution(self, events, state):
        event = events.generate(
            state, EventType.SUBSTITUTION, team=Side.HOME, player_out=7, player_in=24
        )
        assert isinstance(event, SubstitutionEvent)
        assert event.message == "Substitution: Player 7 out, Player 24 in"

    def test_possession_change(self, events, state):
        event = events.generate(state, "possession_change", team=Side.HOME)
        assert isinstance(event, PossessionChangeEvent)
        assert event.message == "Possession changed to Home team"

    def test_overwrites_last_event(self, events, state):
        first = events.generate(state, EventType.FOUL, team=Side.HOME, player_id=10)
        assert state.last_event is first

        second = events.generate(state, EventType.CORNER, team=Side.HOME)
        assert state.last_event is second

    def test_unknown_type_raises(self, events, state):
        with pytest.raises(UnknownEventTypeError, match="offside"):
            events.generate(state, "offside", team=Side.HOME)
        assert state.last_event is None


class TestToDict:
    """Tests for event wire representation."""

    def test_flat_with_type_tag(self, events, state):
        event = events.generate(state, EventType.GOAL, team=Side.HOME, player_id=10, x=105.0, y=30.0)
        assert event.to_dict() == {
            "type": "goal",
            "timestamp": 0.0,
            "message": "Goal! Home team scores!",
            "team": "home",
            "player_id": 10,
            "x": 105.0,
            "y": 30.0,
        }

    def test_only_kind_specific_fields(self, events, state):
        event = events.generate(state, EventType.POSSESSION_CHANGE, team=Side.AWAY)
        assert set(event.to_dict()) == {"type", "timestamp", "message", "team"}
