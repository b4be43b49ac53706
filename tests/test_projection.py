"""Tests for per-duel projection."""

import pytest
from pydantic import ValidationError

from duelhistory.models.domain import DuelRecord, Participant
from duelhistory.projection.duels import duel_outcome, project_duel, project_duels


class TestProjectDuel:
    """Test viewpoint-relative reshaping of a single duel."""

    def test_viewpoint_won_as_first(self, make_record):
        """Scenario: A wins, viewed as a lowercased A."""
        projection = project_duel(make_record(winner="0xAA"), "0xaa")

        assert projection.duel_id == "d1"
        assert projection.outcome == "you"
        assert projection.opponent_label == "0xBB"
        assert projection.role == "first"

    def test_viewpoint_lost_as_second(self, make_record):
        projection = project_duel(make_record(winner="0xAA"), "0xbb")

        assert projection.outcome == "opponent"
        assert projection.opponent_label == "0xAA"
        assert projection.role == "second"

    def test_opponent_display_name_preferred(self, make_record):
        record = make_record(name_a="alice", name_b="bob")
        assert project_duel(record, "0xAA").opponent_label == "bob"
        assert project_duel(record, "0xBB").opponent_label == "alice"

    def test_first_slot_steps(self, make_record):
        projection = project_duel(make_record(), "0xAA")

        assert projection.your_shot_steps == (1, 2)
        assert projection.your_dodge_steps == (3,)
        assert projection.opponent_shot_steps == (4, 5)
        assert projection.opponent_dodge_steps == (6,)

    def test_second_slot_steps_mirrored(self, make_record):
        projection = project_duel(make_record(), "0xBB")

        assert projection.your_shot_steps == (4, 5)
        assert projection.your_dodge_steps == (6,)
        assert projection.opponent_shot_steps == (1, 2)
        assert projection.opponent_dodge_steps == (3,)

    def test_no_winner_is_undetermined(self, make_record):
        for viewpoint in ("0xAA", "0xBB", "0xCC", ""):
            assert project_duel(make_record(winner=None), viewpoint).outcome == "undetermined"

    def test_empty_winner_is_undetermined(self, make_record):
        assert project_duel(make_record(winner=""), "0xAA").outcome == "undetermined"

    def test_missing_steps_are_empty(self):
        record = DuelRecord(
            duel_id="d2",
            participant_a=Participant(address="0xAA"),
            participant_b=Participant(address="0xBB"),
        )
        projection = project_duel(record, "0xAA")

        assert projection.your_shot_steps == ()
        assert projection.opponent_dodge_steps == ()


class TestNonParticipantProjection:
    """Non-participant viewpoints default to the first-slot perspective."""

    def test_defaults_to_first_slot(self, make_record):
        projection = project_duel(make_record(), "0xCC")

        assert projection.role == "not_participant"
        assert projection.your_shot_steps == (1, 2)
        assert projection.opponent_label == "0xBB"

    def test_outcome_compares_viewpoint_not_slot(self, make_record):
        """A wins, but the viewpoint is not A, so the outcome is opponent."""
        assert project_duel(make_record(winner="0xAA"), "0xCC").outcome == "opponent"

    def test_winner_matching_outsider_is_you(self, make_record):
        assert project_duel(make_record(winner="0xcc"), "0xCC").outcome == "you"


class TestDuelOutcome:
    """Test outcome comparison."""

    def test_case_insensitive_winner(self, make_record):
        assert duel_outcome(make_record(winner="0xBB"), "0xbb") == "you"


class TestProjectDuels:
    """Test ordered projection of many duels."""

    def test_preserves_order(self, make_record):
        records = [make_record(duel_id=f"d{i}") for i in range(5)]
        projections = project_duels(records, "0xAA")

        assert [p.duel_id for p in projections] == ["d0", "d1", "d2", "d3", "d4"]

    def test_idempotent(self, make_record):
        records = [make_record(duel_id="d1", winner="0xAA"), make_record(duel_id="d2")]

        assert project_duels(records, "0xAA") == project_duels(records, "0xAA")

    def test_empty_input(self):
        assert project_duels([], "0xAA") == []

    def test_projection_is_frozen(self, make_record):
        projection = project_duel(make_record(), "0xAA")

        with pytest.raises(ValidationError):
            projection.outcome = "you"


class TestOpaqueStepValues:
    """Step values pass through projection untouched."""

    def _record(self, steps):
        return DuelRecord(
            duel_id="d3",
            participant_a=Participant(address="0xAA"),
            participant_b=Participant(address="0xBB"),
            shot_steps_a=steps,
            dodge_steps_b=steps,
        )

    def test_none_element(self):
        projection = project_duel(self._record((1, None)), "0xAA")

        assert projection.your_shot_steps == (1, None)
        assert projection.opponent_dodge_steps == (1, None)

    def test_float_element(self):
        projection = project_duel(self._record((1.5,)), "0xAA")
        assert projection.your_shot_steps == (1.5,)

    def test_bool_element_not_coerced(self):
        projection = project_duel(self._record((True, "Paces10")), "0xBB")

        assert projection.opponent_shot_steps[0] is True
        assert projection.opponent_shot_steps[1] == "Paces10"
