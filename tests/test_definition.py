"""Tests for exercise definitions and named exercise setups."""

import pytest

from hiit.timer import ExerciseDefinition, ExerciseSetup, InvalidDefinitionError


class TestExerciseDefinition:

    def test_valid(self):
        d = ExerciseDefinition(10, 30, 15, 8)
        assert d.warmup_seconds == 10
        assert d.exercise_seconds == 30
        assert d.rest_seconds == 15
        assert d.sets == 8

    def test_zero_warmup_and_rest_allowed(self):
        d = ExerciseDefinition(0, 1, 0, 1)
        assert d.warmup_seconds == 0
        assert d.rest_seconds == 0

    @pytest.mark.parametrize("kwargs", [
        {"exercise_seconds": 0},
        {"sets": 0},
        {"warmup_seconds": -1},
        {"rest_seconds": -5},
        {"sets": -2},
    ])
    def test_out_of_range_rejected(self, kwargs):
        values = {"warmup_seconds": 5, "exercise_seconds": 20, "rest_seconds": 10, "sets": 3}
        values.update(kwargs)
        with pytest.raises(InvalidDefinitionError):
            ExerciseDefinition(**values)

    def test_invalid_definition_is_value_error(self):
        with pytest.raises(ValueError):
            ExerciseDefinition(5, 0, 5, 3)

    @pytest.mark.parametrize("bad", [1.5, "10", None, True])
    def test_non_integers_rejected(self, bad):
        with pytest.raises(TypeError):
            ExerciseDefinition(5, bad, 5, 3)

    def test_immutable(self):
        d = ExerciseDefinition(5, 20, 10, 3)
        with pytest.raises(AttributeError):
            d.sets = 4  # type: ignore[misc]

    def test_longest_phase(self):
        assert ExerciseDefinition(45, 20, 10, 3).longest_phase == 45
        assert ExerciseDefinition(0, 20, 30, 3).longest_phase == 30

    def test_total_ticks(self):
        assert ExerciseDefinition(10, 30, 15, 8).total_ticks == 10 + 8 * 30 + 7 * 15
        assert ExerciseDefinition(0, 30, 0, 2).total_ticks == 1 + 60 + 1


class TestExerciseSetup:

    def test_defaults(self):
        s = ExerciseSetup(name="Burpees")
        assert (s.exercise_seconds, s.rest_seconds, s.sets) == (30, 10, 8)
        assert s.id is None

    def test_name_whitespace_compacted(self):
        s = ExerciseSetup(name="  Mountain   climbers ")
        assert s.name == "Mountain climbers"

    def test_name_truncated(self):
        s = ExerciseSetup(name="x" * 100)
        assert len(s.name) == 60

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidDefinitionError):
            ExerciseSetup(name=name)

    def test_non_string_name_rejected(self):
        with pytest.raises(TypeError):
            ExerciseSetup(name=42)  # type: ignore[arg-type]

    def test_invalid_durations_rejected(self):
        with pytest.raises(InvalidDefinitionError):
            ExerciseSetup(name="Squats", exercise_seconds=0)
        with pytest.raises(InvalidDefinitionError):
            ExerciseSetup(name="Squats", sets=0)

    def test_to_definition_adds_warmup(self):
        s = ExerciseSetup(name="Squats", exercise_seconds=40, rest_seconds=20, sets=5)
        d = s.to_definition(15)
        assert d == ExerciseDefinition(15, 40, 20, 5)

    def test_to_definition_validates_warmup(self):
        s = ExerciseSetup(name="Squats")
        with pytest.raises(InvalidDefinitionError):
            s.to_definition(-1)

    def test_with_id(self):
        s = ExerciseSetup(name="Squats").with_id(7)
        assert s.id == 7
        assert s.name == "Squats"

    def test_summary(self):
        s = ExerciseSetup(name="Squats", exercise_seconds=40, rest_seconds=20, sets=5)
        assert s.summary == "5 × 40s / 20s rest"
