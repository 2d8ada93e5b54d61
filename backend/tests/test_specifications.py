from datetime import datetime

from domain.value_objects import ExerciseDate
from dtos.internal import LogQuery
from models import Exercise
from repositories.exercise_specifications import (
    ExercisesAfterSpec,
    ExercisesBeforeSpec,
    ExercisesByUserSpec,
)
from repositories.specifications import MatchAllSpecification, all_of
from services.exercise_tracker_service import build_log_spec


def make_exercise(user_id="u1", day=1):
    return Exercise(user_id=user_id, description="run", duration=30.0, date=datetime(2024, 1, day))


def test_single_specifications():
    entry = make_exercise(day=10)
    assert ExercisesByUserSpec("u1").is_satisfied_by(entry)
    assert not ExercisesByUserSpec("u2").is_satisfied_by(entry)
    assert ExercisesAfterSpec(datetime(2024, 1, 9)).is_satisfied_by(entry)
    assert ExercisesBeforeSpec(datetime(2024, 1, 11)).is_satisfied_by(entry)


def test_bounds_are_strict():
    entry = make_exercise(day=10)
    assert not ExercisesAfterSpec(datetime(2024, 1, 10)).is_satisfied_by(entry)
    assert not ExercisesBeforeSpec(datetime(2024, 1, 10)).is_satisfied_by(entry)


def test_composition():
    entry = make_exercise(day=10)
    window = ExercisesAfterSpec(datetime(2024, 1, 5)) & ExercisesBeforeSpec(datetime(2024, 1, 15))
    assert window.is_satisfied_by(entry)
    assert not window.is_satisfied_by(make_exercise(day=20))
    mine = all_of([ExercisesByUserSpec("u2"), window])
    assert not mine.is_satisfied_by(entry)


def test_all_of_empty_matches_everything():
    spec = all_of([])
    assert isinstance(spec, MatchAllSpecification)
    assert spec.is_satisfied_by(make_exercise())


def test_sql_filter_renders_columns():
    spec = ExercisesByUserSpec("u1") & ExercisesAfterSpec(datetime(2024, 1, 1))
    sql = str(spec.to_sql_filter())
    assert "exercises.user_id" in sql
    assert "exercises.date >" in sql


def test_log_spec_with_both_bounds():
    query = LogQuery(
        user_id="u1",
        date_from=ExerciseDate.parse("2024-01-05"),
        date_to=ExerciseDate.parse("2024-01-15"),
    )
    spec = build_log_spec(query)
    assert spec.is_satisfied_by(make_exercise(day=10))
    assert not spec.is_satisfied_by(make_exercise(day=20))
    assert not spec.is_satisfied_by(make_exercise(day=2))
    assert not spec.is_satisfied_by(make_exercise(user_id="u2", day=10))


def test_log_spec_ignores_upper_bound_without_lower_bound():
    # 'to' on its own has no effect unless the gate is switched off
    query = LogQuery(user_id="u1", date_to=ExerciseDate.parse("2024-01-15"))
    spec = build_log_spec(query)
    assert spec.is_satisfied_by(make_exercise(day=20))


def test_log_spec_applies_upper_bound_alone_when_ungated():
    query = LogQuery(user_id="u1", date_to=ExerciseDate.parse("2024-01-15"))
    spec = build_log_spec(query, upper_bound_requires_from=False)
    assert spec.is_satisfied_by(make_exercise(day=10))
    assert not spec.is_satisfied_by(make_exercise(day=20))
