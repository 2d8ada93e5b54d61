"""
Exercise-specific Specifications

Concrete specifications for querying a user's exercise log.
"""

from datetime import datetime
from models import Exercise
from .specifications import Specification


class ExercisesByUserSpec(Specification[Exercise]):
    """Exercises owned by a specific user."""

    def __init__(self, user_id: str):
        """
        Initialize specification.

        Args:
            user_id: Owning user ID
        """
        self.user_id = user_id

    def is_satisfied_by(self, exercise: Exercise) -> bool:
        return exercise.user_id == self.user_id

    def to_sql_filter(self):
        return Exercise.user_id == self.user_id


class ExercisesAfterSpec(Specification[Exercise]):
    """Exercises dated strictly after a bound."""

    def __init__(self, date: datetime):
        """
        Initialize specification.

        Args:
            date: Exclusive lower bound (naive UTC)
        """
        self.date = date

    def is_satisfied_by(self, exercise: Exercise) -> bool:
        return exercise.date > self.date

    def to_sql_filter(self):
        return Exercise.date > self.date


class ExercisesBeforeSpec(Specification[Exercise]):
    """Exercises dated strictly before a bound."""

    def __init__(self, date: datetime):
        """
        Initialize specification.

        Args:
            date: Exclusive upper bound (naive UTC)
        """
        self.date = date

    def is_satisfied_by(self, exercise: Exercise) -> bool:
        return exercise.date < self.date

    def to_sql_filter(self):
        return Exercise.date < self.date
