"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- ExerciseDate: Occurrence date of an exercise with its API renderings
"""

from .exercise_date import ExerciseDate

__all__ = ["ExerciseDate"]
