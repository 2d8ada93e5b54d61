"""
Internal DTOs

DTOs for passing validated request data between the validation layer and
the service layer. These are not exposed to external APIs.
"""

from .exercise_dto import ExerciseDraft, LogQuery

__all__ = ["ExerciseDraft", "LogQuery"]
