"""
Internal Exercise DTOs

Validated, coerced request data handed from the validation layer to the
exercise tracker service.
"""

from dataclasses import dataclass
from typing import Optional

from domain.value_objects import ExerciseDate


@dataclass(frozen=True)
class ExerciseDraft:
    """
    An exercise entry that passed input validation but is not stored yet.

    ``raw_date`` is parsed only after the owning user resolves. None means
    the store assigns the write time.
    """

    user_id: str
    description: str
    duration: float
    raw_date: Optional[str] = None


@dataclass(frozen=True)
class LogQuery:
    """
    Parsed log query.

    ``limit`` of None means no cap.
    """

    user_id: str
    date_from: Optional[ExerciseDate] = None
    date_to: Optional[ExerciseDate] = None
    limit: Optional[int] = None
