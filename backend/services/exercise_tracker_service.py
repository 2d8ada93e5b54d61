"""
Exercise Tracker Service

Business logic behind the exercise API: registration, exercise append,
log query and user listing. Each operation validates raw input, talks to
the repositories and shapes the response. Failures are returned as
``Result`` values so endpoints can render them as soft errors.
"""

from typing import Any, List, Mapping

from constants import ErrorMessages
from domain.value_objects import ExerciseDate
from dtos.internal import ExerciseDraft, LogQuery
from exceptions import NotFoundError, StorageConstraintError
from models import Exercise, ExerciseUser
from repositories.exercise_repository import ExerciseRepository
from repositories.exercise_specifications import (
    ExercisesAfterSpec,
    ExercisesBeforeSpec,
    ExercisesByUserSpec,
)
from repositories.specifications import Specification, all_of
from repositories.user_repository import UserRepository
from schemas import ExerciseAdded, ExerciseLog, LogEntry, NewUserResponse, UserRead
from services.interfaces import IExerciseTracker
from services.result import Result
from services.validation import (
    parse_date,
    validate_log_query,
    validate_new_exercise,
    validate_new_user,
)
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


def render_duration(minutes: float) -> int | float:
    """Whole minutes go out as integers (30, not 30.0)."""
    return int(minutes) if float(minutes).is_integer() else minutes


def build_log_spec(query: LogQuery, upper_bound_requires_from: bool = True) -> Specification[Exercise]:
    """
    Build the log filter for a validated query.

    Starts from "owned by this user", adds ``date > from`` when a lower
    bound is present and ``date < to`` when an upper bound is present.

    With ``upper_bound_requires_from`` (the default) the upper bound is only
    applied when a lower bound is also present, so ``to`` on its own is
    ignored. This reproduces the long-standing behavior of the log endpoint;
    pass False to apply ``to`` independently.

    Args:
        query: Validated log query
        upper_bound_requires_from: Gate the upper bound on the lower bound

    Returns:
        Combined specification
    """
    specs: List[Specification[Exercise]] = [ExercisesByUserSpec(query.user_id)]
    if query.date_from is not None:
        specs.append(ExercisesAfterSpec(query.date_from.value))
    apply_upper = query.date_from is not None if upper_bound_requires_from else True
    if query.date_to is not None and apply_upper:
        specs.append(ExercisesBeforeSpec(query.date_to.value))
    return all_of(specs)


class ExerciseTrackerService(IExerciseTracker):
    """Service for exercise-log business logic."""

    def __init__(
        self,
        user_repo: UserRepository,
        exercise_repo: ExerciseRepository,
        upper_bound_requires_from: bool = True
    ):
        """
        Initialize ExerciseTrackerService.

        Args:
            user_repo: Repository for users
            exercise_repo: Repository for exercise entries (same session as user_repo)
            upper_bound_requires_from: See ``build_log_spec``
        """
        self.user_repo = user_repo
        self.exercise_repo = exercise_repo
        self.upper_bound_requires_from = upper_bound_requires_from

    @log_operation("register_user")
    async def register_user(self, payload: Mapping[str, Any]) -> Result[NewUserResponse]:
        validated = validate_new_user(payload)
        if not validated.ok:
            return Result.failure(validated.error)

        try:
            user = await self.user_repo.create_user(validated.value)
            await self.user_repo.commit()
        except StorageConstraintError as e:
            return Result.failure(e)

        logger.info("User registered", extra={"user_id": user.id})
        return Result.success(NewUserResponse(username=user.username, id=user.id))

    @log_operation("add_exercise")
    async def add_exercise(self, payload: Mapping[str, Any]) -> Result[ExerciseAdded]:
        validated = validate_new_exercise(payload)
        if not validated.ok:
            return Result.failure(validated.error)
        draft: ExerciseDraft = validated.value

        user = await self.user_repo.find_user(draft.user_id)
        if user is None:
            return Result.failure(self._user_not_found(draft.user_id))

        date = parse_date(draft.raw_date)
        if not date.ok:
            return Result.failure(date.error)

        try:
            exercise = await self.exercise_repo.add_exercise(
                user_id=user.id,
                description=draft.description,
                duration=draft.duration,
                date=date.value.value if date.value else None,
            )
            await self.exercise_repo.commit()
        except StorageConstraintError as e:
            return Result.failure(e)

        logger.info("Exercise stored", extra={"user_id": user.id, "exercise_id": exercise.id})
        return Result.success(ExerciseAdded(
            id=user.id,
            username=user.username,
            description=exercise.description,
            duration=render_duration(exercise.duration),
            date=ExerciseDate(exercise.date).to_calendar_string(),
        ))

    @log_operation("get_log")
    async def get_log(self, params: Mapping[str, Any]) -> Result[ExerciseLog]:
        validated = validate_log_query(params)
        if not validated.ok:
            return Result.failure(validated.error)
        query: LogQuery = validated.value

        user = await self.user_repo.find_user(query.user_id)
        if user is None:
            return Result.failure(self._user_not_found(query.user_id))

        # Filter on the stored id, not the caller's spelling of it
        spec = build_log_spec(
            LogQuery(user_id=user.id, date_from=query.date_from, date_to=query.date_to, limit=query.limit),
            upper_bound_requires_from=self.upper_bound_requires_from,
        )
        entries = await self.exercise_repo.find(spec, limit=query.limit)

        log = [self._to_log_entry(entry) for entry in entries]
        return Result.success(ExerciseLog(id=user.id, username=user.username, log=log, count=len(log)))

    @log_operation("list_users")
    async def list_users(self) -> List[UserRead]:
        users = await self.user_repo.list_users()
        return [self._to_user_read(user) for user in users]

    @staticmethod
    def _user_not_found(user_id: str) -> NotFoundError:
        return NotFoundError(ErrorMessages.USER_NOT_FOUND, resource="ExerciseUser", identifier=user_id)

    @staticmethod
    def _to_log_entry(exercise: Exercise) -> LogEntry:
        return LogEntry(
            description=exercise.description,
            duration=render_duration(exercise.duration),
            date=ExerciseDate(exercise.date).to_timestamp_string(),
        )

    @staticmethod
    def _to_user_read(user: ExerciseUser) -> UserRead:
        return UserRead(id=user.id, username=user.username)
