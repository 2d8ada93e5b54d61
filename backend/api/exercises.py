from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, Optional

from constants import ApiRoutes, FieldNames
from dependencies import get_exercise_tracker, read_payload
from schemas import ExerciseAddedResult, ExerciseLogResult
from services.interfaces import IExerciseTracker
from utils.error_handlers import render_result

router = APIRouter()


@router.post(ApiRoutes.ADD, response_model=ExerciseAddedResult)
async def add_exercise(
    payload: Dict[str, Any] = Depends(read_payload),
    tracker: IExerciseTracker = Depends(get_exercise_tracker),
):
    """
    Append an exercise to a user's log.

    The response echoes the owner's ``_id`` and ``username`` and renders
    ``date`` as a calendar date ("Mon Jan 01 2024").
    """
    result = await tracker.add_exercise(payload)
    return render_result(result, "Add exercise")


@router.get(ApiRoutes.LOG, response_model=ExerciseLogResult)
async def get_log(
    user_id: Optional[str] = Query(None, alias=FieldNames.USER_ID),
    date_from: Optional[str] = Query(None, alias=FieldNames.FROM, description="Exclusive lower date bound"),
    date_to: Optional[str] = Query(None, alias=FieldNames.TO, description="Exclusive upper date bound; ignored without 'from' unless configured otherwise"),
    limit: Optional[str] = Query(None, alias=FieldNames.LIMIT, description="Maximum number of log lines"),
    tracker: IExerciseTracker = Depends(get_exercise_tracker),
):
    """A user's exercise log with optional date bounds and cap."""
    params = {
        FieldNames.USER_ID: user_id,
        FieldNames.FROM: date_from,
        FieldNames.TO: date_to,
        FieldNames.LIMIT: limit,
    }
    result = await tracker.get_log(params)
    return render_result(result, "Exercise log")
