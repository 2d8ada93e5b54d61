from fastapi import APIRouter, Depends
from typing import Any, Dict, List

from constants import ApiRoutes
from dependencies import get_exercise_tracker, read_payload
from schemas import NewUserResult, UserRead
from services.interfaces import IExerciseTracker
from utils.error_handlers import render_result

router = APIRouter()


@router.post(ApiRoutes.NEW_USER, response_model=NewUserResult)
async def create_user(
    payload: Dict[str, Any] = Depends(read_payload),
    tracker: IExerciseTracker = Depends(get_exercise_tracker),
):
    """Register a user. Business failures come back as ``{"error": ...}`` with HTTP 200."""
    result = await tracker.register_user(payload)
    return render_result(result, "Register user")


@router.get(ApiRoutes.USERS, response_model=List[UserRead])
async def list_users(tracker: IExerciseTracker = Depends(get_exercise_tracker)):
    """Every registered user, unpaginated."""
    return await tracker.list_users()
