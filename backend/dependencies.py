"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service
instances from the per-request session, following the Dependency Inversion
Principle. Tests override ``get_exercise_tracker`` to swap in a fake.
"""

import logging
from typing import Any, Dict

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import Settings, settings as default_settings
from database import get_db
from exceptions import MalformedBodyError
from constants import ErrorMessages
from repositories.exercise_repository import ExerciseRepository
from repositories.user_repository import UserRepository
from services.exercise_tracker_service import ExerciseTrackerService
from services.interfaces import IExerciseTracker

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_settings(request: Request) -> Settings:
    """Settings the app was built with, falling back to the environment."""
    return getattr(request.app.state, "settings", default_settings)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        UserRepository instance
    """
    return UserRepository(db)


def get_exercise_repository(db: AsyncSession = Depends(get_db)) -> ExerciseRepository:
    """
    Factory function for creating ExerciseRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        ExerciseRepository instance
    """
    return ExerciseRepository(db)


def get_exercise_tracker(
    user_repo: UserRepository = Depends(get_user_repository),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repository),
    app_settings: Settings = Depends(get_settings),
) -> IExerciseTracker:
    """
    Factory function for creating the exercise tracker service.

    FastAPI caches ``get_db`` per request, so both repositories share one
    session.

    Returns:
        IExerciseTracker: Exercise tracker implementation
    """
    return ExerciseTrackerService(
        user_repo,
        exercise_repo,
        upper_bound_requires_from=app_settings.upper_bound_requires_from,
    )


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Read a POST body as a flat dict of fields.

    Form-encoded and multipart bodies are read with ``request.form()``;
    anything else is treated as JSON. An empty body, or a JSON value that is
    not an object, yields no fields.

    Raises:
        MalformedBodyError: If a non-empty body is not valid JSON
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items()}

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected malformed request body on {request.url.path}: {e}")
        raise MalformedBodyError(ErrorMessages.MALFORMED_BODY) from e
    return data if isinstance(data, dict) else {}
