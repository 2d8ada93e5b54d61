"""
Validation & Coercion

Checks raw request input (JSON or form fields, always untrusted) and coerces
it into typed values before anything reaches persistence. Every function
returns a ``Result``; the first failing check wins.
"""

import math
from typing import Any, Mapping, Optional

from constants import ErrorMessages, FieldNames
from domain.value_objects import ExerciseDate
from dtos.internal import ExerciseDraft, LogQuery
from exceptions import ValidationError
from services.result import Result

# Largest row count SQLite accepts in a LIMIT clause
MAX_LIMIT = 2 ** 63 - 1


def is_missing(value: Any) -> bool:
    """
    True for absent or empty input.

    None, the empty string, zero and False count as missing. The string "0"
    does not.
    """
    return value is None or (isinstance(value, (str, int, float)) and not value)


def to_number(value: Any) -> Optional[float]:
    """
    Coerce request input to a finite float.

    Accepts numbers and numeric strings (surrounding whitespace allowed,
    exponents allowed). Booleans, NaN and infinities are not numbers.

    Args:
        value: Raw field value

    Returns:
        The float, or None if the value is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_duration(value: Any) -> Result[float]:
    number = to_number(value)
    if number is None:
        return Result.failure(ValidationError(
            ErrorMessages.DURATION_NOT_A_NUMBER,
            invalid_fields={FieldNames.DURATION: value}
        ))
    return Result.success(number)


def parse_date(value: Any) -> Result[Optional[ExerciseDate]]:
    """
    Parse an optional date field.

    Args:
        value: Raw field value; missing means "no date"

    Returns:
        Result holding the ExerciseDate, or None when nothing was supplied
    """
    if value is None or value == "":
        return Result.success(None)
    try:
        return Result.success(ExerciseDate.parse(value))
    except (TypeError, ValueError, OverflowError):
        return Result.failure(ValidationError(
            ErrorMessages.INVALID_DATE_FORMAT,
            invalid_fields={"date": value}
        ))


def parse_limit(value: Any) -> Result[Optional[int]]:
    """
    Parse the optional log ``limit``.

    Fractions are truncated and the sign is dropped. Zero means no cap.
    Values beyond MAX_LIMIT are clamped to it.

    Args:
        value: Raw query value

    Returns:
        Result holding the cap, or None for no cap
    """
    if value is None or value == "":
        return Result.success(None)
    number = to_number(value)
    if number is None:
        return Result.failure(ValidationError(
            ErrorMessages.LIMIT_NOT_A_NUMBER,
            invalid_fields={FieldNames.LIMIT: value}
        ))
    limit = min(abs(int(number)), MAX_LIMIT)
    return Result.success(limit or None)


def validate_new_user(payload: Mapping[str, Any]) -> Result[str]:
    """
    Validate a registration request.

    Args:
        payload: Request body fields

    Returns:
        Result holding the username
    """
    username = payload.get(FieldNames.USERNAME)
    if is_missing(username):
        return Result.failure(ValidationError(ErrorMessages.USERNAME_NOT_PROVIDED))
    return Result.success(str(username))


def validate_new_exercise(payload: Mapping[str, Any]) -> Result[ExerciseDraft]:
    """
    Validate an add-exercise request up to, but not including, the user lookup.

    Order: required fields, then duration type. The date is carried raw and
    parsed once the owning user has resolved.

    Args:
        payload: Request body fields

    Returns:
        Result holding an ExerciseDraft
    """
    user_id = payload.get(FieldNames.USER_ID)
    description = payload.get(FieldNames.DESCRIPTION)
    duration = payload.get(FieldNames.DURATION)

    missing = [
        name for name, value in (
            (FieldNames.USER_ID, user_id),
            (FieldNames.DESCRIPTION, description),
            (FieldNames.DURATION, duration),
        )
        if is_missing(value)
    ]
    if missing:
        return Result.failure(ValidationError(
            ErrorMessages.MISSING_REQUIRED_FIELDS,
            invalid_fields={name: "required" for name in missing}
        ))

    raw_date = payload.get(FieldNames.DATE)
    return parse_duration(duration).map(lambda minutes: ExerciseDraft(
        user_id=str(user_id),
        description=str(description),
        duration=minutes,
        raw_date=None if is_missing(raw_date) else str(raw_date),
    ))


def validate_log_query(params: Mapping[str, Any]) -> Result[LogQuery]:
    """
    Validate a log request up to, but not including, the user lookup.

    Order: userId presence, ``from``, ``to``, ``limit``.

    Args:
        params: Query string parameters

    Returns:
        Result holding a LogQuery
    """
    user_id = params.get(FieldNames.USER_ID)
    if is_missing(user_id):
        return Result.failure(ValidationError(ErrorMessages.MISSING_USER_ID))

    date_from = parse_date(params.get(FieldNames.FROM))
    if not date_from.ok:
        return Result.failure(date_from.error)
    date_to = parse_date(params.get(FieldNames.TO))
    if not date_to.ok:
        return Result.failure(date_to.error)

    return parse_limit(params.get(FieldNames.LIMIT)).map(lambda limit: LogQuery(
        user_id=str(user_id),
        date_from=date_from.value,
        date_to=date_to.value,
        limit=limit,
    ))
