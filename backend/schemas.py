from pydantic import BaseModel, Field
from typing import List, Union


# Response Schemas
#
# Record ids go out on the wire as ``_id``. The models accept either the
# alias or the field name so services can build them with ``id=...``.

class NewUserResponse(BaseModel):
    """Body returned by a successful registration"""
    username: str
    id: str = Field(alias="_id")

    class Config:
        populate_by_name = True


class UserRead(BaseModel):
    """One entry of the user listing"""
    id: str = Field(alias="_id")
    username: str

    class Config:
        populate_by_name = True
        from_attributes = True


class ExerciseAdded(BaseModel):
    """
    Body returned by a successful add-exercise call.

    ``_id`` and ``username`` are the owning user's. ``date`` is a calendar
    date string ("Mon Jan 01 2024"), not a timestamp.
    """
    id: str = Field(alias="_id")
    username: str
    description: str
    duration: Union[int, float]
    date: str

    class Config:
        populate_by_name = True


class LogEntry(BaseModel):
    """One line of a user's log; ``date`` is a full UTC timestamp"""
    description: str
    duration: Union[int, float]
    date: str


class ExerciseLog(BaseModel):
    """A user's filtered exercise log"""
    id: str = Field(alias="_id")
    username: str
    log: List[LogEntry]
    count: int

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Soft error: returned with HTTP 200"""
    error: str


NewUserResult = Union[NewUserResponse, ErrorResponse]
ExerciseAddedResult = Union[ExerciseAdded, ErrorResponse]
ExerciseLogResult = Union[ExerciseLog, ErrorResponse]
