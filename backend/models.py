from sqlalchemy import Column, String, Float, Text, DateTime, ForeignKey, CheckConstraint, Index
from datetime import datetime, timezone
from database import Base
from utils.uuid_helper import generate_uuid


def utcnow() -> datetime:
    """Current instant as naive UTC, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ExerciseUser(Base):
    """A registered user. Created once, never updated."""
    __tablename__ = 'exercise_users'

    id = Column(String, primary_key=True, default=generate_uuid)
    username = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("username != ''", name='ck_exercise_users_username_not_empty'),
    )

    def check_constraints(self) -> dict[str, str]:
        """Field-level schema checks run before every insert."""
        errors = {}
        if not self.username:
            errors['username'] = "Path `username` is required."
        return errors


class Exercise(Base):
    """
    One logged activity owned by an ExerciseUser.

    ``date`` is the occurrence date (naive UTC). When the caller does not
    supply one, the column default assigns the write time.
    """
    __tablename__ = 'exercises'

    id = Column(String, primary_key=True, default=generate_uuid)
    user_id = Column(String, ForeignKey('exercise_users.id'), nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(Float, nullable=False)  # Minutes
    date = Column(DateTime, nullable=False, default=utcnow)
    created_at = Column(DateTime, nullable=False, default=utcnow)  # Insertion order for log reads

    __table_args__ = (
        CheckConstraint("description != ''", name='ck_exercises_description_not_empty'),
        CheckConstraint("duration > 0", name='ck_exercises_duration_positive'),
        Index('idx_exercises_user_date', 'user_id', 'date'),
    )

    def check_constraints(self) -> dict[str, str]:
        """Field-level schema checks run before every insert."""
        errors = {}
        if not self.user_id:
            errors['userId'] = "Path `userId` is required."
        if not self.description:
            errors['description'] = "Path `description` is required."
        if self.duration is None:
            errors['duration'] = "Path `duration` is required."
        elif self.duration <= 0:
            errors['duration'] = f"Path `duration` ({self.duration:g}) must be greater than 0."
        return errors
