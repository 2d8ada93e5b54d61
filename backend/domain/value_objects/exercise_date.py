"""
ExerciseDate Value Object

Immutable occurrence date of an exercise entry, stored as naive UTC, with
the two textual renderings the API exposes.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from constants import DateFormats


@dataclass(frozen=True)
class ExerciseDate:
    """
    Immutable exercise date value object.

    Always holds a naive datetime in UTC. Aware datetimes are converted
    on construction.
    """

    value: datetime

    def __post_init__(self):
        """Normalize to naive UTC."""
        if not isinstance(self.value, datetime):
            raise ValueError(f"Exercise date must be a datetime: {self.value!r}")
        if self.value.tzinfo is not None:
            naive = self.value.astimezone(timezone.utc).replace(tzinfo=None)
            object.__setattr__(self, "value", naive)

    @classmethod
    def parse(cls, raw: str) -> "ExerciseDate":
        """
        Parse an ISO 8601 date or date-time string.

        A bare date ("2024-01-31") is midnight UTC. A trailing "Z" is
        accepted as UTC. Date-times without an offset are taken as UTC.

        Args:
            raw: Date string from the request

        Returns:
            ExerciseDate instance

        Raises:
            ValueError: If the string is not a valid calendar date
            OverflowError: If applying the UTC offset leaves the supported range
        """
        text = str(raw).strip()
        if not text:
            raise ValueError("Empty date string")
        if text[-1] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        return cls(datetime.fromisoformat(text))

    @classmethod
    def now(cls) -> "ExerciseDate":
        """Current instant."""
        return cls(datetime.now(timezone.utc))

    def to_calendar_string(self) -> str:
        """
        Format as a calendar date.

        Returns:
            String like "Mon Jan 01 2024"
        """
        return self.value.strftime(DateFormats.CALENDAR)

    def to_timestamp_string(self) -> str:
        """
        Format as a full UTC timestamp with millisecond precision.

        Returns:
            String like "2024-01-01T00:00:00.000Z"
        """
        millis = self.value.microsecond // 1000
        return f"{self.value.strftime(DateFormats.TIMESTAMP)}.{millis:03d}Z"

    def __str__(self) -> str:
        """String representation."""
        return self.to_timestamp_string()

