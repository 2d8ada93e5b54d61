"""
Specification Pattern Implementation

Query criteria as small composable objects. A specification can test an
in-memory candidate (``is_satisfied_by``) and render itself as a SQLAlchemy
filter expression (``to_sql_filter``), so the same rule drives both unit
tests and database queries.

Compose with ``&`` or ``all_of``.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from sqlalchemy import and_, true


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single business rule or query criterion.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """

    @abstractmethod
    def to_sql_filter(self):
        """
        Convert specification to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy filter expression
        """

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    """Both specifications must hold."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())


class MatchAllSpecification(Specification[T]):
    """Neutral element for ``&``: matches every candidate."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_sql_filter(self):
        return true()


def all_of(specs: Iterable[Specification[T]]) -> Specification[T]:
    """
    Combine specifications with AND.

    Args:
        specs: Specifications to combine, in order

    Returns:
        The conjunction, or a match-all specification for an empty input
    """
    combined: Specification[T] | None = None
    for spec in specs:
        combined = spec if combined is None else combined & spec
    return combined if combined is not None else MatchAllSpecification()
