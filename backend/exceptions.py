"""
Custom exception classes for the application.

The business endpoints never let these escape: validation, lookup and
storage failures travel as values inside ``services.result.Result`` and are
rendered as soft ``{"error": ...}`` bodies. Anything that does escape is
turned into a plain-text response by ``utils.error_handlers``.
"""

from constants import HTTPStatus


class ApplicationError(Exception):
    """Base exception for all application errors"""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when caller-supplied input fails a precondition"""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a referenced record does not resolve"""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, message: str, resource: str | None = None, identifier: str | None = None):
        details = {}
        if resource:
            details["resource"] = resource
        if identifier:
            details["identifier"] = identifier
        super().__init__(message, details)


class StorageConstraintError(ApplicationError):
    """
    Raised when the persistence layer rejects a write against a schema constraint.

    ``errors`` maps each failing field to its message, in the order the
    fields were checked. The first entry is the one reported to clients.
    """

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, model: str, errors: dict[str, str]):
        self.model = model
        self.errors = dict(errors)
        super().__init__(self.first_message, {"model": model, "errors": self.errors})

    @property
    def first_message(self) -> str:
        if not self.errors:
            return f"{self.model} validation failed"
        return next(iter(self.errors.values()))


class MalformedBodyError(ApplicationError):
    """Raised when a request body cannot be decoded"""

    status_code = HTTPStatus.BAD_REQUEST
