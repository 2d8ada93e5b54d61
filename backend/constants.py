"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application: client-visible error messages, date formats and HTTP status codes.
"""


class ErrorMessages:
    """Client-visible error messages, kept verbatim for API compatibility"""

    USERNAME_NOT_PROVIDED = "Username not provided."
    MISSING_REQUIRED_FIELDS = "Missing required field(s)."
    DURATION_NOT_A_NUMBER = "Duration should be a number."
    USER_NOT_FOUND = "Unable to find user."
    MISSING_USER_ID = "Missing userId."
    INVALID_DATE_FORMAT = "Invalid Date Format"
    LIMIT_NOT_A_NUMBER = "limit is not a number."

    # Hard (plain-text) errors
    NOT_FOUND = "not found"
    INTERNAL_SERVER_ERROR = "Internal Server Error"
    MALFORMED_BODY = "Malformed JSON body."


class FieldNames:
    """Wire names of request and response fields"""

    ID = "_id"
    USERNAME = "username"
    USER_ID = "userId"
    DESCRIPTION = "description"
    DURATION = "duration"
    DATE = "date"
    FROM = "from"
    TO = "to"
    LIMIT = "limit"


class DateFormats:
    """Textual date renderings used in responses"""

    # "Mon Jan 01 2024", returned by the add-exercise endpoint
    CALENDAR = "%a %b %d %Y"
    # "2024-01-01T00:00:00.000Z", returned by the log endpoint
    TIMESTAMP = "%Y-%m-%dT%H:%M:%S"


class ApiRoutes:
    """Route prefix and paths of the exercise API"""

    PREFIX = "/api/exercise"
    NEW_USER = "/new-user"
    USERS = "/users"
    ADD = "/add"
    LOG = "/log"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
