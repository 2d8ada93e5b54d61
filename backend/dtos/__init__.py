"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple request parsing from the database models.

Structure:
- internal/: Validated request data passed from validation to services
"""
