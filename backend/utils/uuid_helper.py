"""
Identifier generation for stored records.

Users and exercises get opaque UUID4 strings as primary keys.
"""
import uuid


def generate_uuid() -> str:
    """
    Generate a new record identifier.

    Returns:
        str: A new UUID4 string
    """
    return str(uuid.uuid4())


def is_valid_uuid(value: str) -> bool:
    """
    Check whether a caller-supplied id has the shape of a record identifier.

    Lookups skip the database for ids that cannot exist.

    Args:
        value: Identifier from the request

    Returns:
        bool: True if value parses as a UUID
    """
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
