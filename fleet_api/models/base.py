"""
Shared model helpers.
"""
from datetime import datetime, timezone

from sqlalchemy import Enum as SQLEnum


def utcnow() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def enum_column_type(enum_class, length: int = 20) -> SQLEnum:
    """Store enum values (not member names) in a plain string column."""
    return SQLEnum(
        enum_class,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=length,
        validate_strings=True,
    )
