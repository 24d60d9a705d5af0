"""Column Types — portable SQLAlchemy types shared by ORM models.

Invariants:
    - UTCDateTime always yields timezone-aware UTC datetimes, on backends that
      keep the offset (PostgreSQL) and on those that drop it (SQLite)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that restores UTC on naive values read back."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
