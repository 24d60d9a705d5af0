"""User ORM — the only persisted entity: an account record.

Invariants:
    - id is a UUID primary key generated on insert, never reassigned
    - email is unique at the storage level (uq_users_email)
    - name and email are non-nullable; bio and profile_picture are optional
    - created_at is set once on insert, always read back as UTC, and drives
      default list ordering
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from user_api.db.base import Base
from user_api.db.types import UTCDateTime


class User(Base):
    """User account."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_picture: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
