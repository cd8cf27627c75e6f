"""Preference ORM — durable key/value store for client preferences.

Invariants:
    - key is the primary key (one row per preference name)
    - value is short text ("dark" / "light" for the theme flag)
    - updated_at refreshed on every write

Design Decisions:
    - Generic key/value row over a dedicated theme column: the theme flag is the
      only persisted preference, but the store stays keyed by a fixed name
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Preference(Base):
    """One persisted preference value."""
    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
