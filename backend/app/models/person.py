"""Person ORM: persists one row per person in the people table.

Invariants:
    - id is an integer primary key assigned by the store, never updated
    - removed=True marks a soft-deleted row; removed_at is set at the same time
    - created_at set on insert (UTC)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Person(Base):
    """Person entity."""
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    removed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    removed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def mark_removed(self) -> None:
        """Soft delete. Keeps the first removed_at on repeat calls."""
        if self.removed:
            return
        self.removed = True
        self.removed_at = datetime.now(timezone.utc)
