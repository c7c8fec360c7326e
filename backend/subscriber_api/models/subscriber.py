"""
Subscriber API — Subscriber SQLAlchemy Model
==============================================

What:  ORM model representing the `subscribers` table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by SubscriberRepository for CRUD operations and by Alembic.

Table Design:
    - id: UUID4 rendered as text, generated in Python so every dialect
      (PostgreSQL in production, SQLite in tests) stores the same value
    - name: Required on save
    - email / subscribed_to_channel: Optional individually; at least one of
      them must be present on save
"""

import uuid
from typing import List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from subscriber_api.database import Base


def generate_subscriber_id() -> str:
    return str(uuid.uuid4())


class Subscriber(Base):
    """
    A subscriber record.

    Lifecycle:
        1. Built by SubscriberRepository.create() with a fresh id (transient)
        2. Persisted by SubscriberRepository.save()
        3. Mutated in place by partial updates, then saved again
        4. Deleted by SubscriberRepository.remove()
    """

    __tablename__ = "subscribers"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_subscriber_id,
        comment="Opaque identifier assigned at creation; immutable",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Subscriber display name",
    )

    email: Mapped[str | None] = mapped_column(
        String(320),
        nullable=True,
        default=None,
        comment="Contact address",
    )

    subscribed_to_channel: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Channel the subscriber follows",
    )

    def missing_required_fields(self) -> List[str]:
        """
        Returns the JSON names of required fields that are empty.

        `name` is always required; a subscriber must also carry at least one
        of `subscribedToChannel` or `email`.
        """
        missing = []
        if not self.name:
            missing.append("name")
        if not self.subscribed_to_channel and not self.email:
            missing.append("subscribedToChannel or email")
        return missing

    def __repr__(self) -> str:
        return f"<Subscriber(id={self.id}, name='{self.name}')>"
