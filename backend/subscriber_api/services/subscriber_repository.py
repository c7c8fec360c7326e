"""
Subscriber API — Subscriber Repository (Persistence Service)
==============================================================

What:  The five persistence primitives the subscriber handlers rely on:
       find_all, find_by_id, create, save, remove.
Why:   Keeps SQLAlchemy out of the service layer; tests replace this object
       with a mock to simulate any store outcome.
How:   Each call receives the request's AsyncSession. Writes are flushed so
       store errors surface inside the call that caused them; the service
       commits once the write has flushed.

Errors:
    save() raises ValidationError when required fields are missing.
    Everything else (SQLAlchemyError and friends) propagates unchanged; the
    service decides which status it maps to.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from subscriber_api.exceptions import ValidationError
from subscriber_api.models.subscriber import Subscriber, generate_subscriber_id

logger = logging.getLogger(__name__)


class SubscriberRepository:
    """Stateless gateway to the `subscribers` table."""

    async def find_all(self, db: AsyncSession) -> List[Subscriber]:
        """All subscribers, in whatever order the store returns them."""
        result = await db.execute(select(Subscriber))
        return list(result.scalars().all())

    async def find_by_id(self, db: AsyncSession, subscriber_id: str) -> Optional[Subscriber]:
        """The subscriber with this id, or None."""
        return await db.get(Subscriber, subscriber_id)

    def create(self, fields: Dict[str, Any]) -> Subscriber:
        """
        Builds a transient subscriber from `fields` and assigns its id.

        Nothing is written until save() is called.
        """
        return Subscriber(id=generate_subscriber_id(), **fields)

    async def save(self, db: AsyncSession, subscriber: Subscriber) -> Subscriber:
        """
        Persists a new or modified subscriber.

        Raises:
            ValidationError: name missing, or neither subscribedToChannel nor email set
        """
        missing = subscriber.missing_required_fields()
        if missing:
            raise ValidationError(
                message=f"Subscriber validation failed: {', '.join(missing)} is required",
                field=missing[0],
                context={"subscriber_id": subscriber.id},
            )

        db.add(subscriber)
        await db.flush()
        logger.debug("Saved subscriber %s", subscriber.id)
        return subscriber

    async def remove(self, db: AsyncSession, subscriber: Subscriber) -> None:
        """Deletes a persisted subscriber."""
        await db.delete(subscriber)
        await db.flush()
        logger.debug("Removed subscriber %s", subscriber.id)


# ── Singleton Instance ────────────────────────────────────────────────────
subscriber_repository = SubscriberRepository()
