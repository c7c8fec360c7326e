"""
Subscriber API — Subscriber Service (Outcome Mapping)
=======================================================

What:  Turns each subscriber operation into one or two repository calls and
       classifies whatever goes wrong.
Why:   Routes stay HTTP-only; the error-to-status policy lives in one place.
Who:   Called by route handlers and by the `load_subscriber` dependency.

Error policy (what each operation raises when the store fails):

    Operation | missing id     | store failure
    ----------+----------------+-----------------------------------------
    list      | —              | StoreUnavailableError (500)
    find      | NotFoundError  | StoreUnavailableError (500)
    create    | —              | ValidationError (400)
    update    | (via find)     | ValidationError (400)
    delete    | (via find)     | StoreUnavailableError (500)

    Application errors raised by the repository pass through unchanged.
    Foreign exceptions are wrapped, keeping str(exc) as the message.

    Writes commit inside the same try block as the repository call, so a
    failing commit gets the same status as the write it belongs to.

Concurrency:
    The service holds no state. Update and delete are find-then-write with
    nothing to undo if the write fails; concurrent updates are last-write-wins.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from subscriber_api.exceptions import (
    NotFoundError,
    StoreUnavailableError,
    SubscriberAPIError,
    ValidationError,
)
from subscriber_api.models.subscriber import Subscriber
from subscriber_api.schemas.subscriber import (
    SubscriberCreate,
    SubscriberResponse,
    SubscriberUpdate,
)
from subscriber_api.services.subscriber_repository import subscriber_repository

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Deleted Subscriber"


def _error_message(exc: Exception) -> str:
    # Some driver errors stringify to ""; fall back to the class name
    return str(exc) or type(exc).__name__


class SubscriberService:
    """
    Business logic for subscriber operations.

    Every method takes the request's session; the service itself is stateless
    and shared as a module-level singleton.
    """

    async def list_subscribers(self, db: AsyncSession) -> List[SubscriberResponse]:
        """
        All subscribers in store order.

        Raises:
            StoreUnavailableError: the store failed the read (→ 500)
        """
        try:
            subscribers = await subscriber_repository.find_all(db)
        except SubscriberAPIError:
            raise
        except Exception as e:
            logger.error("Store error listing subscribers: %s", e, exc_info=True)
            raise StoreUnavailableError(
                message=_error_message(e),
                context={"error_type": type(e).__name__},
            )

        return [SubscriberResponse.model_validate(s) for s in subscribers]

    async def find_subscriber(self, db: AsyncSession, subscriber_id: str) -> Subscriber:
        """
        The existence check shared by get, update and delete.

        Raises:
            NotFoundError: no subscriber has this id (→ 404)
            StoreUnavailableError: the lookup itself failed (→ 500)
        """
        try:
            subscriber = await subscriber_repository.find_by_id(db, subscriber_id)
        except SubscriberAPIError:
            raise
        except Exception as e:
            logger.error("Store error fetching subscriber %s: %s", subscriber_id, e)
            raise StoreUnavailableError(
                message=_error_message(e),
                context={"subscriber_id": subscriber_id, "error_type": type(e).__name__},
            )

        if subscriber is None:
            raise NotFoundError(resource="Subscriber", resource_id=subscriber_id)
        return subscriber

    async def create_subscriber(
        self, db: AsyncSession, payload: SubscriberCreate
    ) -> SubscriberResponse:
        """
        Builds a subscriber from the payload and saves it.

        Raises:
            ValidationError: required fields missing, or the store rejected the save (→ 400)
        """
        try:
            subscriber = subscriber_repository.create(payload.supplied_fields())
            saved = await subscriber_repository.save(db, subscriber)
            await db.commit()
        except SubscriberAPIError:
            raise
        except Exception as e:
            logger.warning("Store rejected new subscriber: %s", e)
            raise ValidationError(
                message=_error_message(e),
                context={"error_type": type(e).__name__},
            )

        logger.info("Created subscriber %s", saved.id)
        return SubscriberResponse.model_validate(saved)

    async def update_subscriber(
        self, db: AsyncSession, subscriber: Subscriber, payload: SubscriberUpdate
    ) -> SubscriberResponse:
        """
        Merges the supplied fields into an existing subscriber and saves it.

        Fields left out of the payload (or sent as null) keep their value.

        Raises:
            ValidationError: the store rejected the save (→ 400)
        """
        for field, value in payload.supplied_fields().items():
            setattr(subscriber, field, value)

        try:
            saved = await subscriber_repository.save(db, subscriber)
            await db.commit()
        except SubscriberAPIError:
            raise
        except Exception as e:
            logger.warning("Store rejected update of subscriber %s: %s", subscriber.id, e)
            raise ValidationError(
                message=_error_message(e),
                context={"subscriber_id": subscriber.id, "error_type": type(e).__name__},
            )

        return SubscriberResponse.model_validate(saved)

    async def delete_subscriber(self, db: AsyncSession, subscriber: Subscriber) -> str:
        """
        Removes an existing subscriber and returns the confirmation message.

        Raises:
            StoreUnavailableError: the store failed the removal (→ 500)
        """
        try:
            await subscriber_repository.remove(db, subscriber)
            await db.commit()
        except SubscriberAPIError:
            raise
        except Exception as e:
            logger.error("Store error deleting subscriber %s: %s", subscriber.id, e)
            raise StoreUnavailableError(
                message=_error_message(e),
                context={"subscriber_id": subscriber.id, "error_type": type(e).__name__},
            )

        logger.info("Deleted subscriber %s", subscriber.id)
        return DELETED_MESSAGE


# ── Singleton Instance ────────────────────────────────────────────────────
subscriber_service = SubscriberService()
