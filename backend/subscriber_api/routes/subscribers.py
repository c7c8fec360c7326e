"""
Subscriber API — Subscriber Route Handlers
============================================

What:  The five subscriber operations: list, get, create, partial update, delete.
How:   Each handler delegates to SubscriberService and returns the result.
       Failures are raised as application exceptions and rendered by the
       global handlers in main.py as {"message": ...}.

Routes are relative to the router mount point (settings.api_prefix):

    GET    /        → 200 [subscriber, ...]        | 500
    GET    /{id}    → 200 subscriber               | 404 | 500
    POST   /        → 201 subscriber (with id)     | 400
    PATCH  /{id}    → 200 subscriber               | 404 | 400 | 500
    DELETE /{id}    → 200 {"message": "Deleted Subscriber"} | 404 | 500

    List and create also answer on the bare mount point ("/subscribers" as well
    as "/subscribers/") so clients are not sent a 307 redirect.

Existence check:
    Handlers keyed by id receive the stored subscriber through the
    `load_subscriber` dependency, which runs before the handler body, so a
    missing id answers 404 without reaching any write.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from subscriber_api.config import settings
from subscriber_api.database import get_db_session
from subscriber_api.models.subscriber import Subscriber
from subscriber_api.schemas.subscriber import (
    MessageResponse,
    SubscriberCreate,
    SubscriberResponse,
    SubscriberUpdate,
)
from subscriber_api.services.subscriber_service import subscriber_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Subscribers"])

_ERRORS = {
    400: {"description": "Rejected by the store", "model": MessageResponse},
    404: {"description": "Subscriber not found", "model": MessageResponse},
    500: {"description": "Store failure", "model": MessageResponse},
}


async def load_subscriber(
    subscriber_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Subscriber:
    """Resolves the `{subscriber_id}` path parameter to a stored subscriber or 404."""
    return await subscriber_service.find_subscriber(db, subscriber_id)


@router.get(
    "/",
    response_model=List[SubscriberResponse],
    response_model_exclude_none=True,
    responses={500: _ERRORS[500]},
    summary="List subscribers",
)
async def list_subscribers(
    db: AsyncSession = Depends(get_db_session),
) -> List[SubscriberResponse]:
    return await subscriber_service.list_subscribers(db)


@router.get(
    "/{subscriber_id}",
    response_model=SubscriberResponse,
    response_model_exclude_none=True,
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
    summary="Get a subscriber by id",
)
async def get_subscriber(
    subscriber: Subscriber = Depends(load_subscriber),
) -> SubscriberResponse:
    return SubscriberResponse.model_validate(subscriber)


@router.post(
    "/",
    response_model=SubscriberResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: _ERRORS[400]},
    summary="Create a subscriber",
)
async def create_subscriber(
    payload: SubscriberCreate,
    db: AsyncSession = Depends(get_db_session),
) -> SubscriberResponse:
    return await subscriber_service.create_subscriber(db, payload)


@router.patch(
    "/{subscriber_id}",
    response_model=SubscriberResponse,
    response_model_exclude_none=True,
    responses=_ERRORS,
    summary="Update some fields of a subscriber",
    description="Only fields present (and not null) in the body change.",
)
async def update_subscriber(
    payload: SubscriberUpdate,
    subscriber: Subscriber = Depends(load_subscriber),
    db: AsyncSession = Depends(get_db_session),
) -> SubscriberResponse:
    return await subscriber_service.update_subscriber(db, subscriber, payload)


@router.delete(
    "/{subscriber_id}",
    response_model=MessageResponse,
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
    summary="Delete a subscriber",
)
async def delete_subscriber(
    subscriber: Subscriber = Depends(load_subscriber),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    message = await subscriber_service.delete_subscriber(db, subscriber)
    return MessageResponse(message=message)


# An empty path is only valid under a non-empty prefix
if settings.api_prefix:
    router.add_api_route(
        "",
        list_subscribers,
        methods=["GET"],
        response_model=List[SubscriberResponse],
        response_model_exclude_none=True,
        include_in_schema=False,
    )
    router.add_api_route(
        "",
        create_subscriber,
        methods=["POST"],
        response_model=SubscriberResponse,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        include_in_schema=False,
    )
