"""
Subscriber API — Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the API contract.
Why:   Request bodies become explicit optional-field records instead of
       free-form dicts; responses serialize ORM objects consistently.
How:   Fields use snake_case in Python and camelCase on the wire
       (`subscribed_to_channel` ⇄ `subscribedToChannel`). Both spellings are
       accepted on input.

Unknown-field policy:
    Request records ignore fields they do not declare. A body like
    {"name": "x", "subscribedToChannel": "y", "favourite": 1} creates a
    subscriber with name and channel only.

Required-field policy:
    Not enforced here. Every field is optional at the schema level; the
    repository checks required fields when saving (see models/subscriber.py).
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SubscriberFields(BaseModel):
    """Fields a client may send on create or update."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    name: Optional[str] = Field(default=None, description="Subscriber display name")
    email: Optional[str] = Field(default=None, description="Contact address")
    subscribed_to_channel: Optional[str] = Field(
        default=None, description="Channel the subscriber follows"
    )

    def supplied_fields(self) -> Dict[str, Any]:
        """
        Fields present in the request with a non-null value, keyed by
        attribute name. Used both to build new subscribers and to merge
        partial updates.
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)


class SubscriberCreate(SubscriberFields):
    """Body of POST /."""


class SubscriberUpdate(SubscriberFields):
    """Body of PATCH /{id}. Omitted or null fields keep their stored value."""


class SubscriberResponse(BaseModel):
    """
    Representation of a stored subscriber.

    Routes serialize with exclude_none, so fields the subscriber does not
    carry are omitted rather than rendered as null.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str = Field(description="Subscriber identifier")
    name: Optional[str] = None
    email: Optional[str] = None
    subscribed_to_channel: Optional[str] = None


class MessageResponse(BaseModel):
    """
    Plain message body. Used for the delete confirmation and for every
    error response: {"message": "..."}.
    """
    message: str = Field(description="Human-readable message")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
