"""Resource data types for the MsgMorph API.

Models use snake_case attributes and camelCase wire names, and accept either
form on construction:

    CreateContactInput(external_id="user-123", email="a@example.com", project_id="proj-1")
    CreateContactInput.model_validate({"externalId": "user-123", ...})
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


T = TypeVar("T")


def wire_payload(model: BaseModel) -> dict:
    """JSON-ready dict with wire names; unset optional fields are dropped."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        return wire_payload(self)


class Contact(_Model):
    """A user tracked by MsgMorph who can receive feedback requests."""

    id: str = ""
    # Your system's user ID
    external_id: str = Field("", alias="externalId")
    email: str = ""
    name: str | None = None
    project_id: str = Field("", alias="projectId")
    feedback_sent: bool = Field(False, alias="feedbackSent")
    feedback_scheduled_at: datetime | None = Field(None, alias="feedbackScheduledAt")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class CreateContactInput(_Model):
    """Parameters for creating a contact.

    ``external_id`` links the contact to a user in your system and must be
    unique per project.
    """

    external_id: str = Field(alias="externalId")
    email: str
    project_id: str = Field(alias="projectId")
    name: str | None = None

    @field_validator("name")
    @classmethod
    def _blank_name(cls, v: str | None) -> str | None:
        return v or None


class UpdateContactInput(_Model):
    """Fields to change on a contact. Omitted or empty fields are left as-is."""

    email: str | None = None
    name: str | None = None

    @field_validator("email", "name")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        return v or None


class ListContactsParams(_Model):
    """Filter for listing contacts."""

    project_id: str = Field(alias="projectId")


class APIResponse(BaseModel, Generic[T]):
    """Standard ``{data, error}`` envelope some MsgMorph endpoints use."""

    data: T | None = None
    error: str | None = None
