"""Contacts API - CRUD operations for MsgMorph contacts."""

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

from pydantic import ValidationError

from .errors import new_input_error
from .types import Contact, CreateContactInput, ListContactsParams, UpdateContactInput

if TYPE_CHECKING:
    from .client import MsgMorphClient


CONTACTS_PATH = "/api/v1/contacts"


def _coerce(model: type, value: Any) -> Any:
    """Accept either a model instance or a plain mapping for ``model``."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise new_input_error(exc) from exc


class ContactsAPI:
    """Contacts API for MsgMorph.

    Contacts are the users in your application who can receive feedback
    requests.

    Usage:
        async with MsgMorphClient.from_env() as mm:
            # Create contact
            contact = await mm.contacts.create(
                CreateContactInput(
                    external_id="user-123",
                    email="alice@example.com",
                    project_id="proj-456",
                )
            )

            # List contacts
            contacts = await mm.contacts.list(ListContactsParams(project_id="proj-456"))

            # Get single contact
            contact = await mm.contacts.get("cnt_abc123")

            # Update contact
            contact = await mm.contacts.update("cnt_abc123", {"name": "Alice Johnson"})

            # Delete contact
            await mm.contacts.delete("cnt_abc123")

    IDs are interpolated into paths as-is; pass API-safe identifiers.
    """

    def __init__(self, client: "MsgMorphClient"):
        self._client = client

    async def create(
        self,
        input: CreateContactInput | Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> Contact | None:
        """Create a new contact.

        Args:
            input: externalId, email and projectId are required; name is optional
            timeout: Per-call timeout in seconds

        Returns:
            The created Contact

        Raises:
            MsgMorphError: MISSING_REQUIRED_FIELD if input lacks a required field,
                VALIDATION_ERROR / ALREADY_EXISTS / UNAUTHORIZED from the API
        """
        data = _coerce(CreateContactInput, input)
        return await self._client._request("POST", CONTACTS_PATH, data, Contact, timeout=timeout)

    async def list(
        self,
        params: ListContactsParams | Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> list[Contact]:
        """List all contacts for a project.

        Args:
            params: projectId filter (required)
            timeout: Per-call timeout in seconds
        """
        params = _coerce(ListContactsParams, params)
        path = f"{CONTACTS_PATH}?projectId={params.project_id}"
        contacts = await self._client._request("GET", path, None, list[Contact], timeout=timeout)
        return contacts or []

    async def get(self, contact_id: str, *, timeout: float | None = None) -> Contact | None:
        """Get a single contact by its MsgMorph ID.

        Raises:
            MsgMorphError: NOT_FOUND if the contact doesn't exist
        """
        return await self._client._request(
            "GET", f"{CONTACTS_PATH}/{contact_id}", None, Contact, timeout=timeout
        )

    async def update(
        self,
        contact_id: str,
        input: UpdateContactInput | Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> Contact | None:
        """Update an existing contact. Only provided, non-empty fields change."""
        data = _coerce(UpdateContactInput, input)
        return await self._client._request(
            "PATCH", f"{CONTACTS_PATH}/{contact_id}", data, Contact, timeout=timeout
        )

    async def delete(self, contact_id: str, *, timeout: float | None = None) -> None:
        """Delete a contact. This is permanent."""
        await self._client._request("DELETE", f"{CONTACTS_PATH}/{contact_id}", timeout=timeout)
