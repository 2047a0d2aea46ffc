"""MsgMorph API client.

MsgMorph is a feedback collection platform; this package manages the
contacts who receive feedback requests.

Usage:
    from msgmorph import MsgMorphClient, CreateContactInput, MsgMorphError

    async with MsgMorphClient.from_env() as mm:
        # Reads MSGMORPH_API_KEY and MSGMORPH_ORGANIZATION_ID
        contact = await mm.contacts.create(
            CreateContactInput(external_id="user-123", email="user@example.com", project_id="proj-1")
        )

Error handling:
    try:
        await mm.contacts.get("cnt_missing")
    except MsgMorphError as err:
        print(err.code, err.status, err.hint)
        if err.is_not_found:
            ...
"""

from .client import MsgMorphClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MsgMorphSettings
from .contacts import ContactsAPI
from .errors import (
    ERROR_HINTS,
    ErrorCode,
    MsgMorphError,
    error_code_from_status,
    new_error,
    new_network_error,
    parse_error_response,
)
from .types import (
    APIResponse,
    Contact,
    CreateContactInput,
    ListContactsParams,
    UpdateContactInput,
)

__all__ = [
    "MsgMorphClient",
    "MsgMorphSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ContactsAPI",
    "ERROR_HINTS",
    "ErrorCode",
    "MsgMorphError",
    "error_code_from_status",
    "new_error",
    "new_network_error",
    "parse_error_response",
    "APIResponse",
    "Contact",
    "CreateContactInput",
    "ListContactsParams",
    "UpdateContactInput",
]
