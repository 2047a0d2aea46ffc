"""MsgMorph API Client - Typed async wrapper for the MsgMorph REST API.

Usage:
    async with MsgMorphClient(api_key, organization_id) as mm:
        contact = await mm.contacts.create(
            CreateContactInput(external_id="user-123", email="a@example.com", project_id="proj-1")
        )

Or from MSGMORPH_* environment variables:
    async with MsgMorphClient.from_env() as mm:
        contacts = await mm.contacts.list(ListContactsParams(project_id="proj-1"))
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MsgMorphSettings
from .contacts import ContactsAPI
from .errors import (
    ErrorCode,
    new_error,
    new_network_error,
    parse_error_response,
)
from .types import wire_payload

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _encode_body(body: BaseModel | Mapping[str, Any] | Any) -> bytes:
    if isinstance(body, BaseModel):
        body = wire_payload(body)
    return json.dumps(body).encode()


def _as_timeout(seconds: float) -> httpx.Timeout:
    # 0 disables the timeout rather than failing every request.
    return httpx.Timeout(seconds or None)


class MsgMorphClient:
    """MsgMorph API client.

    Args:
        api_key: MsgMorph API key (required)
        organization_id: MsgMorph organization ID (required)
        base_url: API base URL, e.g. "http://localhost:3001" during development
        http_client: Custom httpx.AsyncClient (not closed by this client)
        timeout: Request timeout in seconds (0 means no timeout); applied to
            ``http_client`` when given, otherwise its own timeout is kept

    Raises:
        MsgMorphError: INVALID_API_KEY / INVALID_ORGANIZATION_ID when a
            credential is empty. Nothing is sent in that case.
    """

    def __init__(
        self,
        api_key: str,
        organization_id: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        if not api_key:
            raise new_error(
                "API key is required. Set the MSGMORPH_API_KEY environment variable.",
                400,
                ErrorCode.INVALID_API_KEY,
            )
        if not organization_id:
            raise new_error(
                "Organization ID is required. Set the MSGMORPH_ORGANIZATION_ID environment variable.",
                400,
                ErrorCode.INVALID_ORGANIZATION_ID,
            )

        self._api_key = api_key
        self._organization_id = organization_id
        self._base_url = base_url

        self._owns_http = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, follow_redirects=True)
        if timeout is not None:
            http_client.timeout = _as_timeout(timeout)
        self._http = http_client

        self.contacts = ContactsAPI(self)

    @classmethod
    def from_settings(cls, settings: MsgMorphSettings, **overrides: Any) -> "MsgMorphClient":
        """Create a client from MsgMorphSettings; keyword overrides win."""
        options: dict[str, Any] = {"base_url": settings.base_url}
        if settings.timeout is not None:
            options["timeout"] = settings.timeout
        options.update(overrides)
        return cls(settings.api_key, settings.organization_id, **options)

    @classmethod
    def from_env(cls, **overrides: Any) -> "MsgMorphClient":
        """Create a client from MSGMORPH_* environment variables (or .env)."""
        return cls.from_settings(MsgMorphSettings(), **overrides)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def organization_id(self) -> str:
        return self._organization_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "MsgMorphClient":
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._api_key,
            "X-Organization-Id": self._organization_id,
        }

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: Any = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Make an authenticated request and decode the response.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. "/api/v1/contacts"
            body: Pydantic model or JSON-serialisable value (ignored for GET)
            response_type: Type to decode a non-empty success body into
            timeout: Per-call timeout in seconds (0 means no timeout)

        Returns:
            The decoded body, or None when no response_type was given or the
            body was empty.

        Raises:
            MsgMorphError: For every failure, including transport errors.
        """
        url = self._base_url.rstrip("/") + path

        content = None
        if body is not None and method.upper() != "GET":
            try:
                content = _encode_body(body)
            except (TypeError, ValueError) as exc:
                raise new_error(
                    f"failed to marshal request body: {exc}", 0, ErrorCode.VALIDATION_ERROR
                ) from exc

        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = _as_timeout(timeout)
        try:
            request = self._http.build_request(
                method, url, content=content, headers=self._headers(), **extra
            )
        except (httpx.InvalidURL, ValueError) as exc:
            raise new_network_error(exc) from exc

        logger.debug("MsgMorph %s %s", method, url)
        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as exc:
            logger.debug("MsgMorph %s %s failed: %r", method, url, exc)
            raise new_network_error(exc) from exc

        try:
            raw = await response.aread()
        except httpx.HTTPError as exc:
            raise new_network_error(exc) from exc
        finally:
            await response.aclose()

        status = response.status_code
        logger.debug("MsgMorph %s %s -> %d", method, url, status)

        if status >= 400:
            err = parse_error_response(raw, status)
            logger.warning("MsgMorph API error: %s", err.to_json())
            raise err

        if response_type is None or not raw:
            return None

        try:
            return _adapter(response_type).validate_json(raw)
        except ValidationError as exc:
            raise new_error(
                f"failed to parse response: {exc}", status, ErrorCode.INTERNAL_ERROR
            ) from exc
