"""MsgMorph configuration via pydantic-settings.

Reads ``MSGMORPH_*`` environment variables (or a ``.env`` file):

    MSGMORPH_API_KEY=mm_live_...
    MSGMORPH_ORGANIZATION_ID=org_...
    MSGMORPH_BASE_URL=http://localhost:3001   # optional
    MSGMORPH_TIMEOUT=60                       # optional, seconds
    MSGMORPH_PROJECT_ID=proj_...              # optional
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


DEFAULT_BASE_URL = "https://api.msgmorph.com/"
DEFAULT_TIMEOUT = 30.0


class MsgMorphSettings(BaseSettings):
    api_key: str = ""
    organization_id: str = ""
    base_url: str = DEFAULT_BASE_URL
    # Unset leaves the HTTP client's own timeout alone.
    timeout: float | None = None
    # Not used by the client itself; handy default for contacts calls.
    project_id: str | None = None

    model_config = {"env_prefix": "MSGMORPH_", "env_file": ".env", "extra": "ignore"}

    def to_dict(self) -> dict[str, Any]:
        """Export settings for display, with the API key masked."""
        return {
            "api_key": (self.api_key[:8] + "...") if self.api_key else None,
            "organization_id": self.organization_id or None,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "project_id": self.project_id,
        }
