# helpdesk/core/security.py
import secrets

from fastapi import Depends, Header, HTTPException

from helpdesk.core.config import Settings, get_settings


def require_api_token(
    token: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless the ``token`` header holds the configured API token."""
    if not token or not secrets.compare_digest(token, settings.API_TOKEN):
        raise HTTPException(status_code=401, detail="Invalid API token")
