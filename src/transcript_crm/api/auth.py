"""Shared-password authentication for the transcript-crm API."""

import secrets

from fastapi import Header, HTTPException, Query

from .config import get_settings


def _matches(supplied: str) -> bool:
    return secrets.compare_digest(supplied.encode(), get_settings().APP_PASSWORD.encode())


async def verify_password(
    x_password: str | None = Header(default=None),
    password: str | None = Query(default=None),
) -> None:
    """Accept the password from the X-Password header or the ?password query parameter."""
    supplied = x_password or password
    if not supplied:
        raise HTTPException(status_code=401, detail="Authentication required")
    if not _matches(supplied):
        raise HTTPException(status_code=401, detail="Invalid password")


async def verify_webhook_token(x_webhook_token: str | None = Header(default=None)) -> None:
    """Webhook callers send the shared password as X-Webhook-Token."""
    if not x_webhook_token or not _matches(x_webhook_token):
        raise HTTPException(status_code=401, detail="Invalid webhook token")
