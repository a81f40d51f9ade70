"""Shared FastAPI dependencies."""

from uuid import UUID

from fastapi import Header, HTTPException, status


async def require_user(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's user id set by the upstream auth proxy."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None
