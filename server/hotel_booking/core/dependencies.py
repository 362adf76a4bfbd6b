"""FastAPI dependencies for database sessions and authentication."""

import logging
from typing import AsyncGenerator, Optional

import jwt
from fastapi import Depends, Header
from jwt import PyJWTError
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories.session_repository import SessionRepository
from .config import settings
from .database import get_db
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def create_session_token(user_id: int) -> str:
    """Sign a session token carrying the user id."""
    return jwt.encode({"userId": user_id}, settings.jwt_secret, algorithm="HS256")


async def get_current_user(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    db: AsyncSession = Depends(get_db),
) -> int:
    """
    Authentication dependency that validates Bearer tokens.

    The token must be a valid JWT and must also belong to a stored session.

    Args:
        authorization: Authorization header with Bearer token
        db: Database session

    Returns:
        int: Id of the authenticated user

    Raises:
        AuthenticationError: If token is invalid, missing or has no session
    """
    if not authorization:
        raise AuthenticationError("Authorization header missing")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise AuthenticationError("Invalid authorization header format")

    if scheme.lower() != "bearer":
        raise AuthenticationError("Invalid authentication scheme")

    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])
    except PyJWTError as e:
        raise AuthenticationError(f"Token validation failed: {str(e)}")

    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise AuthenticationError("Invalid token payload")

    session = await SessionRepository(db).find_by_token(token)
    if not session or session.user_id != user_id:
        logger.info(
            "Rejected token without a matching session",
            extra={"user_id": user_id}
        )
        raise AuthenticationError("No active session for the given token")

    return user_id


DatabaseSession = Depends(get_db)
RequiredAuth = Depends(get_current_user)
