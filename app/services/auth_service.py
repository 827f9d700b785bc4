"""Acting-user resolution from upstream-issued JWT bearer tokens.

Authentication itself happens upstream. Clients present a bearer token
signed with the shared secret; this module decodes it and loads the user
named by its ``sub`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..database import get_db
from ..models.user import User
from ..repositories import UserRepository

# Token URL points at the upstream issuer; it only feeds the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a token the way the upstream issuer does.

    Args:
        data: Claims to encode; ``sub`` must hold the user id
        expires_delta: Lifetime, defaulting to ``jwt_expiration_minutes``
    """
    lifetime = expires_delta or timedelta(minutes=settings.jwt_expiration_minutes)
    claims = {**data, "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[UUID]:
    """
    Return the user id a token was issued for.

    None if the signature, expiry or ``sub`` claim does not check out.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return UUID(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        return None


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Route dependency: the stored user the bearer token names.

    Raises:
        HTTPException: 401 if the token is invalid or the user is unknown
    """
    user_id = decode_access_token(token)
    user = await UserRepository(db).find(user_id) if user_id is not None else None

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
