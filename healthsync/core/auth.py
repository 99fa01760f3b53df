"""
Password hashing and JWT issuing.

Two token kinds share one signing key and differ by their ``type`` claim:

* ``access``  - sent as ``Authorization: Bearer`` or the ``session`` cookie;
                carries ``sub`` (user id) and ``role``
* ``refresh`` - only accepted by ``POST /api/auth/refresh``
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from passlib.context import CryptContext

from healthsync.config.settings import settings
from healthsync.db.models.user import UserModel
from healthsync.schemas.auth_response import AuthTokens, TokenType

ACCESS = "access"
REFRESH = "refresh"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__ident="2b")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_token(claims: dict, token_kind: str, lifetime: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload = {**claims, "type": token_kind, "iat": now, "exp": now + lifetime}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> dict:
    """Verifies signature and expiry; raises jose.JWTError otherwise."""
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])


def user_claims(token: str) -> Optional[dict]:
    """
    ``{"user_id", "role"}`` for a valid access token, None for anything else.
    Callers that need the reason use decode_token directly.
    """
    payload = decode_token(token)
    if payload.get("type") != ACCESS or not payload.get("sub"):
        return None
    return {"user_id": payload["sub"], "role": payload.get("role")}


def create_tokens_for_user(user: UserModel) -> AuthTokens:
    role = getattr(user.role, "value", user.role)
    access_lifetime = timedelta(minutes=settings.access_token_expire_minutes)
    return AuthTokens(
        access_token=create_token(
            {"sub": str(user.id), "role": role}, ACCESS, access_lifetime
        ),
        refresh_token=create_token(
            {"sub": str(user.id)},
            REFRESH,
            timedelta(days=settings.refresh_token_expire_days),
        ),
        token_type=TokenType.bearer,
        expires_in=int(access_lifetime.total_seconds()),
    )
