# healthsync/db/crud/auth.py
import logging
from typing import Optional
from uuid import UUID

from fastapi import HTTPException, status
from jose import JWTError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.config.constants import Role
from healthsync.core.auth import (
    ACCESS,
    REFRESH,
    create_tokens_for_user,
    decode_token,
    get_password_hash,
    verify_password,
)
from healthsync.db.crud.user import get_user, get_user_by_email
from healthsync.db.models import CaretakerModel, DoctorModel, PatientModel, UserModel
from healthsync.schemas.auth_response import AuthTokens
from healthsync.schemas.login_request import LoginRequest
from healthsync.schemas.register_request import RegisterRequest

logger = logging.getLogger(__name__)

_USER_FIELDS = (
    "first_name",
    "last_name",
    "phone_number",
    "date_of_birth",
    "gender",
    "address",
    "profile_image",
)


async def create_user(db: AsyncSession, data: RegisterRequest) -> UserModel:
    """Insert user and its role profile in one transaction."""
    email = data.email.lower()
    if await get_user_by_email(db, email, include_deleted=True):
        logger.info(f"CRUD: Registration rejected, email '{email}' already in use")
        raise HTTPException(status_code=409, detail="User with this email already exists")

    user = UserModel(
        email=email,
        password_hash=get_password_hash(data.password),
        role=data.user_type,
        **{field: getattr(data, field) for field in _USER_FIELDS},
    )
    db.add(user)

    if data.user_type == Role.PATIENT:
        profile = data.patient_profile.model_dump() if data.patient_profile else {}
        db.add(PatientModel(user=user, **profile))
    elif data.user_type == Role.DOCTOR:
        db.add(DoctorModel(user=user, **data.doctor_profile.model_dump()))
    elif data.user_type == Role.CARETAKER:
        db.add(CaretakerModel(user=user, **data.caretaker_profile.model_dump()))

    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"CRUD: Registration for '{email}' violated a constraint: {e.orig}")
        raise HTTPException(
            status_code=409, detail="User or profile already exists"
        ) from e

    logger.info(f"CRUD: Registered {user.role.value} user_id={user.id}")
    # relationships are not loaded on the instance, re-select with profiles
    return await get_user(db, user.id)


async def authenticate_user(db: AsyncSession, login_data: LoginRequest) -> Optional[UserModel]:
    user = await get_user_by_email(db, login_data.email)
    if not user:
        return None
    if not verify_password(login_data.password, user.password_hash):
        return None
    return user


async def get_user_from_token(db: AsyncSession, token: Optional[str], token_type: str = ACCESS) -> UserModel:
    """Validates token and returns the user it was issued for."""
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        payload = decode_token(token)
        user_id = UUID(payload["sub"])
    except (JWTError, KeyError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    if payload.get("type") != token_type:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")

    user = await get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


async def refresh_user_token(db: AsyncSession, refresh_token: Optional[str]) -> AuthTokens:
    """Issues a new token pair for a valid refresh token."""
    if not refresh_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing refresh token")
    user = await get_user_from_token(db, refresh_token, token_type=REFRESH)
    return create_tokens_for_user(user)
