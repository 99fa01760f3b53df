# healthsync/db/crud/user.py
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from healthsync.config.constants import Role
from healthsync.db.models.user import UserModel


def _with_profiles(query):
    return query.options(
        selectinload(UserModel.patient_profile),
        selectinload(UserModel.doctor_profile),
        selectinload(UserModel.caretaker_profile),
    )


async def get_user(db: AsyncSession, user_id: UUID) -> Optional[UserModel]:
    """Fresh copy of the user with every profile loaded, or None."""
    query = (
        _with_profiles(select(UserModel))
        .where(UserModel.id == user_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_user_by_email(
    db: AsyncSession, email: str, include_deleted: bool = False
) -> Optional[UserModel]:
    """Get a user by email. Soft-deleted users still own their address."""
    query = _with_profiles(select(UserModel)).where(UserModel.email == email.lower())
    if include_deleted:
        query = query.execution_options(include_deleted=True)
    result = await db.execute(query)
    return result.scalar_one_or_none()


def profile_for(user: UserModel):
    """The profile row matching the user's role, if any."""
    return {
        Role.PATIENT: user.patient_profile,
        Role.DOCTOR: user.doctor_profile,
        Role.CARETAKER: user.caretaker_profile,
    }.get(Role(user.role))
