# healthsync/db/crud/doctor.py
import logging
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from healthsync.config.constants import VerificationStatus
from healthsync.db.models import CaretakerModel, DoctorModel, UserModel

logger = logging.getLogger(__name__)


async def find_doctors(
    db: AsyncSession,
    specialization: Optional[str] = None,
    verified_only: bool = False,
    limit: int = 100,
    offset: int = 0,
) -> List[DoctorModel]:
    """
    List doctors, optionally filtered.

    Args:
        db: Database session
        specialization: case-insensitive substring match on the specialization
        verified_only: only doctors whose verification status is 'verified'
        limit: Maximum number of doctors to return
        offset: Number of doctors to skip

    Returns:
        DoctorModel objects with their users loaded, ordered by last name
    """
    logger.debug(
        f"Searching for doctors with criteria: specialization='{specialization}', verified_only={verified_only}"
    )

    query = (
        select(DoctorModel)
        .join(DoctorModel.user)
        .options(selectinload(DoctorModel.user))
    )
    if specialization and specialization.strip():
        query = query.where(DoctorModel.specialization.ilike(f"%{specialization.strip()}%"))
    if verified_only:
        query = query.where(DoctorModel.verification_status == VerificationStatus.VERIFIED)

    query = query.order_by(UserModel.last_name, UserModel.first_name).limit(limit).offset(offset)
    result = await db.execute(query)
    doctors = result.scalars().all()
    logger.info(f"Found {len(doctors)} doctors matching criteria")
    return doctors


async def get_doctor(db: AsyncSession, doctor_id: UUID) -> DoctorModel:
    query = (
        select(DoctorModel)
        .options(selectinload(DoctorModel.user))
        .where(DoctorModel.id == doctor_id)
    )
    doctor = (await db.execute(query)).scalar_one_or_none()
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return doctor


async def get_caretaker(db: AsyncSession, caretaker_id: UUID) -> CaretakerModel:
    query = (
        select(CaretakerModel)
        .options(selectinload(CaretakerModel.user))
        .where(CaretakerModel.id == caretaker_id)
    )
    caretaker = (await db.execute(query)).scalar_one_or_none()
    if not caretaker:
        raise HTTPException(status_code=404, detail="Caretaker not found")
    return caretaker


async def set_doctor_verification(
    db: AsyncSession, doctor_id: UUID, verification_status: VerificationStatus
) -> DoctorModel:
    doctor = await get_doctor(db, doctor_id)
    doctor.verification_status = verification_status
    await db.commit()
    logger.info(f"Doctor {doctor_id} verification set to '{verification_status.value}'")
    return doctor


async def set_caretaker_verification(
    db: AsyncSession, caretaker_id: UUID, verification_status: VerificationStatus
) -> CaretakerModel:
    caretaker = await get_caretaker(db, caretaker_id)
    caretaker.verification_status = verification_status
    await db.commit()
    logger.info(f"Caretaker {caretaker_id} verification set to '{verification_status.value}'")
    return caretaker
