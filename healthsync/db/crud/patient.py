# healthsync/db/crud/patient.py
import logging
from typing import List
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from healthsync.db.crud.doctor import get_caretaker, get_doctor
from healthsync.db.models import (
    CaretakerModel,
    DoctorModel,
    PatientCaretakerModel,
    PatientModel,
    patient_doctors,
)
from healthsync.schemas.care_team import CaretakerLinkRequest, DoctorLinkRequest

logger = logging.getLogger(__name__)


async def get_patient(db: AsyncSession, patient_id: UUID) -> PatientModel:
    """
    Get a patient profile with its user loaded.

    Raises:
        HTTPException: 404 when the patient does not exist or was deleted
    """
    query = (
        select(PatientModel)
        .options(selectinload(PatientModel.user))
        .where(PatientModel.id == patient_id)
    )
    result = await db.execute(query)
    patient = result.scalar_one_or_none()
    if not patient:
        logger.info(f"CRUD: patient_id={patient_id} not found")
        raise HTTPException(status_code=404, detail="Patient not found")
    return patient


async def get_patient_doctors(db: AsyncSession, patient_id: UUID) -> List[DoctorModel]:
    """Doctors on the patient's care team, in the order they were linked."""
    await get_patient(db, patient_id)
    query = (
        select(DoctorModel)
        .join(patient_doctors, patient_doctors.c.doctor_id == DoctorModel.id)
        .where(patient_doctors.c.patient_id == patient_id)
        .options(selectinload(DoctorModel.user))
        .order_by(patient_doctors.c.created_at)
    )
    result = await db.execute(query)
    return result.scalars().all()


async def link_doctor(
    db: AsyncSession, patient_id: UUID, data: DoctorLinkRequest
) -> DoctorModel:
    """
    Add a doctor to the patient's care team.

    Linking an already linked doctor is a no-op; `is_primary` also updates
    the patient's primary care doctor.
    """
    query = (
        select(PatientModel)
        .options(selectinload(PatientModel.doctors))
        .where(PatientModel.id == patient_id)
    )
    patient = (await db.execute(query)).scalar_one_or_none()
    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")
    doctor = await get_doctor(db, data.doctor_id)

    if all(d.id != doctor.id for d in patient.doctors):
        patient.doctors.append(doctor)
    if data.is_primary:
        patient.primary_care_doctor_id = doctor.id

    await db.commit()
    logger.info(
        f"CRUD: Linked doctor_id={doctor.id} to patient_id={patient_id} (primary={data.is_primary})"
    )
    return doctor


async def get_caretaker_links(
    db: AsyncSession, patient_id: UUID
) -> List[PatientCaretakerModel]:
    await get_patient(db, patient_id)
    query = (
        select(PatientCaretakerModel)
        .join(PatientCaretakerModel.caretaker)
        .where(PatientCaretakerModel.patient_id == patient_id)
        .options(
            selectinload(PatientCaretakerModel.caretaker).selectinload(CaretakerModel.user)
        )
        .order_by(PatientCaretakerModel.created_at)
    )
    result = await db.execute(query)
    return result.scalars().all()


async def link_caretaker(
    db: AsyncSession, patient_id: UUID, data: CaretakerLinkRequest
) -> PatientCaretakerModel:
    """
    Grant a caretaker access to the patient.

    Raises:
        HTTPException: 404 for an unknown patient or caretaker, 409 when the
        pair is already linked
    """
    await get_patient(db, patient_id)
    caretaker = await get_caretaker(db, data.caretaker_id)

    link = PatientCaretakerModel(
        patient_id=patient_id,
        caretaker_id=caretaker.id,
        relationship_label=data.relationship_label,
        permissions=data.permissions,
    )
    db.add(link)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"CRUD: caretaker_id={data.caretaker_id} already linked to patient_id={patient_id}"
        )
        raise HTTPException(
            status_code=409, detail="Caretaker is already linked to this patient"
        ) from e

    query = (
        select(PatientCaretakerModel)
        .where(PatientCaretakerModel.id == link.id)
        .options(
            selectinload(PatientCaretakerModel.caretaker).selectinload(CaretakerModel.user)
        )
        .execution_options(populate_existing=True)
    )
    return (await db.execute(query)).scalar_one()


async def get_patients_for_caretaker(
    db: AsyncSession, caretaker_id: UUID
) -> List[PatientModel]:
    """
    Retrieves all patients the caretaker is linked to

    Args:
        db (AsyncSession): the database session
        caretaker_id (UUID): the caretaker profile id

    Returns:
        List[PatientModel]: patients with their users loaded
    """
    await get_caretaker(db, caretaker_id)
    query = (
        select(PatientModel)
        .join(PatientCaretakerModel, PatientCaretakerModel.patient_id == PatientModel.id)
        .where(PatientCaretakerModel.caretaker_id == caretaker_id)
        .options(selectinload(PatientModel.user))
        .order_by(PatientCaretakerModel.created_at)
    )
    result = await db.execute(query)
    patients = result.scalars().all()
    logger.info(f"CRUD: Found {len(patients)} patients for caretaker_id '{caretaker_id}'")
    return patients
