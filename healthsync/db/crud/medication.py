# healthsync/db/crud/medication.py
import logging
from typing import List
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.config.constants import MedicationStatus
from healthsync.db.crud.patient import get_patient
from healthsync.db.models import MedicationModel
from healthsync.schemas.medication import MedicationCreate, MedicationUpdate

logger = logging.getLogger(__name__)


async def get_medications(db: AsyncSession, patient_id: UUID) -> List[MedicationModel]:
    """All visible medications of a patient, newest `start_date` first."""
    await get_patient(db, patient_id)
    query = (
        select(MedicationModel)
        .where(MedicationModel.patient_id == patient_id)
        .order_by(MedicationModel.start_date.desc(), MedicationModel.created_at.desc())
    )
    result = await db.execute(query)
    return result.scalars().all()


async def get_medication(
    db: AsyncSession, patient_id: UUID, medication_id: UUID
) -> MedicationModel:
    query = select(MedicationModel).where(
        MedicationModel.id == medication_id,
        MedicationModel.patient_id == patient_id,
    )
    medication = (await db.execute(query)).scalar_one_or_none()
    if not medication:
        raise HTTPException(status_code=404, detail="Medication not found")
    return medication


async def create_medication(
    db: AsyncSession, patient_id: UUID, data: MedicationCreate
) -> MedicationModel:
    await get_patient(db, patient_id)
    values = data.model_dump()
    # a fresh prescription starts with all of its refills
    if values.get("refills_remaining") is None:
        values["refills_remaining"] = values["refills"]

    medication = MedicationModel(
        patient_id=patient_id, status=MedicationStatus.ACTIVE, **values
    )
    db.add(medication)
    await db.commit()
    logger.info(f"CRUD: Created medication {medication.id} '{medication.name}' for patient_id={patient_id}")
    return medication


async def update_medication(
    db: AsyncSession, patient_id: UUID, medication_id: UUID, data: MedicationUpdate
) -> MedicationModel:
    medication = await get_medication(db, patient_id, medication_id)
    changes = data.model_dump(exclude_unset=True)

    start_date = changes.get("start_date", medication.start_date)
    end_date = changes.get("end_date", medication.end_date)
    if end_date is not None and end_date < start_date:
        raise HTTPException(status_code=400, detail="endDate cannot be before startDate")

    for field, value in changes.items():
        setattr(medication, field, value)
    await db.commit()
    logger.info(f"CRUD: Updated medication {medication_id}")
    return medication


async def delete_medication(db: AsyncSession, patient_id: UUID, medication_id: UUID) -> None:
    medication = await get_medication(db, patient_id, medication_id)
    medication.soft_delete()
    await db.commit()
    logger.info(f"CRUD: Soft-deleted medication {medication_id}")
