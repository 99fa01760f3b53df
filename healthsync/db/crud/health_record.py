# healthsync/db/crud/health_record.py
import logging
from typing import List
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.db.base import utcnow
from healthsync.db.crud.patient import get_patient
from healthsync.db.models import HealthRecordModel
from healthsync.schemas.health_record import HealthRecordCreate, HealthRecordUpdate

logger = logging.getLogger(__name__)


async def get_health_records(db: AsyncSession, patient_id: UUID) -> List[HealthRecordModel]:
    """All visible records of a patient, newest `date_recorded` first."""
    await get_patient(db, patient_id)
    query = (
        select(HealthRecordModel)
        .where(HealthRecordModel.patient_id == patient_id)
        .order_by(HealthRecordModel.date_recorded.desc())
    )
    result = await db.execute(query)
    return result.scalars().all()


async def get_health_record(
    db: AsyncSession, patient_id: UUID, record_id: UUID
) -> HealthRecordModel:
    query = select(HealthRecordModel).where(
        HealthRecordModel.id == record_id,
        HealthRecordModel.patient_id == patient_id,
    )
    record = (await db.execute(query)).scalar_one_or_none()
    if not record:
        raise HTTPException(status_code=404, detail="Health record not found")
    return record


async def create_health_record(
    db: AsyncSession, patient_id: UUID, data: HealthRecordCreate
) -> HealthRecordModel:
    await get_patient(db, patient_id)
    values = data.model_dump()
    if values.get("date_recorded") is None:
        values["date_recorded"] = utcnow()

    record = HealthRecordModel(patient_id=patient_id, **values)
    db.add(record)
    await db.commit()
    logger.info(
        f"CRUD: Created health record {record.id} ({record.record_type.value}) for patient_id={patient_id}"
    )
    return record


async def update_health_record(
    db: AsyncSession, patient_id: UUID, record_id: UUID, data: HealthRecordUpdate
) -> HealthRecordModel:
    record = await get_health_record(db, patient_id, record_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(record, field, value)
    await db.commit()
    logger.info(f"CRUD: Updated health record {record_id}")
    return record


async def delete_health_record(db: AsyncSession, patient_id: UUID, record_id: UUID) -> None:
    """Soft delete; the row keeps its data with `deleted_at` set."""
    record = await get_health_record(db, patient_id, record_id)
    record.soft_delete()
    await db.commit()
    logger.info(f"CRUD: Soft-deleted health record {record_id}")
