# healthsync/db/crud/appointment.py
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.config.constants import AppointmentStatus, Role
from healthsync.db.crud.user import get_user
from healthsync.db.models import (
    AppointmentModel,
    CaretakerModel,
    DoctorModel,
    PatientCaretakerModel,
    PatientModel,
)
from healthsync.schemas.appointment import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


async def _profile_id(db: AsyncSession, model, user_id: UUID) -> Optional[UUID]:
    result = await db.execute(select(model.id).where(model.user_id == user_id))
    return result.scalar_one_or_none()


async def list_appointments(
    db: AsyncSession,
    user_id: Optional[UUID] = None,
    user_type: Optional[Role] = None,
) -> List[AppointmentModel]:
    """
    List appointments ordered by start time.

    With `user_id`, only appointments of that user's patient or doctor profile
    are returned (a caretaker sees those of the patients they look after).
    `user_type` defaults to the user's role. An unknown user, or one without
    the matching profile, gets an empty list: a filter that matches no
    profile never widens to every appointment in the system.

    Args:
        db (AsyncSession): The database session.
        user_id (Optional[UUID]): The user whose appointments to list.
        user_type (Optional[Role]): Which profile of the user to filter on.

    Returns:
        List[AppointmentModel]: matching appointments, earliest first.
    """
    query = select(AppointmentModel).order_by(AppointmentModel.start_time.asc())

    if user_id is not None:
        if user_type is None:
            user = await get_user(db, user_id)
            if not user:
                logger.info(f"CRUD: No user {user_id}, returning no appointments")
                return []
            user_type = Role(user.role)

        if user_type == Role.PATIENT:
            patient_id = await _profile_id(db, PatientModel, user_id)
            if patient_id is None:
                return []
            query = query.where(AppointmentModel.patient_id == patient_id)
        elif user_type == Role.DOCTOR:
            doctor_id = await _profile_id(db, DoctorModel, user_id)
            if doctor_id is None:
                return []
            query = query.where(AppointmentModel.doctor_id == doctor_id)
        else:
            caretaker_id = await _profile_id(db, CaretakerModel, user_id)
            if caretaker_id is None:
                return []
            patient_ids = select(PatientCaretakerModel.patient_id).where(
                PatientCaretakerModel.caretaker_id == caretaker_id
            )
            query = query.where(AppointmentModel.patient_id.in_(patient_ids))

    result = await db.execute(query)
    appointments = result.scalars().all()
    logger.debug(
        f"CRUD: Found {len(appointments)} appointments for user_id={user_id} ({user_type})"
    )
    return appointments


async def get_appointment(db: AsyncSession, appointment_id: UUID) -> AppointmentModel:
    appointment = (
        await db.execute(select(AppointmentModel).where(AppointmentModel.id == appointment_id))
    ).scalar_one_or_none()
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


async def create_appointment(db: AsyncSession, data: AppointmentCreate) -> AppointmentModel:
    """
    Create a new appointment in the database.

    The status of a new appointment is always 'scheduled'; doctor availability
    is not checked. Unknown patient or doctor ids surface as 409 through the
    foreign key constraints.
    """
    logger.info(
        f"CRUD: Creating appointment for patient_id={data.patient_id} with doctor_id={data.doctor_id} "
        f"from {data.start_time} to {data.end_time}"
    )
    appointment = AppointmentModel(status=AppointmentStatus.SCHEDULED, **data.model_dump())
    db.add(appointment)
    await db.commit()
    logger.info(f"CRUD: Created appointment_id={appointment.id}")
    return appointment


async def update_appointment(
    db: AsyncSession, appointment_id: UUID, data: AppointmentUpdate
) -> AppointmentModel:
    appointment = await get_appointment(db, appointment_id)
    changes = data.model_dump(exclude_unset=True)

    start_time = changes.get("start_time") or appointment.start_time
    end_time = changes.get("end_time") or appointment.end_time
    if ("start_time" in changes or "end_time" in changes) and _as_utc(end_time) <= _as_utc(start_time):
        raise HTTPException(status_code=400, detail="endTime must be after startTime")

    for field, value in changes.items():
        setattr(appointment, field, value)
    await db.commit()
    logger.info(f"CRUD: Updated appointment_id={appointment_id} fields={sorted(changes)}")
    return appointment


async def delete_appointment(db: AsyncSession, appointment_id: UUID) -> None:
    appointment = await get_appointment(db, appointment_id)
    appointment.soft_delete()
    await db.commit()
    logger.info(f"CRUD: Soft-deleted appointment_id={appointment_id}")
