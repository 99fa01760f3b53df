from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from healthsync.config.constants import Role
from healthsync.core.middleware import get_current_user, get_db
from healthsync.db.crud.appointment import (
    create_appointment,
    list_appointments,
    get_appointment,
    update_appointment,
    delete_appointment,
)
from healthsync.schemas.appointment import (
    AppointmentCreate,
    AppointmentListResponse,
    AppointmentOut,
    AppointmentResponse,
    AppointmentUpdate,
)
from healthsync.schemas.shared import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
    dependencies=[Depends(get_current_user)],
)

@router.get("", response_model=AppointmentListResponse)
async def get_appointments_route(
    user_id: Optional[UUID] = Query(None, alias="userId"),
    user_type: Optional[Role] = Query(None, alias="userType"),
    db: AsyncSession = Depends(get_db),
):
    """Get appointments, optionally only those of one user, earliest first"""
    appointments = await list_appointments(db, user_id=user_id, user_type=user_type)
    return AppointmentListResponse(
        data=[AppointmentOut.model_validate(a) for a in appointments]
    )

@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment_route(
    appointment: AppointmentCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new appointment; its status always starts as scheduled"""
    created = await create_appointment(db, appointment)
    return AppointmentResponse(
        message="Appointment created successfully",
        data=AppointmentOut.model_validate(created),
    )

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment_route(
    appointment_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific appointment by ID"""
    appointment = await get_appointment(db, appointment_id)
    return AppointmentResponse(data=AppointmentOut.model_validate(appointment))

@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment_route(
    appointment_id: UUID,
    appointment_update: AppointmentUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an existing appointment"""
    appointment = await update_appointment(db, appointment_id, appointment_update)
    return AppointmentResponse(
        message="Appointment updated successfully",
        data=AppointmentOut.model_validate(appointment),
    )

@router.delete("/{appointment_id}", response_model=SuccessResponse)
async def delete_appointment_route(
    appointment_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Delete an appointment"""
    logger.info(f"Attempting to delete appointment {appointment_id} by user: {current_user['user_id']}")
    await delete_appointment(db, appointment_id)
    return SuccessResponse(message="Appointment deleted successfully")
