from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.core.middleware import get_current_user, get_db
from healthsync.db.crud.doctor import (
    find_doctors,
    get_doctor,
    set_caretaker_verification,
    set_doctor_verification,
)
from healthsync.db.crud.patient import get_patients_for_caretaker
from healthsync.schemas.care_team import (
    CaretakerResponse,
    DoctorListResponse,
    DoctorResponse,
    PatientListResponse,
)
from healthsync.schemas.shared import (
    CaretakerWithUser,
    DoctorWithUser,
    PatientWithUser,
    VerificationUpdate,
)

doctors_router = APIRouter(
    prefix="/doctors",
    tags=["doctors"],
    dependencies=[Depends(get_current_user)],
)
caretakers_router = APIRouter(
    prefix="/caretakers",
    tags=["caretakers"],
    dependencies=[Depends(get_current_user)],
)


@doctors_router.get("", response_model=DoctorListResponse)
async def list_doctors(
    specialization: Optional[str] = Query(None),
    verified_only: bool = Query(False),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    doctors = await find_doctors(
        db,
        specialization=specialization,
        verified_only=verified_only,
        limit=limit,
        offset=offset,
    )
    return DoctorListResponse(data=[DoctorWithUser.model_validate(d) for d in doctors])


@doctors_router.get("/{doctor_id}", response_model=DoctorResponse)
async def read_doctor(doctor_id: UUID, db: AsyncSession = Depends(get_db)):
    doctor = await get_doctor(db, doctor_id)
    return DoctorResponse(data=DoctorWithUser.model_validate(doctor))


@doctors_router.patch("/{doctor_id}/verification", response_model=DoctorResponse)
async def update_doctor_verification(
    doctor_id: UUID,
    update: VerificationUpdate,
    db: AsyncSession = Depends(get_db),
):
    doctor = await set_doctor_verification(db, doctor_id, update.verification_status)
    return DoctorResponse(
        message="Verification status updated",
        data=DoctorWithUser.model_validate(doctor),
    )


@caretakers_router.get("/{caretaker_id}/patients", response_model=PatientListResponse)
async def list_caretaker_patients(caretaker_id: UUID, db: AsyncSession = Depends(get_db)):
    patients = await get_patients_for_caretaker(db, caretaker_id)
    return PatientListResponse(data=[PatientWithUser.model_validate(p) for p in patients])


@caretakers_router.patch("/{caretaker_id}/verification", response_model=CaretakerResponse)
async def update_caretaker_verification(
    caretaker_id: UUID,
    update: VerificationUpdate,
    db: AsyncSession = Depends(get_db),
):
    caretaker = await set_caretaker_verification(db, caretaker_id, update.verification_status)
    return CaretakerResponse(
        message="Verification status updated",
        data=CaretakerWithUser.model_validate(caretaker),
    )
