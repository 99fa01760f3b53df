import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.core.middleware import get_current_user, get_db
from healthsync.db.crud.health_record import (
    create_health_record,
    delete_health_record,
    get_health_record,
    get_health_records,
    update_health_record,
)
from healthsync.db.crud.medication import (
    create_medication,
    delete_medication,
    get_medications,
    update_medication,
)
from healthsync.db.crud.patient import (
    get_caretaker_links,
    get_patient,
    get_patient_doctors,
    link_caretaker,
    link_doctor,
)
from healthsync.schemas.care_team import (
    CaretakerLinkListResponse,
    CaretakerLinkOut,
    CaretakerLinkRequest,
    CaretakerLinkResponse,
    DoctorLinkRequest,
    DoctorListResponse,
    DoctorResponse,
    PatientResponse,
)
from healthsync.schemas.health_record import (
    HealthRecordCreate,
    HealthRecordListResponse,
    HealthRecordOut,
    HealthRecordResponse,
    HealthRecordUpdate,
)
from healthsync.schemas.medication import (
    MedicationCreate,
    MedicationListResponse,
    MedicationOut,
    MedicationResponse,
    MedicationUpdate,
)
from healthsync.schemas.shared import DoctorWithUser, PatientWithUser, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/patients",
    tags=["patients"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/{patient_id}", response_model=PatientResponse)
async def read_patient(patient_id: UUID, db: AsyncSession = Depends(get_db)):
    patient = await get_patient(db, patient_id)
    return PatientResponse(data=PatientWithUser.model_validate(patient))


# ----------------------------------------------------------------------------
# Health records
# ----------------------------------------------------------------------------
@router.get("/{patient_id}/health-records", response_model=HealthRecordListResponse)
async def list_health_records(patient_id: UUID, db: AsyncSession = Depends(get_db)):
    """Health records of the patient, newest first"""
    records = await get_health_records(db, patient_id)
    return HealthRecordListResponse(
        data=[HealthRecordOut.model_validate(r) for r in records]
    )


@router.post(
    "/{patient_id}/health-records",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_health_record(
    patient_id: UUID,
    record: HealthRecordCreate,
    db: AsyncSession = Depends(get_db),
):
    created = await create_health_record(db, patient_id, record)
    return HealthRecordResponse(
        message="Health record created successfully",
        data=HealthRecordOut.model_validate(created),
    )


@router.get("/{patient_id}/health-records/{record_id}", response_model=HealthRecordResponse)
async def read_health_record(
    patient_id: UUID, record_id: UUID, db: AsyncSession = Depends(get_db)
):
    record = await get_health_record(db, patient_id, record_id)
    return HealthRecordResponse(data=HealthRecordOut.model_validate(record))


@router.patch("/{patient_id}/health-records/{record_id}", response_model=HealthRecordResponse)
async def edit_health_record(
    patient_id: UUID,
    record_id: UUID,
    changes: HealthRecordUpdate,
    db: AsyncSession = Depends(get_db),
):
    record = await update_health_record(db, patient_id, record_id, changes)
    return HealthRecordResponse(
        message="Health record updated successfully",
        data=HealthRecordOut.model_validate(record),
    )


@router.delete("/{patient_id}/health-records/{record_id}", response_model=SuccessResponse)
async def remove_health_record(
    patient_id: UUID, record_id: UUID, db: AsyncSession = Depends(get_db)
):
    await delete_health_record(db, patient_id, record_id)
    return SuccessResponse(message="Health record deleted successfully")


# ----------------------------------------------------------------------------
# Medications
# ----------------------------------------------------------------------------
@router.get("/{patient_id}/medications", response_model=MedicationListResponse)
async def list_medications(patient_id: UUID, db: AsyncSession = Depends(get_db)):
    medications = await get_medications(db, patient_id)
    return MedicationListResponse(
        data=[MedicationOut.model_validate(m) for m in medications]
    )


@router.post(
    "/{patient_id}/medications",
    response_model=MedicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_medication(
    patient_id: UUID,
    medication: MedicationCreate,
    db: AsyncSession = Depends(get_db),
):
    created = await create_medication(db, patient_id, medication)
    return MedicationResponse(
        message="Medication added successfully",
        data=MedicationOut.model_validate(created),
    )


@router.patch("/{patient_id}/medications/{medication_id}", response_model=MedicationResponse)
async def edit_medication(
    patient_id: UUID,
    medication_id: UUID,
    changes: MedicationUpdate,
    db: AsyncSession = Depends(get_db),
):
    medication = await update_medication(db, patient_id, medication_id, changes)
    return MedicationResponse(
        message="Medication updated successfully",
        data=MedicationOut.model_validate(medication),
    )


@router.delete("/{patient_id}/medications/{medication_id}", response_model=SuccessResponse)
async def remove_medication(
    patient_id: UUID, medication_id: UUID, db: AsyncSession = Depends(get_db)
):
    await delete_medication(db, patient_id, medication_id)
    return SuccessResponse(message="Medication deleted successfully")


# ----------------------------------------------------------------------------
# Care team
# ----------------------------------------------------------------------------
@router.get("/{patient_id}/doctors", response_model=DoctorListResponse)
async def list_patient_doctors(patient_id: UUID, db: AsyncSession = Depends(get_db)):
    doctors = await get_patient_doctors(db, patient_id)
    return DoctorListResponse(data=[DoctorWithUser.model_validate(d) for d in doctors])


@router.post(
    "/{patient_id}/doctors",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_patient_doctor(
    patient_id: UUID,
    link: DoctorLinkRequest,
    db: AsyncSession = Depends(get_db),
):
    doctor = await link_doctor(db, patient_id, link)
    return DoctorResponse(
        message="Doctor added to care team",
        data=DoctorWithUser.model_validate(doctor),
    )


@router.get("/{patient_id}/caretakers", response_model=CaretakerLinkListResponse)
async def list_patient_caretakers(patient_id: UUID, db: AsyncSession = Depends(get_db)):
    links = await get_caretaker_links(db, patient_id)
    return CaretakerLinkListResponse(
        data=[CaretakerLinkOut.model_validate(link) for link in links]
    )


@router.post(
    "/{patient_id}/caretakers",
    response_model=CaretakerLinkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_patient_caretaker(
    patient_id: UUID,
    link: CaretakerLinkRequest,
    db: AsyncSession = Depends(get_db),
):
    created = await link_caretaker(db, patient_id, link)
    return CaretakerLinkResponse(
        message="Caretaker linked successfully",
        data=CaretakerLinkOut.model_validate(created),
    )
