# healthsync/schemas/care_team.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from healthsync.config.constants import DEFAULT_CARETAKER_PERMISSIONS
from healthsync.schemas.shared import (
    CamelModel,
    CaretakerWithUser,
    DoctorWithUser,
    PatientWithUser,
    SuccessResponse,
)


class DoctorLinkRequest(CamelModel):
    doctor_id: UUID
    # also set as the patient's primary care doctor
    is_primary: bool = False


class CaretakerLinkRequest(CamelModel):
    caretaker_id: UUID
    relationship_label: str = Field(..., min_length=1, max_length=100, alias="relationship")
    permissions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CARETAKER_PERMISSIONS)
    )


class CaretakerLinkOut(CamelModel):
    id: UUID
    patient_id: UUID
    caretaker_id: UUID
    relationship_label: str = Field(alias="relationship")
    permissions: List[str]
    created_at: datetime
    caretaker: Optional[CaretakerWithUser] = None


class PatientResponse(SuccessResponse):
    data: PatientWithUser


class DoctorResponse(SuccessResponse):
    data: DoctorWithUser


class DoctorListResponse(SuccessResponse):
    data: List[DoctorWithUser]


class CaretakerResponse(SuccessResponse):
    data: CaretakerWithUser


class CaretakerLinkResponse(SuccessResponse):
    data: CaretakerLinkOut


class CaretakerLinkListResponse(SuccessResponse):
    data: List[CaretakerLinkOut]


class PatientListResponse(SuccessResponse):
    data: List[PatientWithUser]
