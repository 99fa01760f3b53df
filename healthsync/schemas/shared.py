# healthsync/schemas/shared.py
from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Literal, Optional, Tuple
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

from healthsync.config.constants import BloodType, Gender, Role, VerificationStatus


class CamelModel(BaseModel):
    """The mobile client speaks camelCase; snake_case is accepted too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(CamelModel):
    status: Literal["success"] = "success"
    message: Optional[str] = None


class PartialUpdate(CamelModel):
    """
    PATCH body. Any field may be left out, but the ones listed in
    `non_nullable` back NOT NULL columns and may not be sent as null.
    """

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self):
        nulled = [
            name
            for name in self.non_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"{', '.join(to_camel(n) for n in nulled)} cannot be null")
        return self


# ----------------------------------------------------------------------------
# Profiles
# ----------------------------------------------------------------------------
class PatientProfileIn(CamelModel):
    blood_type: BloodType = BloodType.UNKNOWN
    height: Optional[float] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)
    allergies: List[str] = Field(default_factory=list)
    chronic_conditions: List[str] = Field(default_factory=list)
    emergency_contact: Dict[str, Any] = Field(default_factory=dict)
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None
    preferred_pharmacy: Optional[str] = None


class DoctorProfileIn(CamelModel):
    specialization: str = Field(..., min_length=1)
    license_number: str = Field(..., min_length=1)
    hospital_affiliation: Optional[str] = None
    education: List[Dict[str, Any]] = Field(default_factory=list)
    certifications: List[Dict[str, Any]] = Field(default_factory=list)
    years_of_experience: Optional[int] = Field(None, ge=0)
    availability_schedule: Dict[str, Any] = Field(default_factory=dict)
    is_accepting_new_patients: bool = True
    verification_documents: List[str] = Field(default_factory=list)


class CaretakerProfileIn(CamelModel):
    relationship_label: str = Field(..., min_length=1, alias="relationship")
    is_certified: bool = False
    certifications: List[Dict[str, Any]] = Field(default_factory=list)
    experience: Optional[int] = Field(None, ge=0)
    specialties: List[str] = Field(default_factory=list)
    verification_documents: List[str] = Field(default_factory=list)
    availability_schedule: Dict[str, Any] = Field(default_factory=dict)


class PatientOut(PatientProfileIn):
    id: UUID
    user_id: UUID
    primary_care_doctor_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime


class DoctorOut(DoctorProfileIn):
    id: UUID
    user_id: UUID
    rating: float = 0.0
    review_count: int = 0
    verification_status: VerificationStatus
    created_at: datetime
    updated_at: datetime


class CaretakerOut(CaretakerProfileIn):
    id: UUID
    user_id: UUID
    rating: float = 0.0
    review_count: int = 0
    verification_status: VerificationStatus
    created_at: datetime
    updated_at: datetime


# ----------------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------------
class UserSummary(CamelModel):
    id: UUID
    email: EmailStr
    first_name: str
    last_name: str
    # read from the ORM "role" attribute, re-read from our own "userType" output
    user_type: Role = Field(
        validation_alias=AliasChoices("role", "userType", "user_type"),
        serialization_alias="userType",
    )


class UserOut(UserSummary):
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    address: Optional[str] = None
    profile_image: Optional[str] = None
    is_verified: bool = False
    created_at: datetime
    patient_profile: Optional[PatientOut] = None
    doctor_profile: Optional[DoctorOut] = None
    caretaker_profile: Optional[CaretakerOut] = None


class DoctorWithUser(DoctorOut):
    user: UserSummary


class PatientWithUser(PatientOut):
    user: UserSummary


class CaretakerWithUser(CaretakerOut):
    user: UserSummary


class VerificationUpdate(CamelModel):
    verification_status: VerificationStatus
