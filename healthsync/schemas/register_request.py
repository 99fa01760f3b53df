# healthsync/schemas/register_request.py
from datetime import date
from typing import Annotated, Optional

from pydantic import EmailStr, Field, model_validator

from healthsync.config.constants import Gender, Role
from healthsync.schemas.shared import (
    CamelModel,
    CaretakerProfileIn,
    DoctorProfileIn,
    PatientProfileIn,
    UserSummary,
)


class RegisterRequest(CamelModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=8, max_length=128)]
    first_name: Annotated[str, Field(min_length=1, max_length=100)]
    last_name: Annotated[str, Field(min_length=1, max_length=100)]
    user_type: Role

    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    address: Optional[str] = None
    profile_image: Optional[str] = None

    # only the profile matching user_type is used; patients may omit theirs
    patient_profile: Optional[PatientProfileIn] = None
    doctor_profile: Optional[DoctorProfileIn] = None
    caretaker_profile: Optional[CaretakerProfileIn] = None

    @model_validator(mode="after")
    def _profile_matches_role(self):
        if self.user_type == Role.DOCTOR and self.doctor_profile is None:
            raise ValueError("doctorProfile is required when userType is 'doctor'")
        if self.user_type == Role.CARETAKER and self.caretaker_profile is None:
            raise ValueError("caretakerProfile is required when userType is 'caretaker'")
        return self


class RegisterResponse(CamelModel):
    status: str = "success"
    message: str = "User registered successfully"
    user: UserSummary
