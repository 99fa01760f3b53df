# healthsync/schemas/appointment.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from healthsync.config.constants import AppointmentStatus, AppointmentType
from healthsync.schemas.shared import CamelModel, PartialUpdate, SuccessResponse


class AppointmentBase(CamelModel):
    patient_id: UUID
    doctor_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    start_time: datetime
    end_time: datetime
    appointment_type: AppointmentType
    description: Optional[str] = None
    reason_for_visit: Optional[str] = None
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    video_url: Optional[str] = None
    copay_amount: Optional[Decimal] = Field(None, ge=0)

    @field_validator("start_time", "end_time")
    @classmethod
    def _times_in_utc(cls, value):
        return _assume_utc(value)


class AppointmentCreate(AppointmentBase):
    @model_validator(mode="after")
    def _ends_after_start(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class AppointmentUpdate(PartialUpdate):
    non_nullable = (
        "title",
        "start_time",
        "end_time",
        "status",
        "appointment_type",
        "symptoms",
        "follow_up_needed",
        "sent_reminder",
        "insurance_verified",
        "intake_form_completed",
    )

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    appointment_type: Optional[AppointmentType] = None
    reason_for_visit: Optional[str] = None
    symptoms: Optional[List[str]] = None
    notes: Optional[str] = None
    follow_up_needed: Optional[bool] = None
    follow_up_interval: Optional[int] = Field(None, ge=0)
    sent_reminder: Optional[bool] = None
    video_url: Optional[str] = None
    insurance_verified: Optional[bool] = None
    copay_amount: Optional[Decimal] = Field(None, ge=0)
    intake_form_completed: Optional[bool] = None
    ai_summary: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def _times_in_utc(cls, value):
        return _assume_utc(value)


class AppointmentOut(AppointmentBase):
    id: UUID
    status: AppointmentStatus
    follow_up_needed: bool = False
    follow_up_interval: Optional[int] = None
    sent_reminder: bool = False
    insurance_verified: bool = False
    intake_form_completed: bool = False
    ai_summary: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AppointmentResponse(SuccessResponse):
    data: AppointmentOut


class AppointmentListResponse(SuccessResponse):
    data: List[AppointmentOut]


def _assume_utc(value: Optional[datetime]) -> Optional[datetime]:
    # offsets are optional on the wire; naive times are taken as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
