# healthsync/schemas/medication.py
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, model_validator

from healthsync.config.constants import MedicationStatus
from healthsync.schemas.shared import CamelModel, PartialUpdate, SuccessResponse


class MedicationBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    dosage: str = Field(..., min_length=1, max_length=100)
    frequency: str = Field(..., min_length=1, max_length=100)
    start_date: date
    end_date: Optional[date] = None
    generic_name: Optional[str] = None
    form: Optional[str] = None
    time_schedule: Optional[List[str]] = None
    with_food: bool = False
    refills: int = Field(0, ge=0)
    refills_remaining: Optional[int] = Field(None, ge=0)
    instructions: Optional[str] = None
    side_effects: List[str] = Field(default_factory=list)
    reactions: List[str] = Field(default_factory=list)
    medication_image: Optional[str] = None
    ai_reminder_enabled: bool = True
    prescribed_by: Optional[UUID] = None

    @model_validator(mode="after")
    def _check_dates_and_schedule(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate cannot be before startDate")
        for slot in self.time_schedule or []:
            _validate_time_of_day(slot)
        return self


class MedicationCreate(MedicationBase):
    pass


class MedicationUpdate(PartialUpdate):
    non_nullable = (
        "name",
        "dosage",
        "frequency",
        "start_date",
        "with_food",
        "refills",
        "refills_remaining",
        "side_effects",
        "reactions",
        "status",
        "adherence_rate",
        "ai_reminder_enabled",
    )

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    dosage: Optional[str] = Field(None, min_length=1, max_length=100)
    frequency: Optional[str] = Field(None, min_length=1, max_length=100)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    generic_name: Optional[str] = None
    form: Optional[str] = None
    time_schedule: Optional[List[str]] = None
    with_food: Optional[bool] = None
    refills: Optional[int] = Field(None, ge=0)
    refills_remaining: Optional[int] = Field(None, ge=0)
    instructions: Optional[str] = None
    side_effects: Optional[List[str]] = None
    reactions: Optional[List[str]] = None
    status: Optional[MedicationStatus] = None
    adherence_rate: Optional[float] = Field(None, ge=0, le=1)
    ai_reminder_enabled: Optional[bool] = None

    @model_validator(mode="after")
    def _check_schedule(self):
        for slot in self.time_schedule or []:
            _validate_time_of_day(slot)
        return self


class MedicationOut(MedicationBase):
    id: UUID
    patient_id: UUID
    refills_remaining: int = 0
    status: MedicationStatus
    adherence_rate: float
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def _check_dates_and_schedule(self):
        # stored rows are trusted
        return self


class MedicationResponse(SuccessResponse):
    data: MedicationOut


class MedicationListResponse(SuccessResponse):
    data: List[MedicationOut]


def _validate_time_of_day(value: str) -> None:
    hours, sep, minutes = value.partition(":")
    if (
        sep != ":"
        or not (hours.isdigit() and minutes.isdigit())
        or len(hours) != 2
        or len(minutes) != 2
        or int(hours) > 23
        or int(minutes) > 59
    ):
        raise ValueError(f"timeSchedule entries must be HH:MM, got '{value}'")
