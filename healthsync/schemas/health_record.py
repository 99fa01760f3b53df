# healthsync/schemas/health_record.py
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from healthsync.config.constants import RecordType
from healthsync.schemas.shared import CamelModel, PartialUpdate, SuccessResponse


class HealthRecordBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    record_type: RecordType
    description: Optional[str] = None
    data: Dict[str, Any]
    doctor_id: Optional[UUID] = None
    attachments: List[str] = Field(default_factory=list)
    is_private: bool = False
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    ai_generated: bool = False
    ai_confidence_score: Optional[float] = Field(None, ge=0, le=1)


class HealthRecordCreate(HealthRecordBase):
    date_recorded: Optional[datetime] = None


class HealthRecordUpdate(PartialUpdate):
    non_nullable = ("title", "record_type", "data", "attachments", "is_private", "tags", "date_recorded")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    record_type: Optional[RecordType] = None
    description: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    doctor_id: Optional[UUID] = None
    attachments: Optional[List[str]] = None
    is_private: Optional[bool] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    date_recorded: Optional[datetime] = None


class HealthRecordOut(HealthRecordBase):
    id: UUID
    patient_id: UUID
    date_recorded: datetime
    created_at: datetime
    updated_at: datetime


class HealthRecordResponse(SuccessResponse):
    data: HealthRecordOut


class HealthRecordListResponse(SuccessResponse):
    data: List[HealthRecordOut]
