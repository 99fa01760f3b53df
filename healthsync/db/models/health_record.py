# healthsync/db/models/health_record.py
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import RecordType
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type, utcnow


class HealthRecordModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "health_records"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # null when added by the patient or the system
    doctor_id = Column(Uuid, ForeignKey("doctors.id", ondelete="SET NULL"), nullable=True)

    record_type = Column(enum_column_type(RecordType, "record_type"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    date_recorded = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    data = Column(JSON, nullable=False)  # shape depends on record_type
    attachments = Column(JSON, default=list, nullable=False)  # URLs
    is_private = Column(Boolean, default=False, nullable=False)
    category = Column(String(100))
    tags = Column(JSON, default=list, nullable=False)
    ai_generated = Column(Boolean, default=False, nullable=False)
    ai_confidence_score = Column(Float)  # 0-1

    patient = relationship("PatientModel", back_populates="health_records")
    doctor = relationship("DoctorModel")
