# healthsync/db/models/appointment.py
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from healthsync.config.constants import AppointmentStatus, AppointmentType
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type


class AppointmentModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "appointments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    doctor_id = Column(
        Uuid, ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)

    status = Column(
        enum_column_type(AppointmentStatus, "appointment_status"),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
    )
    appointment_type = Column(
        enum_column_type(AppointmentType, "appointment_type"), nullable=False
    )
    reason_for_visit = Column(String(255))
    symptoms = Column(JSON, default=list, nullable=False)
    notes = Column(Text)
    follow_up_needed = Column(Boolean, default=False, nullable=False)
    follow_up_interval = Column(Integer)  # days until follow-up
    sent_reminder = Column(Boolean, default=False, nullable=False)
    video_url = Column(String)  # video appointments only
    insurance_verified = Column(Boolean, default=False, nullable=False)
    copay_amount = Column(Numeric(10, 2))
    intake_form_completed = Column(Boolean, default=False, nullable=False)
    ai_summary = Column(Text)

    patient = relationship("PatientModel", back_populates="appointments")
    doctor = relationship("DoctorModel", back_populates="appointments")

    def __repr__(self):
        return f"<AppointmentModel(id={self.id}, status={self.status}, start={self.start_time})>"
