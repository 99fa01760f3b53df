# healthsync/db/models/medication.py
import uuid

from sqlalchemy import JSON, Boolean, Column, Date, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import MedicationStatus
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type


class MedicationModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "medications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # null when self-reported
    prescribed_by = Column(Uuid, ForeignKey("doctors.id", ondelete="SET NULL"), nullable=True)

    name = Column(String(255), nullable=False)
    generic_name = Column(String(255))
    dosage = Column(String(100), nullable=False)  # e.g. "10mg"
    form = Column(String(50))  # tablet, capsule, liquid
    frequency = Column(String(100), nullable=False)  # e.g. "twice daily"
    time_schedule = Column(JSON)  # ["08:00", "20:00"]
    with_food = Column(Boolean, default=False, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)  # ongoing when null
    refills = Column(Integer, default=0, nullable=False)
    refills_remaining = Column(Integer, default=0, nullable=False)
    instructions = Column(Text)
    side_effects = Column(JSON, default=list, nullable=False)
    reactions = Column(JSON, default=list, nullable=False)
    status = Column(
        enum_column_type(MedicationStatus, "medication_status"),
        default=MedicationStatus.ACTIVE,
        nullable=False,
    )
    medication_image = Column(String)  # URL
    adherence_rate = Column(Float, default=1.0, nullable=False)  # 0-1
    ai_reminder_enabled = Column(Boolean, default=True, nullable=False)

    patient = relationship("PatientModel", back_populates="medications")
    prescriber = relationship("DoctorModel")
