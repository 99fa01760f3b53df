# healthsync/db/models/associations.py
import uuid

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Table, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import DEFAULT_CARETAKER_PERMISSIONS
from healthsync.db.base import Base, TimestampMixin, utcnow

# primary-care link between patients and doctors
patient_doctors = Table(
    "patient_doctors",
    Base.metadata,
    Column("patient_id", Uuid, ForeignKey("patients.id", ondelete="CASCADE"), primary_key=True),
    Column("doctor_id", Uuid, ForeignKey("doctors.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), default=utcnow, nullable=False),
)


class PatientCaretakerModel(TimestampMixin, Base):
    __tablename__ = "patient_caretakers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False
    )
    caretaker_id = Column(
        Uuid, ForeignKey("caretakers.id", ondelete="CASCADE"), nullable=False
    )
    relationship_label = Column("relationship", String(100), nullable=False)
    permissions = Column(
        JSON, default=lambda: list(DEFAULT_CARETAKER_PERMISSIONS), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("patient_id", "caretaker_id", name="unq_patient_caretaker"),
    )

    patient = relationship("PatientModel", back_populates="caretaker_links")
    caretaker = relationship("CaretakerModel", back_populates="patient_links")
