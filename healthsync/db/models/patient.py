# healthsync/db/models/patient.py
import uuid

from sqlalchemy import JSON, Column, Float, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import BloodType
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type
from healthsync.db.models.associations import patient_doctors


class PatientModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "patients"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    blood_type = Column(
        enum_column_type(BloodType, "blood_type"),
        default=BloodType.UNKNOWN,
        nullable=False,
    )
    height = Column(Float)  # cm
    weight = Column(Float)  # kg
    allergies = Column(JSON, default=list, nullable=False)
    chronic_conditions = Column(JSON, default=list, nullable=False)
    emergency_contact = Column(JSON, default=dict, nullable=False)  # {name, relationship, phone}
    insurance_provider = Column(String(255))
    insurance_number = Column(String(100))
    preferred_pharmacy = Column(String(255))
    primary_care_doctor_id = Column(
        Uuid, ForeignKey("doctors.id", ondelete="SET NULL"), nullable=True
    )

    user = relationship("UserModel", back_populates="patient_profile")
    primary_care_doctor = relationship(
        "DoctorModel", foreign_keys=[primary_care_doctor_id]
    )
    doctors = relationship(
        "DoctorModel", secondary=patient_doctors, back_populates="patients"
    )
    caretaker_links = relationship(
        "PatientCaretakerModel", back_populates="patient", cascade="all, delete-orphan"
    )
    health_records = relationship("HealthRecordModel", back_populates="patient")
    medications = relationship("MedicationModel", back_populates="patient")
    appointments = relationship("AppointmentModel", back_populates="patient")
