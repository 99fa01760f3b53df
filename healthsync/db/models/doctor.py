# healthsync/db/models/doctor.py
import uuid

from sqlalchemy import JSON, Boolean, Column, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import VerificationStatus
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type
from healthsync.db.models.associations import patient_doctors


class DoctorModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "doctors"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    specialization = Column(String(100), nullable=False)
    license_number = Column(String(100), unique=True, nullable=False)
    hospital_affiliation = Column(String(255))
    education = Column(JSON, default=list, nullable=False)  # [{institution, degree, year}]
    certifications = Column(JSON, default=list, nullable=False)  # [{name, issuingOrganization, year}]
    years_of_experience = Column(Integer)
    availability_schedule = Column(JSON, default=dict, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    review_count = Column(Integer, default=0, nullable=False)
    is_accepting_new_patients = Column(Boolean, default=True, nullable=False)
    verification_status = Column(
        enum_column_type(VerificationStatus, "doctor_verification_status"),
        default=VerificationStatus.PENDING,
        nullable=False,
    )
    verification_documents = Column(JSON, default=list, nullable=False)  # URLs

    user = relationship("UserModel", back_populates="doctor_profile")
    patients = relationship(
        "PatientModel", secondary=patient_doctors, back_populates="doctors"
    )
    appointments = relationship("AppointmentModel", back_populates="doctor")

    def __repr__(self):
        return f"<DoctorModel(id={self.id}, license={self.license_number})>"
