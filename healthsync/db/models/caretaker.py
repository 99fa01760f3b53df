# healthsync/db/models/caretaker.py
import uuid

from sqlalchemy import JSON, Boolean, Column, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import VerificationStatus
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type


class CaretakerModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "caretakers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    relationship_label = Column("relationship", String(100), nullable=False)  # family, professional, friend
    is_certified = Column(Boolean, default=False, nullable=False)
    certifications = Column(JSON, default=list, nullable=False)
    experience = Column(Integer)  # years
    specialties = Column(JSON, default=list, nullable=False)  # eldercare, pediatric, ...
    verification_status = Column(
        enum_column_type(VerificationStatus, "caretaker_verification_status"),
        default=VerificationStatus.PENDING,
        nullable=False,
    )
    verification_documents = Column(JSON, default=list, nullable=False)
    availability_schedule = Column(JSON, default=dict, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    review_count = Column(Integer, default=0, nullable=False)

    user = relationship("UserModel", back_populates="caretaker_profile")
    patient_links = relationship(
        "PatientCaretakerModel", back_populates="caretaker", cascade="all, delete-orphan"
    )
