# healthsync/db/models/user.py
import uuid

from sqlalchemy import Boolean, Column, Date, String, Text, Uuid
from sqlalchemy.orm import relationship

from healthsync.config.constants import Gender, Role
from healthsync.db.base import Base, SoftDeleteMixin, TimestampMixin, enum_column_type


class UserModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(enum_column_type(Role, "user_role"), nullable=False)
    phone_number = Column(String(30))
    date_of_birth = Column(Date)
    gender = Column(enum_column_type(Gender, "user_gender"))
    address = Column(Text)
    profile_image = Column(String)  # URL
    is_verified = Column(Boolean, default=False, nullable=False)

    # one-to-one links, at most one is populated depending on role
    patient_profile = relationship(
        "PatientModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    doctor_profile = relationship(
        "DoctorModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    caretaker_profile = relationship(
        "CaretakerModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self):
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"
