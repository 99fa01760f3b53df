"""create_healthsync_schema

Revision ID: 3f1c9a2e7b10
Revises:
Create Date: 2026-10-19 09:12:44.218330

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f1c9a2e7b10"
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum("patient", "doctor", "caretaker", name="user_role")
user_gender = sa.Enum("male", "female", "other", "prefer_not_to_say", name="user_gender")
blood_type = sa.Enum(
    "A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-", "unknown", name="blood_type"
)
doctor_verification_status = sa.Enum(
    "pending", "verified", "rejected", name="doctor_verification_status"
)
caretaker_verification_status = sa.Enum(
    "pending", "verified", "rejected", name="caretaker_verification_status"
)
record_type = sa.Enum(
    "vital_signs",
    "lab_result",
    "diagnostic_image",
    "doctor_note",
    "prescription",
    "procedure",
    "allergy",
    "vaccination",
    "symptom_report",
    "ai_analysis",
    name="record_type",
)
medication_status = sa.Enum(
    "active", "completed", "discontinued", "on_hold", name="medication_status"
)
appointment_status = sa.Enum(
    "scheduled", "cancelled", "completed", "no_show", "rescheduled",
    name="appointment_status",
)
appointment_type = sa.Enum("in_person", "video", "phone", name="appointment_type")


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _soft_delete():
    return [sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True)]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("gender", user_gender, nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("profile_image", sa.String(), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        *_timestamps(),
        *_soft_delete(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_deleted_at"), "users", ["deleted_at"], unique=False)

    op.create_table(
        "doctors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("specialization", sa.String(length=100), nullable=False),
        sa.Column("license_number", sa.String(length=100), nullable=False),
        sa.Column("hospital_affiliation", sa.String(length=255), nullable=True),
        sa.Column("education", sa.JSON(), nullable=False),
        sa.Column("certifications", sa.JSON(), nullable=False),
        sa.Column("years_of_experience", sa.Integer(), nullable=True),
        sa.Column("availability_schedule", sa.JSON(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        sa.Column("is_accepting_new_patients", sa.Boolean(), nullable=False),
        sa.Column("verification_status", doctor_verification_status, nullable=False),
        sa.Column("verification_documents", sa.JSON(), nullable=False),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.UniqueConstraint("license_number"),
    )
    op.create_index(op.f("ix_doctors_deleted_at"), "doctors", ["deleted_at"], unique=False)

    op.create_table(
        "caretakers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("relationship", sa.String(length=100), nullable=False),
        sa.Column("is_certified", sa.Boolean(), nullable=False),
        sa.Column("certifications", sa.JSON(), nullable=False),
        sa.Column("experience", sa.Integer(), nullable=True),
        sa.Column("specialties", sa.JSON(), nullable=False),
        sa.Column("verification_status", caretaker_verification_status, nullable=False),
        sa.Column("verification_documents", sa.JSON(), nullable=False),
        sa.Column("availability_schedule", sa.JSON(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(op.f("ix_caretakers_deleted_at"), "caretakers", ["deleted_at"], unique=False)

    op.create_table(
        "patients",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("blood_type", blood_type, nullable=False),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("allergies", sa.JSON(), nullable=False),
        sa.Column("chronic_conditions", sa.JSON(), nullable=False),
        sa.Column("emergency_contact", sa.JSON(), nullable=False),
        sa.Column("insurance_provider", sa.String(length=255), nullable=True),
        sa.Column("insurance_number", sa.String(length=100), nullable=True),
        sa.Column("preferred_pharmacy", sa.String(length=255), nullable=True),
        sa.Column("primary_care_doctor_id", sa.Uuid(), nullable=True),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["primary_care_doctor_id"], ["doctors.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(op.f("ix_patients_deleted_at"), "patients", ["deleted_at"], unique=False)

    op.create_table(
        "patient_doctors",
        sa.Column("patient_id", sa.Uuid(), nullable=False),
        sa.Column("doctor_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("patient_id", "doctor_id"),
    )

    op.create_table(
        "patient_caretakers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("patient_id", sa.Uuid(), nullable=False),
        sa.Column("caretaker_id", sa.Uuid(), nullable=False),
        sa.Column("relationship", sa.String(length=100), nullable=False),
        sa.Column("permissions", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["caretaker_id"], ["caretakers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("patient_id", "caretaker_id", name="unq_patient_caretaker"),
    )

    op.create_table(
        "health_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("patient_id", sa.Uuid(), nullable=False),
        sa.Column("doctor_id", sa.Uuid(), nullable=True),
        sa.Column("record_type", record_type, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date_recorded", sa.DateTime(timezone=True), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("attachments", sa.JSON(), nullable=False),
        sa.Column("is_private", sa.Boolean(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("ai_generated", sa.Boolean(), nullable=False),
        sa.Column("ai_confidence_score", sa.Float(), nullable=True),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_health_records_patient_id"), "health_records", ["patient_id"], unique=False)
    op.create_index(op.f("ix_health_records_deleted_at"), "health_records", ["deleted_at"], unique=False)

    op.create_table(
        "medications",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("patient_id", sa.Uuid(), nullable=False),
        sa.Column("prescribed_by", sa.Uuid(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("generic_name", sa.String(length=255), nullable=True),
        sa.Column("dosage", sa.String(length=100), nullable=False),
        sa.Column("form", sa.String(length=50), nullable=True),
        sa.Column("frequency", sa.String(length=100), nullable=False),
        sa.Column("time_schedule", sa.JSON(), nullable=True),
        sa.Column("with_food", sa.Boolean(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("refills", sa.Integer(), nullable=False),
        sa.Column("refills_remaining", sa.Integer(), nullable=False),
        sa.Column("instructions", sa.Text(), nullable=True),
        sa.Column("side_effects", sa.JSON(), nullable=False),
        sa.Column("reactions", sa.JSON(), nullable=False),
        sa.Column("status", medication_status, nullable=False),
        sa.Column("medication_image", sa.String(), nullable=True),
        sa.Column("adherence_rate", sa.Float(), nullable=False),
        sa.Column("ai_reminder_enabled", sa.Boolean(), nullable=False),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["prescribed_by"], ["doctors.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_medications_patient_id"), "medications", ["patient_id"], unique=False)
    op.create_index(op.f("ix_medications_deleted_at"), "medications", ["deleted_at"], unique=False)

    op.create_table(
        "appointments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("patient_id", sa.Uuid(), nullable=False),
        sa.Column("doctor_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", appointment_status, nullable=False),
        sa.Column("appointment_type", appointment_type, nullable=False),
        sa.Column("reason_for_visit", sa.String(length=255), nullable=True),
        sa.Column("symptoms", sa.JSON(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("follow_up_needed", sa.Boolean(), nullable=False),
        sa.Column("follow_up_interval", sa.Integer(), nullable=True),
        sa.Column("sent_reminder", sa.Boolean(), nullable=False),
        sa.Column("video_url", sa.String(), nullable=True),
        sa.Column("insurance_verified", sa.Boolean(), nullable=False),
        sa.Column("copay_amount", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("intake_form_completed", sa.Boolean(), nullable=False),
        sa.Column("ai_summary", sa.Text(), nullable=True),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_appointments_patient_id"), "appointments", ["patient_id"], unique=False)
    op.create_index(op.f("ix_appointments_doctor_id"), "appointments", ["doctor_id"], unique=False)
    op.create_index(op.f("ix_appointments_deleted_at"), "appointments", ["deleted_at"], unique=False)


def downgrade():
    op.drop_table("appointments")
    op.drop_table("medications")
    op.drop_table("health_records")
    op.drop_table("patient_caretakers")
    op.drop_table("patient_doctors")
    op.drop_table("patients")
    op.drop_table("caretakers")
    op.drop_table("doctors")
    op.drop_table("users")

    bind = op.get_bind()
    for enum in (
        appointment_type,
        appointment_status,
        medication_status,
        record_type,
        caretaker_verification_status,
        doctor_verification_status,
        blood_type,
        user_gender,
        user_role,
    ):
        enum.drop(bind, checkfirst=True)
